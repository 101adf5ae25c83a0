"""Tests for the plugin manager"""

from main.plugin_manager import get_plugin_manager


def test_get_plugin_manager_has_form_hooks():
    """The plugin manager knows about the form build hooks"""
    pm = get_plugin_manager()

    assert pm.project_name == "storefront"
    assert hasattr(pm.hook, "form_before_build")
    assert hasattr(pm.hook, "form_after_build")
