"""Plugin manager for the storefront."""

import pluggy

from main import hookspecs as form_hookspecs


def get_plugin_manager():
    """Return the plugin manager for the app."""

    pm = pluggy.PluginManager("storefront")

    pm.add_hookspecs(form_hookspecs)

    pm.load_setuptools_entrypoints("storefront")
    return pm
