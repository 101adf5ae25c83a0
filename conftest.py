"""Project conftest"""

from decimal import Decimal

import pytest

from fixtures.common import *  # noqa: F403


@pytest.fixture(autouse=True)
def default_settings(monkeypatch, settings):  # noqa: PT004
    """Set default settings for all tests"""
    monkeypatch.setenv("DJANGO_SETTINGS_MODULE", "main.settings")

    settings.ECOMMERCE_DEFAULT_POSTAGE_PRICE = Decimal("5.00")
    settings.FORMS_DEFAULT_SUCCESS_URL = "/"


def pytest_addoption(parser):
    """Pytest hook that adds command line parameters"""
    parser.addoption(
        "--simple",
        action="store_true",
        help="Run tests only (no cov, warning output silenced)",
    )


def pytest_configure(config):
    """Pytest hook to perform some initial configuration"""
    if config.option.simple is True:
        # NOTE: These plugins are already configured by the time the pytest_cmdline_main hook is run, so we can't
        #       simply add/alter the command line options in that hook. This hook is being used to
        #       reconfigure/unregister plugins that we can't change via the pytest_cmdline_main hook.
        # Switch off coverage plugin
        cov = config.pluginmanager.get_plugin("_cov")
        if cov is not None:
            cov.options.no_cov = True
        # Remove warnings plugin to suppress warnings
        if config.pluginmanager.has_plugin("warnings"):
            warnings_plugin = config.pluginmanager.get_plugin("warnings")
            config.pluginmanager.unregister(warnings_plugin)
