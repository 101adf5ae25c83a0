"""
Django app
"""
from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class RootConfig(AppConfig):
    """AppConfig for the storefront project"""

    name = "main"

    def ready(self):
        from mitol.common import envs

        envs.validate()
        self.check_form_definitions()

    def check_form_definitions(self):
        """Every entry of FORM_DEFINITIONS must resolve to a form registered under the same name"""
        from django.conf import settings

        from main.form_factory import FormFactory
        from main.forms import BaseForm

        factory = FormFactory(None, settings.FORM_DEFINITIONS)

        for name in settings.FORM_DEFINITIONS:
            try:
                form_class = factory.get_form_class(name)
            except ImportError as exc:
                msg = f"Form '{name}' can't be imported: {exc}"
                raise ImproperlyConfigured(msg) from exc

            if not (isinstance(form_class, type) and issubclass(form_class, BaseForm)):
                msg = f"Form '{name}' must be a subclass of main.forms.BaseForm"
                raise ImproperlyConfigured(msg)

            if form_class.name != name:
                msg = f"Form '{name}' is registered under a different name ({form_class.name})"
                raise ImproperlyConfigured(msg)
