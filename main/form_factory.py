"""Creates storefront forms by name"""

from django.conf import settings
from django.utils.module_loading import import_string

from main.exceptions import FormNotFoundError


class FormFactory:
    """
    Instantiates named forms for a request.

    Args:
        request (HttpRequest): the current request
        form_definitions (dict): form name -> form class, or its dotted path
        plugin_manager (pluggy.PluginManager or None): receives the form build
            events; None means the app's plugin manager
    """

    def __init__(self, request, form_definitions, plugin_manager=None):
        self.request = request
        self.form_definitions = form_definitions
        self.plugin_manager = plugin_manager

    def get_form_class(self, name):
        """
        Returns the form class registered under name.

        Raises:
            FormNotFoundError: if there's no form with that name
        """
        try:
            definition = self.form_definitions[name]
        except KeyError as exc:
            msg = f"The form '{name}' doesn't exist"
            raise FormNotFoundError(msg) from exc

        if isinstance(definition, str):
            return import_string(definition)

        return definition

    def create_form(self, name, form_type="form", data=None, **options):
        """
        Creates the named form.

        Args:
            name (str): the registered name of the form
            form_type (str): the form type label
            data (QueryDict or dict or None): submitted data, if any
            options: csrf_protection and any django.forms.Form argument (initial, prefix...)

        Returns:
            BaseForm: the form
        """
        form_class = self.get_form_class(name)

        return form_class.with_events(
            self.request,
            data,
            plugin_manager=self.plugin_manager,
            form_type=form_type,
            **options,
        )


def get_form_factory(request):
    """Returns a FormFactory for the request, using the FORM_DEFINITIONS setting"""
    return FormFactory(request, settings.FORM_DEFINITIONS)
