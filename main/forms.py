"""Base form classes for storefront forms"""

import logging

from django import forms
from django.conf import settings
from django.middleware.csrf import get_token
from django.utils.http import url_has_allowed_host_and_scheme

from main.exceptions import FormViewNotCreatedError
from main.plugin_manager import get_plugin_manager

log = logging.getLogger(__name__)

SUCCESS_URL_FIELD = "success_url"
ERROR_MESSAGE_FIELD = "error_message"
CSRF_TOKEN_FIELD = "csrfmiddlewaretoken"

# these are rendered by the page template itself, with values set there
TEMPLATE_DEFINED_HIDDEN_FIELDS = (SUCCESS_URL_FIELD, ERROR_MESSAGE_FIELD)


class NullFormEvents:
    """Form events for forms built straight from a request. Nothing is dispatched."""

    def before_build(self, form):
        pass

    def after_build(self, form):
        pass


class PluginFormEvents:
    """Dispatches form build events to the plugins registered with a plugin manager."""

    def __init__(self, plugin_manager):
        self.plugin_manager = plugin_manager

    def before_build(self, form):
        self.plugin_manager.hook.form_before_build(form=form, name=form.name)

    def after_build(self, form):
        self.plugin_manager.hook.form_after_build(form=form, name=form.name)


class BaseForm(forms.Form):
    """
    Base class for storefront forms.

    Subclasses set a unique ``name`` and add their fields in ``build_form``.
    Every form gets two hidden fields the page template fills in:
    ``success_url`` (where to go once the form is processed) and
    ``error_message`` (shown instead of the generic message if the form fails).
    CSRF protected forms also carry Django's CSRF token as a hidden field; the
    token itself is checked by CsrfViewMiddleware.

    Don't call the constructor directly, use ``for_request`` or ``with_events``
    (or main.form_factory.FormFactory, which picks the right one).
    """

    name = None

    def __init__(
        self,
        request,
        data=None,
        *,
        form_type="form",
        events=None,
        csrf_protection=True,
        **kwargs,
    ):
        super().__init__(data=data, **kwargs)

        self.request = request
        self.form_type = form_type
        self.events = events or NullFormEvents()

        self._view = None
        self._has_error = False
        self._error_message = ""

        if self.name:
            self.events.before_build(self)

        self.build_form()

        if self.name:
            self.events.after_build(self)

        if SUCCESS_URL_FIELD not in self.fields:
            self.fields[SUCCESS_URL_FIELD] = forms.CharField(
                widget=forms.HiddenInput, required=False
            )

        if ERROR_MESSAGE_FIELD not in self.fields:
            self.fields[ERROR_MESSAGE_FIELD] = forms.CharField(
                widget=forms.HiddenInput, required=False
            )

        if csrf_protection:
            self.fields[CSRF_TOKEN_FIELD] = forms.CharField(
                widget=forms.HiddenInput,
                required=False,
                initial=get_token(request),
            )

    @classmethod
    def for_request(cls, request, data=None, **kwargs):
        """
        Build the form from the request alone. No build events are dispatched.

        Args:
            request (HttpRequest): the current request
            data (QueryDict or dict or None): submitted data, if any
            kwargs: form_type, csrf_protection and any django.forms.Form argument

        Returns:
            BaseForm: the form
        """
        return cls(request, data, events=NullFormEvents(), **kwargs)

    @classmethod
    def with_events(cls, request, data=None, *, plugin_manager=None, **kwargs):
        """
        Build the form, dispatching the form_before_build and form_after_build
        hooks to the plugins of the given plugin manager (or the app's one).

        Args:
            request (HttpRequest): the current request
            data (QueryDict or dict or None): submitted data, if any
            plugin_manager (pluggy.PluginManager or None): where to send build events
            kwargs: form_type, csrf_protection and any django.forms.Form argument

        Returns:
            BaseForm: the form
        """
        if plugin_manager is None:
            plugin_manager = get_plugin_manager()

        return cls(request, data, events=PluginFormEvents(plugin_manager), **kwargs)

    def build_form(self):
        """
        Add the fields of the form to self.fields, e.g.

            self.fields["email"] = forms.EmailField(label=_("Email"))
        """
        raise NotImplementedError

    def get_type(self):
        return self.form_type

    def get_request(self):
        return self.request

    def is_template_defined_hidden_field(self, bound_field):
        """
        Returns True if the value of this hidden field is set by the HTML template
        rather than the form, so it mustn't be rendered along with the other hidden
        fields (it would end up in the page twice).
        """
        return bound_field.name in TEMPLATE_DEFINED_HIDDEN_FIELDS

    def template_hidden_fields(self):
        """Returns the hidden fields a template should render for this form."""
        return [
            bound_field
            for bound_field in self.hidden_fields()
            if not self.is_template_defined_hidden_field(bound_field)
        ]

    def get_success_url(self, default=None):
        """
        Returns the absolute URL to redirect the user to once the form has been
        processed.

        Args:
            default (str or None): used if the form has no success_url. Falls back to
                the FORMS_DEFAULT_SUCCESS_URL setting.

        Returns:
            str: an absolute URL
        """
        success_url = self[SUCCESS_URL_FIELD].value()

        if success_url and not url_has_allowed_host_and_scheme(
            success_url, allowed_hosts={self.request.get_host()}
        ):
            log.warning("Ignoring off-site success_url %s for %s", success_url, self.name)
            success_url = None

        if not success_url:
            if default is None:
                default = settings.FORMS_DEFAULT_SUCCESS_URL

            success_url = default

        return self.request.build_absolute_uri(success_url)

    def create_view(self):
        self._view = {name: self[name] for name in self.fields}

        return self

    def get_view(self):
        """
        Returns the bound fields of the form, keyed by field name.

        Raises:
            FormViewNotCreatedError: if create_view() wasn't called first
        """
        if self._view is None:
            msg = "View was not created. Please call create_view() first."
            raise FormViewNotCreatedError(msg)

        return self._view

    def set_error(self, has_error=True):
        self._has_error = has_error

        return self

    def has_form_error(self):
        """Returns True if the form as a whole has been flagged as failed."""
        return self._has_error

    def set_error_message(self, message):
        """Flags the form as failed with the given message."""
        self.set_error(True)
        self._error_message = message

        return self

    def get_error_message(self):
        return self._error_message
