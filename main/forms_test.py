"""Tests for the base form"""

import pluggy
import pytest
from django import forms

from main import hookspecs
from main.exceptions import FormViewNotCreatedError
from main.forms import (
    CSRF_TOKEN_FIELD,
    ERROR_MESSAGE_FIELD,
    SUCCESS_URL_FIELD,
    BaseForm,
    NullFormEvents,
    PluginFormEvents,
)

hookimpl = pluggy.HookimplMarker("storefront")


class ContactForm(BaseForm):
    """Simple form used by the tests"""

    name = "contact"

    def build_form(self):
        self.fields["email"] = forms.EmailField()
        self.fields["origin"] = forms.CharField(widget=forms.HiddenInput, required=False)


class UnnamedForm(ContactForm):
    name = ""


class OwnSuccessUrlForm(ContactForm):
    name = "own_success_url"

    def build_form(self):
        super().build_form()
        self.fields[SUCCESS_URL_FIELD] = forms.URLField(widget=forms.HiddenInput)


class RecordingPlugin:
    """Records the build events and what the form looked like at the time"""

    def __init__(self):
        self.calls = []

    @hookimpl
    def form_before_build(self, form, name):
        self.calls.append(("before", name, sorted(form.fields)))
        form.fields["newsletter"] = forms.BooleanField(required=False)

    @hookimpl
    def form_after_build(self, form, name):
        self.calls.append(("after", name, sorted(form.fields)))


@pytest.fixture
def plugin():
    return RecordingPlugin()


@pytest.fixture
def plugin_manager(plugin):
    pm = pluggy.PluginManager("storefront")
    pm.add_hookspecs(hookspecs)
    pm.register(plugin)
    return pm


@pytest.fixture
def request_(rf):
    return rf.post("/contact/")


def test_for_request_builds_fields(request_):
    """The form has its own fields plus the standard hidden ones"""
    form = ContactForm.for_request(request_)

    assert isinstance(form.events, NullFormEvents)
    assert list(form.fields) == [
        "email",
        "origin",
        SUCCESS_URL_FIELD,
        ERROR_MESSAGE_FIELD,
        CSRF_TOKEN_FIELD,
    ]
    assert isinstance(form.fields[SUCCESS_URL_FIELD].widget, forms.HiddenInput)
    assert isinstance(form.fields[ERROR_MESSAGE_FIELD].widget, forms.HiddenInput)
    assert form.fields[CSRF_TOKEN_FIELD].initial


def test_csrf_protection_disabled(request_):
    """No token field is added if CSRF protection is off"""
    form = ContactForm.for_request(request_, csrf_protection=False)

    assert CSRF_TOKEN_FIELD not in form.fields


def test_form_kwargs_passed_through(request_):
    """Regular Django form arguments still work"""
    form = ContactForm.for_request(
        request_, initial={"email": "a@example.com"}, prefix="contact"
    )

    assert form.initial == {"email": "a@example.com"}
    assert form.prefix == "contact"


def test_own_success_url_field_kept(request_):
    """A form defining its own success_url field keeps it"""
    form = OwnSuccessUrlForm.for_request(request_)

    assert isinstance(form.fields[SUCCESS_URL_FIELD], forms.URLField)


def test_with_events_dispatches(request_, plugin, plugin_manager):
    """Build events are dispatched around build_form"""
    form = ContactForm.with_events(request_, plugin_manager=plugin_manager)

    assert isinstance(form.events, PluginFormEvents)
    assert plugin.calls == [
        ("before", "contact", []),
        ("after", "contact", ["email", "newsletter", "origin"]),
    ]
    assert "newsletter" in form.fields


def test_with_events_default_plugin_manager(mocker, request_, plugin_manager):
    """The app's plugin manager is used if none is given"""
    get_plugin_manager = mocker.patch(
        "main.forms.get_plugin_manager", return_value=plugin_manager
    )

    form = ContactForm.with_events(request_)

    get_plugin_manager.assert_called_once_with()
    assert form.events.plugin_manager is plugin_manager


def test_unnamed_form_dispatches_nothing(request_, plugin, plugin_manager):
    """Forms without a name don't send build events"""
    UnnamedForm.with_events(request_, plugin_manager=plugin_manager)

    assert plugin.calls == []


def test_build_form_required(request_):
    """Subclasses have to implement build_form"""
    with pytest.raises(NotImplementedError):
        BaseForm.for_request(request_)


def test_type_and_request(request_):
    """The form keeps its type and request"""
    form = ContactForm.for_request(request_, form_type="inline")

    assert form.get_type() == "inline"
    assert form.get_request() is request_
    assert ContactForm.for_request(request_).get_type() == "form"


def test_template_hidden_fields(request_):
    """success_url and error_message are left to the template"""
    form = ContactForm.for_request(request_)

    assert [field.name for field in form.template_hidden_fields()] == [
        "origin",
        CSRF_TOKEN_FIELD,
    ]
    assert form.is_template_defined_hidden_field(form[SUCCESS_URL_FIELD]) is True
    assert form.is_template_defined_hidden_field(form[ERROR_MESSAGE_FIELD]) is True
    assert form.is_template_defined_hidden_field(form["origin"]) is False


@pytest.mark.parametrize(
    "data,default,expected",
    [
        ({SUCCESS_URL_FIELD: "/done/"}, None, "http://testserver/done/"),
        ({SUCCESS_URL_FIELD: "/done/"}, "/other/", "http://testserver/done/"),
        ({}, "/other/", "http://testserver/other/"),
        ({}, None, "http://testserver/home/"),
        ({SUCCESS_URL_FIELD: ""}, None, "http://testserver/home/"),
        (
            {SUCCESS_URL_FIELD: "https://evil.example.com/"},
            None,
            "http://testserver/home/",
        ),
    ],
)
def test_get_success_url(rf, settings, data, default, expected):
    """get_success_url prefers the submitted url, then the default, then the setting"""
    settings.FORMS_DEFAULT_SUCCESS_URL = "/home/"
    request = rf.post("/contact/", data)

    form = ContactForm.for_request(request, request.POST)

    assert form.get_success_url(default) == expected


def test_view(request_):
    """get_view only works once create_view has been called"""
    form = ContactForm.for_request(request_)

    with pytest.raises(FormViewNotCreatedError):
        form.get_view()

    assert form.create_view() is form
    view = form.get_view()
    assert list(view) == list(form.fields)
    assert view["email"].name == "email"


def test_error_status(request_):
    """The form error status and message can be set"""
    form = ContactForm.for_request(request_)

    assert form.has_form_error() is False
    assert form.get_error_message() == ""

    assert form.set_error() is form
    assert form.has_form_error() is True

    form.set_error(False)
    assert form.has_form_error() is False

    assert form.set_error_message("Something went wrong") is form
    assert form.has_form_error() is True
    assert form.get_error_message() == "Something went wrong"


def test_validation(rf):
    """The form validates like any Django form"""
    request = rf.post("/contact/", {"email": "not an email"})

    form = ContactForm.for_request(request, request.POST)

    assert form.is_valid() is False
    assert "email" in form.errors

    request = rf.post("/contact/", {"email": "a@example.com"})
    form = ContactForm.for_request(request, request.POST)

    assert form.is_valid() is True
    assert form.cleaned_data["email"] == "a@example.com"
