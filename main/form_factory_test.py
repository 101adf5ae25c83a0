"""Tests for the form factory"""

import pluggy
import pytest

from ecommerce.forms import CouponCodeForm
from main import hookspecs
from main.exceptions import FormNotFoundError
from main.form_factory import FormFactory, get_form_factory
from main.forms import PluginFormEvents


@pytest.fixture
def plugin_manager():
    pm = pluggy.PluginManager("storefront")
    pm.add_hookspecs(hookspecs)
    return pm


@pytest.mark.parametrize("definition", [CouponCodeForm, "ecommerce.forms.CouponCodeForm"])
def test_create_form(rf, plugin_manager, definition):
    """Forms can be registered by class or by dotted path"""
    request = rf.post("/", {"coupon_code": "ABC"})
    factory = FormFactory(request, {"coupon": definition}, plugin_manager)

    form = factory.create_form("coupon", "inline", request.POST, csrf_protection=False)

    assert isinstance(form, CouponCodeForm)
    assert isinstance(form.events, PluginFormEvents)
    assert form.events.plugin_manager is plugin_manager
    assert form.get_request() is request
    assert form.get_type() == "inline"
    assert form.is_valid() is True
    assert form.cleaned_data["coupon_code"] == "ABC"


def test_create_form_unknown_name(rf, plugin_manager):
    """Asking for a form that doesn't exist raises FormNotFoundError"""
    factory = FormFactory(rf.get("/"), {}, plugin_manager)

    with pytest.raises(FormNotFoundError) as exc_info:
        factory.create_form("missing")

    assert str(exc_info.value) == "The form 'missing' doesn't exist"
    assert isinstance(exc_info.value, LookupError)


def test_get_form_factory(rf, settings):
    """get_form_factory uses the FORM_DEFINITIONS setting"""
    settings.FORM_DEFINITIONS = {"coupon_code": "ecommerce.forms.CouponCodeForm"}
    request = rf.get("/")

    factory = get_form_factory(request)

    assert factory.request is request
    assert factory.get_form_class("coupon_code") is CouponCodeForm
    assert factory.plugin_manager is None
