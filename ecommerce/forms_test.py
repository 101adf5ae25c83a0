import pytest

from ecommerce.forms import CouponCodeForm
from main.forms import ERROR_MESSAGE_FIELD, SUCCESS_URL_FIELD


@pytest.mark.parametrize(
    "code,is_valid",
    [("SUMMER", True), ("  SUMMER ", True), ("", False), ("x" * 51, False)],
)
def test_coupon_code_form(rf, code, is_valid):
    """The coupon code is required and limited in length"""
    request = rf.post("/checkout/coupon/", {"coupon_code": code})

    form = CouponCodeForm.for_request(request, request.POST)

    assert form.is_valid() is is_valid
    if is_valid:
        assert form.cleaned_data["coupon_code"] == "SUMMER"


def test_coupon_code_form_fields(rf):
    """The coupon form carries the standard hidden fields"""
    form = CouponCodeForm.for_request(rf.get("/cart/"))

    assert CouponCodeForm.name == "coupon_code"
    assert {"coupon_code", SUCCESS_URL_FIELD, ERROR_MESSAGE_FIELD} <= set(form.fields)
