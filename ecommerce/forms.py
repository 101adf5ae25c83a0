from django import forms
from django.utils.translation import gettext_lazy as _

from ecommerce.constants import COUPON_CODE_MAX_LENGTH
from main.forms import BaseForm


class CouponCodeForm(BaseForm):
    """Form the user submits a coupon code with, on the cart page."""

    name = "coupon_code"

    def build_form(self):
        self.fields["coupon_code"] = forms.CharField(
            label=_("Coupon code"),
            max_length=COUPON_CODE_MAX_LENGTH,
            required=True,
        )
