"""Ecommerce views"""

import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpResponseRedirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext as _
from django.views import View
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ecommerce.api import apply_coupon_code, establish_basket, remove_coupon_code
from ecommerce.exceptions import CouponInvalidError, CouponNotFoundError
from ecommerce.serializers import BasketDiscountSerializer, CouponCodeSerializer
from main.form_factory import get_form_factory
from main.forms import ERROR_MESSAGE_FIELD

log = logging.getLogger(__name__)


class CouponCodeView(LoginRequiredMixin, View):
    """
    Handles the coupon code form of the cart page.

    On success the user goes to the form's success_url; otherwise back to the page
    they came from with an error message.
    """

    http_method_names = ["post"]

    def get_error_url(self):
        referer = self.request.META.get("HTTP_REFERER")

        if referer and url_has_allowed_host_and_scheme(
            referer, allowed_hosts={self.request.get_host()}
        ):
            return referer

        return settings.ECOMMERCE_CART_URL

    def post(self, request, *args, **kwargs):  # noqa: ARG002
        form = get_form_factory(request).create_form("coupon_code", data=request.POST)

        if form.is_valid():
            basket = establish_basket(request)

            try:
                basket_coupon = apply_coupon_code(
                    basket, form.cleaned_data["coupon_code"], request.user
                )
            except (CouponNotFoundError, CouponInvalidError) as exc:
                form.set_error_message(str(exc))
            else:
                messages.success(
                    request,
                    _("Coupon %(code)s applied.")
                    % {"code": basket_coupon.redeemed_coupon.code},
                )
                return HttpResponseRedirect(form.get_success_url())
        else:
            form.set_error_message(_("Please enter a valid coupon code."))

        error_message = form[ERROR_MESSAGE_FIELD].value() or form.get_error_message()
        log.debug("Coupon form failed for %s: %s", request.user, form.get_error_message())
        messages.error(request, error_message)

        return HttpResponseRedirect(self.get_error_url())


class BasketDiscountView(APIView):
    """Returns the coupons applied to the user's basket and the resulting discount"""

    permission_classes = (IsAuthenticated,)

    def get(self, request, *args, **kwargs):  # noqa: ARG002
        basket = establish_basket(request)

        return Response(BasketDiscountSerializer(basket).data)


class BasketCouponView(APIView):
    """Applies coupons to the user's basket"""

    permission_classes = (IsAuthenticated,)

    def post(self, request, *args, **kwargs):  # noqa: ARG002
        serializer = CouponCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        basket = establish_basket(request)

        try:
            apply_coupon_code(basket, serializer.validated_data["code"], request.user)
        except CouponNotFoundError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CouponInvalidError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            BasketDiscountSerializer(basket).data, status=status.HTTP_201_CREATED
        )


class BasketCouponDetailView(APIView):
    """Removes a coupon from the user's basket"""

    permission_classes = (IsAuthenticated,)

    def delete(self, request, code, *args, **kwargs):  # noqa: ARG002
        basket = establish_basket(request)

        try:
            remove_coupon_code(basket, code)
        except CouponNotFoundError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(BasketDiscountSerializer(basket).data, status=status.HTTP_200_OK)
