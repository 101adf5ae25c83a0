"""Ecommerce APIs"""

import logging

from django.conf import settings
from django.db import transaction
from mitol.common.utils.datetime import now_in_utc

from ecommerce.adapters import BasketCouponAdapter
from ecommerce.discounts import CouponManager
from ecommerce.exceptions import CouponInvalidError, CouponNotFoundError
from ecommerce.models import Basket, BasketCoupon, Coupon

log = logging.getLogger(__name__)


def establish_basket(request):
    """
    Gets or creates the user's basket. New baskets start with the default
    postage price.
    """
    user = request.user
    (basket, is_new) = Basket.objects.get_or_create(
        user=user,
        defaults={"postage_price": settings.ECOMMERCE_DEFAULT_POSTAGE_PRICE},
    )

    if is_new:
        log.debug("Created basket %s for %s", basket.id, user)

    return basket


def apply_coupon_code(basket, code, user):
    """
    Applies the coupon with the given code to the basket.

    Args:
        - basket (Basket): the basket to apply the coupon to
        - code (str): the coupon code the user entered (case doesn't matter)
        - user (User): the user applying the coupon

    Returns:
        BasketCoupon: the applied coupon

    Raises:
        CouponNotFoundError: if there's no coupon with this code
        CouponInvalidError: if the coupon can't be used now, or is already applied
    """
    code = code.strip()
    coupon = Coupon.objects.filter(code__iexact=code).first()

    if coupon is None:
        msg = f"Coupon code {code} does not exist."
        raise CouponNotFoundError(msg)

    if not coupon.valid_now():
        msg = f"Coupon code {coupon.code} is not valid right now."
        raise CouponInvalidError(msg)

    with transaction.atomic():
        (basket_coupon, is_new) = BasketCoupon.objects.select_for_update().get_or_create(
            redeemed_basket=basket,
            redeemed_coupon=coupon,
            defaults={"redeemed_by": user, "redemption_date": now_in_utc()},
        )

    if not is_new:
        msg = f"Coupon code {coupon.code} is already applied to this basket."
        raise CouponInvalidError(msg)

    log.info("Applied coupon %s to basket %s for %s", coupon.code, basket.id, user)

    return basket_coupon


def remove_coupon_code(basket, code):
    """
    Removes the coupon with the given code from the basket.

    Raises:
        CouponNotFoundError: if no coupon with this code is applied to the basket
    """
    code = code.strip()

    with transaction.atomic():
        (deleted, _) = BasketCoupon.objects.filter(
            redeemed_basket=basket, redeemed_coupon__code__iexact=code
        ).delete()

    if deleted == 0:
        msg = f"Coupon code {code} is not applied to this basket."
        raise CouponNotFoundError(msg)

    log.info("Removed coupon %s from basket %s", code, basket.id)


def get_basket_discount(basket):
    """
    Returns the checkout discount for the coupons applied to the basket.

    Returns:
        Decimal: zero, or the (negative) amount to take off the order
    """
    return CouponManager(BasketCouponAdapter(basket)).get_discount()
