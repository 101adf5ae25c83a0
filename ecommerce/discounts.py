"""Checkout discounts granted by coupons"""

import logging
from decimal import Decimal

from ecommerce.adapters import CouponAdapter, StaticCouponAdapter
from ecommerce.constants import ZERO_DISCOUNT

log = logging.getLogger(__name__)


def sort_coupons(coupons):
    """
    Returns the coupons to keep. A coupon that isn't cumulative cancels the ones
    before it, so at most the last non-cumulative coupon is kept.

    Cumulative coupons are never kept.

    Args:
        coupons (iterable of Coupon): coupons in the order they were applied

    Returns:
        list of Coupon: the coupons kept
    """
    coupons_kept = []

    for coupon in coupons:
        if not coupon.is_cumulative:
            coupons_kept = [coupon]

    return coupons_kept


def is_coupon_removing_postage(coupons_kept):
    """Returns True if any of the kept coupons waives the shipping cost"""
    return any(coupon.is_removing_postage for coupon in coupons_kept)


class CouponManager:
    """
    Works out the discount the current coupons give on a checkout.

    The coupons are read from the adapter once, when the manager is created.
    The postage and total prices are only read from it when they're needed.

    Args:
        adapter (CouponAdapter): provides the coupons and the checkout prices
    """

    def __init__(self, adapter: CouponAdapter):
        self.adapter = adapter
        self.coupons = list(adapter.get_current_coupons())

    def get_discount(self) -> Decimal:
        """
        Returns the checkout discount. It's zero or negative: a negative value is
        the amount to take off the order.
        """
        discount = ZERO_DISCOUNT

        if len(self.coupons) > 0:
            coupons_kept = self.sort_coupons()

            if self.is_coupon_removing_postage(coupons_kept):
                postage = self.adapter.get_checkout_postage_price()
                discount -= postage

            # just in case
            if discount >= self.adapter.get_checkout_total_price():
                discount = ZERO_DISCOUNT

        log.debug(
            "Discount for %d coupon(s) on checkout: %s", len(self.coupons), discount
        )

        return discount

    def sort_coupons(self):
        return sort_coupons(self.coupons)

    def is_coupon_removing_postage(self, coupons_kept):
        return is_coupon_removing_postage(coupons_kept)


def compute_discount(coupons, postage, total) -> Decimal:
    """
    Returns the discount the coupons give on a checkout with the given postage
    and total prices.

    Args:
        coupons (iterable of Coupon): coupons in the order they were applied
        postage (Decimal or int or float): the shipping cost, converted to Decimal
        total (Decimal or int or float): the order total before the discount

    Returns:
        Decimal: zero, or the (negative) amount to take off the order
    """
    return CouponManager(StaticCouponAdapter(coupons, postage, total)).get_discount()
