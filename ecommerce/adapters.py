"""Sources of the coupons and checkout prices the CouponManager works on"""

import abc
from decimal import Decimal


def to_decimal(value):
    """Returns value as a Decimal, going through str so floats keep their printed value"""
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


class CouponAdapter(abc.ABC):
    """Provides the values the CouponManager needs from a checkout"""

    @abc.abstractmethod
    def get_current_coupons(self):
        """Returns the coupons applied to the checkout, in the order they were applied"""

    @abc.abstractmethod
    def get_checkout_postage_price(self) -> Decimal:
        """Returns the shipping cost of the checkout"""

    @abc.abstractmethod
    def get_checkout_total_price(self) -> Decimal:
        """Returns the total of the checkout, before any discount"""


class StaticCouponAdapter(CouponAdapter):
    """Adapter over values that are already known. Prices are converted to Decimal."""

    def __init__(self, coupons, postage, total):
        self.coupons = list(coupons)
        self.postage = to_decimal(postage)
        self.total = to_decimal(total)

    def get_current_coupons(self):
        return self.coupons

    def get_checkout_postage_price(self):
        return self.postage

    def get_checkout_total_price(self):
        return self.total


class BasketCouponAdapter(CouponAdapter):
    """Adapter over a user's Basket"""

    def __init__(self, basket):
        self.basket = basket

    def get_current_coupons(self):
        return self.basket.get_coupons()

    def get_checkout_postage_price(self):
        return self.basket.postage_price

    def get_checkout_total_price(self):
        return self.basket.total_price
