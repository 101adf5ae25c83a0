"""Exceptions for ecommerce app."""


class CouponNotFoundError(Exception):
    """Raised if there's no coupon for the code the user supplied."""


class CouponInvalidError(Exception):
    """
    Raised if the coupon exists but can't be used right now: it's disabled,
    outside of its validity window, or already applied to the basket.
    """
