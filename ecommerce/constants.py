"""Constants for ecommerce."""
from decimal import Decimal

COUPON_TYPE_AMOUNT_OFF = "amount-off"
COUPON_TYPE_PERCENT_OFF = "percent-off"

ALL_COUPON_TYPES = [
    COUPON_TYPE_AMOUNT_OFF,
    COUPON_TYPE_PERCENT_OFF,
]
COUPON_TYPES = list(zip(ALL_COUPON_TYPES, ALL_COUPON_TYPES))

ZERO_DISCOUNT = Decimal("0.00")

COUPON_CODE_MAX_LENGTH = 50
