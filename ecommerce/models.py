from decimal import Decimal

import reversion
from django.conf import settings
from django.db import models
from django.db.models.functions import Lower
from django.utils.functional import cached_property
from mitol.common.models import TimestampedModel
from mitol.common.utils.datetime import now_in_utc

from ecommerce.constants import (
    COUPON_CODE_MAX_LENGTH,
    COUPON_TYPE_AMOUNT_OFF,
    COUPON_TYPE_PERCENT_OFF,
    COUPON_TYPES,
)


class ProductsQuerySet(models.QuerySet):
    """Queryset to block delete and instead mark the items in_active"""

    def delete(self):
        self.update(is_active=False)


class ActiveUndeleteManager(models.Manager):
    """Query manager for active objects"""

    def get_queryset(self):
        """Getting the active queryset for manager"""
        return ProductsQuerySet(self.model, using=self._db).filter(is_active=True)


@reversion.register(exclude=("created_on", "updated_on"))
class Product(TimestampedModel):
    """Representation of a purchasable product."""

    description = models.TextField()
    price = models.DecimalField(max_digits=7, decimal_places=2)
    is_active = models.BooleanField(
        default=True,
        null=False,
        help_text="Controls visibility of the product in the app.",
    )

    objects = ActiveUndeleteManager()
    all_objects = models.Manager()

    def delete(self):
        self.is_active = False
        self.save(update_fields=("is_active",))

    def __str__(self):
        return f"#{self.id} {self.description} {self.price}"


@reversion.register(exclude=("created_on", "updated_on"))
class Coupon(TimestampedModel):
    """
    A code the user can enter at checkout.

    Only is_cumulative and is_removing_postage are used to work out the checkout
    discount (see ecommerce.discounts); the type and amount describe the coupon.
    """

    code = models.CharField(max_length=COUPON_CODE_MAX_LENGTH, unique=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    coupon_type = models.CharField(choices=COUPON_TYPES, max_length=30)
    amount = models.DecimalField(decimal_places=5, max_digits=20, default=0)
    is_cumulative = models.BooleanField(
        default=False,
        help_text="If set, this coupon can be combined with other coupons.",
    )
    is_removing_postage = models.BooleanField(
        default=False,
        help_text="If set, this coupon waives the shipping cost of the order.",
    )
    is_enabled = models.BooleanField(default=True)
    start_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="If set, this coupon will not be usable before this date.",
    )
    expiration_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="If set, this coupon will not be usable after this date.",
    )

    class Meta:
        constraints = [
            # codes are entered and looked up without regard to case
            models.UniqueConstraint(Lower("code"), name="unique_coupon_code_ci"),
        ]

    def __str__(self):
        return f"{self.code} - {self.title}"

    def valid_now(self):
        """Returns True if the coupon can be used right now"""
        if not self.is_enabled:
            return False

        now = now_in_utc()

        if self.start_date is not None and self.start_date > now:
            return False

        if self.expiration_date is not None and self.expiration_date <= now:
            return False

        return True

    def friendly_format(self):
        amount = "{:.2f}".format(self.amount)

        if self.coupon_type == COUPON_TYPE_PERCENT_OFF:
            description = f"{amount}% off"
        elif self.coupon_type == COUPON_TYPE_AMOUNT_OFF:
            description = f"${amount} off"
        else:
            description = "Indeterminate Coupon"

        if self.is_removing_postage:
            description = f"{description}, free shipping"

        return description


class Basket(TimestampedModel):
    """Represents a User's basket."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="basket"
    )
    postage_price = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Shipping cost for the current contents of the basket.",
    )

    def __str__(self):
        return f"Basket for {self.user}"

    def get_products(self):
        """
        Returns the products that have been added to the basket so far.
        """

        return [item.product for item in self.basket_items.all()]

    def get_coupons(self):
        """
        Returns the coupons applied to the basket, in the order they were applied.
        """

        return [
            basket_coupon.redeemed_coupon
            for basket_coupon in self.coupons.select_related(
                "redeemed_coupon"
            ).order_by("redemption_date", "id")
        ]

    @property
    def subtotal_price(self):
        """Returns the price of the items in the basket."""
        return sum(
            (item.base_price for item in self.basket_items.select_related("product")),
            Decimal("0.00"),
        )

    @property
    def total_price(self):
        """Returns the order total before any discount, shipping included."""
        return self.subtotal_price + self.postage_price


class BasketItem(TimestampedModel):
    """Represents one or more products in a user's basket."""

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="basket_item"
    )
    basket = models.ForeignKey(
        Basket, on_delete=models.CASCADE, related_name="basket_items"
    )
    quantity = models.PositiveIntegerField(default=1)

    def __str__(self):
        return f"{self.quantity} x {self.product}"

    @cached_property
    def base_price(self):
        """Returns the total price of the basket item."""
        return self.product.price * self.quantity


class BasketCoupon(TimestampedModel):
    """A coupon applied to a basket."""

    redeemed_basket = models.ForeignKey(
        Basket, on_delete=models.CASCADE, related_name="coupons"
    )
    redeemed_coupon = models.ForeignKey(
        Coupon, on_delete=models.CASCADE, related_name="basket_redemptions"
    )
    redeemed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    redemption_date = models.DateTimeField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["redeemed_basket", "redeemed_coupon"],
                name="unique_basket_coupon",
            )
        ]

    def __str__(self):
        return f"{self.redeemed_coupon.code} on {self.redeemed_basket}"
