"""Admin management for Ecommerce module"""

from django.contrib import admin
from django.contrib.admin.decorators import display
from mitol.common.admin import TimestampedModelAdmin
from reversion.admin import VersionAdmin

from ecommerce.api import get_basket_discount
from ecommerce.models import Basket, BasketCoupon, BasketItem, Coupon, Product


@admin.register(Product)
class ProductAdmin(VersionAdmin):
    """Admin for Product"""

    model = Product
    search_fields = ["description", "price"]
    list_display = ["id", "description", "price", "is_active"]

    def has_delete_permission(self, request, obj=None):
        """Disable the delete permission for Product models"""
        return False

    def get_queryset(self, request):
        """
        Return the all objects for the Product Admin
        """
        return self.model.all_objects.get_queryset()


@admin.register(Coupon)
class CouponAdmin(VersionAdmin):
    """Admin for Coupon"""

    model = Coupon
    search_fields = ["code", "title"]
    list_display = [
        "id",
        "code",
        "title",
        "coupon_type",
        "amount",
        "is_cumulative",
        "is_removing_postage",
        "is_enabled",
    ]
    list_filter = ["coupon_type", "is_cumulative", "is_removing_postage", "is_enabled"]


class BasketItemInline(admin.TabularInline):
    """Inline editor for basket items"""

    model = BasketItem
    raw_id_fields = ("product",)
    extra = 0


class BasketCouponInline(admin.TabularInline):
    """Inline editor for the coupons applied to a basket"""

    model = BasketCoupon
    raw_id_fields = ("redeemed_coupon", "redeemed_by")
    extra = 0


@admin.register(Basket)
class BasketAdmin(TimestampedModelAdmin):
    """Admin for Basket"""

    model = Basket
    search_fields = ["user__email", "user__username"]
    list_display = ["id", "user", "postage_price", "get_discount"]
    raw_id_fields = ("user",)
    inlines = [BasketItemInline, BasketCouponInline]

    @display(description="Discount")
    def get_discount(self, instance):
        return get_basket_discount(instance)
