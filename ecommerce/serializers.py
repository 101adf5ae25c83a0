"""
Storefront ecommerce serializers
"""
from decimal import Decimal

from rest_framework import serializers

from ecommerce import models
from ecommerce.api import get_basket_discount
from ecommerce.constants import COUPON_CODE_MAX_LENGTH


class CouponSerializer(serializers.ModelSerializer):
    friendly_format = serializers.SerializerMethodField()

    def get_friendly_format(self, instance):
        return instance.friendly_format()

    class Meta:
        fields = [
            "id",
            "code",
            "title",
            "coupon_type",
            "amount",
            "is_cumulative",
            "is_removing_postage",
            "friendly_format",
        ]
        model = models.Coupon


class BasketDiscountSerializer(serializers.ModelSerializer):
    """The coupons applied to a basket and the discount they give at checkout"""

    coupons = serializers.SerializerMethodField()
    subtotal_price = serializers.DecimalField(
        max_digits=9, decimal_places=2, read_only=True
    )
    total_price = serializers.DecimalField(
        max_digits=9, decimal_places=2, read_only=True
    )
    discount = serializers.SerializerMethodField()

    def get_coupons(self, instance):
        return CouponSerializer(instance.get_coupons(), many=True).data

    def get_discount(self, instance):
        return str(get_basket_discount(instance).quantize(Decimal("0.01")))

    class Meta:
        fields = [
            "id",
            "coupons",
            "postage_price",
            "subtotal_price",
            "total_price",
            "discount",
        ]
        model = models.Basket


class CouponCodeSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=COUPON_CODE_MAX_LENGTH)
