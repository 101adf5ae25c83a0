from django.urls import path

from ecommerce.views import (
    BasketCouponDetailView,
    BasketCouponView,
    BasketDiscountView,
    CouponCodeView,
)

urlpatterns = [
    path("checkout/coupon/", CouponCodeView.as_view(), name="checkout-coupon"),
    path(
        "api/v0/basket/discount/",
        BasketDiscountView.as_view(),
        name="basket-discount-api",
    ),
    path(
        "api/v0/basket/coupons/",
        BasketCouponView.as_view(),
        name="basket-coupons-api",
    ),
    path(
        "api/v0/basket/coupons/<str:code>/",
        BasketCouponDetailView.as_view(),
        name="basket-coupon-detail-api",
    ),
]
