import random

import faker
from factory import LazyFunction, SubFactory, fuzzy
from factory.django import DjangoModelFactory
from mitol.common.utils.datetime import now_in_utc

from ecommerce import models
from ecommerce.constants import ALL_COUPON_TYPES
from main.factories import UserFactory

FAKE = faker.Factory.create()


class ProductFactory(DjangoModelFactory):
    price = fuzzy.FuzzyDecimal(1, 2000, precision=2)
    description = FAKE.sentence(nb_words=4)
    is_active = True

    class Meta:
        model = models.Product


class CouponFactory(DjangoModelFactory):
    code = fuzzy.FuzzyText(length=20)
    title = FAKE.sentence(nb_words=3)
    coupon_type = fuzzy.FuzzyChoice(ALL_COUPON_TYPES)
    amount = random.randrange(1, 50, 1)
    is_cumulative = False
    is_removing_postage = False
    is_enabled = True

    class Meta:
        model = models.Coupon


# Two factories here to test the coupon sorting rules


class CumulativeCouponFactory(CouponFactory):
    is_cumulative = True


class FreeShippingCouponFactory(CouponFactory):
    is_removing_postage = True


class BasketFactory(DjangoModelFactory):
    """Factory for Basket"""

    user = SubFactory(UserFactory)
    postage_price = fuzzy.FuzzyDecimal(1, 20, precision=2)

    class Meta:
        model = models.Basket


class BasketItemFactory(DjangoModelFactory):
    """Factory for BasketItem"""

    product = SubFactory(ProductFactory)

    basket = SubFactory(BasketFactory)

    class Meta:
        model = models.BasketItem


class BasketCouponFactory(DjangoModelFactory):
    redeemed_basket = SubFactory(BasketFactory)
    redeemed_coupon = SubFactory(CouponFactory)
    redeemed_by = SubFactory(UserFactory)
    redemption_date = LazyFunction(now_in_utc)

    class Meta:
        model = models.BasketCoupon
