"""Factory for Users"""

from django.contrib.auth import get_user_model
from factory import Faker, SelfAttribute
from factory.django import DjangoModelFactory
from factory.fuzzy import FuzzyText


class UserFactory(DjangoModelFactory):
    """Factory for Users"""

    username = SelfAttribute("email")
    email = FuzzyText(suffix="@example.com")
    first_name = Faker("first_name")
    last_name = Faker("last_name")
    password = FuzzyText(length=8)
    is_superuser = False
    is_staff = False

    is_active = True

    class Meta:
        model = get_user_model()
