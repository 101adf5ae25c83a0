import os
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ImproperlyConfigured


class EnvironmentVariableParseException(ImproperlyConfigured):
    """Environment variable was not parsed correctly"""


def get_float(name, default):
    """
    Get an environment variable as an int.

    Args:
        name (str): An environment variable name
        default (float): The default value to use if the environment variable doesn't exist.

    Returns:
        float:
            The environment variable value parsed as an float
    """
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        parsed_value = float(value)
    except ValueError as ex:
        msg = f"Expected value in {name}={value} to be a float"
        raise EnvironmentVariableParseException(msg) from ex

    return parsed_value


def get_decimal(name, default):
    """
    Get an environment variable as a Decimal.

    Args:
        name (str): An environment variable name
        default (Decimal): The default value to use if the environment variable doesn't exist.

    Returns:
        Decimal:
            The environment variable value parsed as a Decimal
    """
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        parsed_value = Decimal(value)
    except InvalidOperation as ex:
        msg = f"Expected value in {name}={value} to be a decimal"
        raise EnvironmentVariableParseException(msg) from ex

    if not parsed_value.is_finite():
        msg = f"Expected value in {name}={value} to be a decimal"
        raise EnvironmentVariableParseException(msg)

    return parsed_value
