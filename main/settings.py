"""
Django settings for main.
"""

import logging
import os
import platform
from decimal import Decimal

import dj_database_url
from mitol.common.envs import (
    get_bool,
    get_delimited_list,
    get_int,
    get_string,
)

from main.env import get_decimal, get_float
from main.sentry import init_sentry

VERSION = "0.4.2"

log = logging.getLogger()

ENVIRONMENT = get_string(
    name="STOREFRONT_ENVIRONMENT",
    default="dev",
    description="The execution environment that the app is in (e.g. dev, staging, prod)",
)

# initialize Sentry before doing anything else so we capture any config errors
SENTRY_DSN = get_string(
    name="SENTRY_DSN", default="", description="The connection settings for Sentry"
)
SENTRY_LOG_LEVEL = get_string(
    name="SENTRY_LOG_LEVEL", default="ERROR", description="The log level for Sentry"
)
SENTRY_TRACES_SAMPLE_RATE = get_float("SENTRY_TRACES_SAMPLE_RATE", 0)
SENTRY_PROFILES_SAMPLE_RATE = get_float("SENTRY_PROFILES_SAMPLE_RATE", 0)
init_sentry(
    dsn=SENTRY_DSN,
    environment=ENVIRONMENT,
    version=VERSION,
    send_default_pii=True,
    log_level=SENTRY_LOG_LEVEL,
    traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
    profiles_sample_rate=SENTRY_PROFILES_SAMPLE_RATE,
)

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # noqa: PTH100, PTH120

SITE_BASE_URL = get_string(
    name="STOREFRONT_BASE_URL",
    default="http://localhost:8000",
    description="Base url for the application in the format PROTOCOL://HOSTNAME[:PORT]",
)

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = get_string(
    name="SECRET_KEY",
    default="storefront-insecure-dev-key",
    description="Django secret key.",
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = get_bool(
    name="DEBUG",
    default=False,
    dev_only=True,
    description="Set to True to enable DEBUG mode. Don't turn on in production.",
)

ALLOWED_HOSTS = ["*"]

CSRF_COOKIE_DOMAIN = get_string(
    name="CSRF_COOKIE_DOMAIN",
    default=None,
    description="Domain to set the CSRF cookie to.",
)

# NOTE: this is hardcoded in many places so we do not allow it to be dynamic
CSRF_COOKIE_NAME = "csrf_storefront"

CSRF_TRUSTED_ORIGINS = get_delimited_list(
    name="CSRF_TRUSTED_ORIGINS",
    default=[],
    description="Comma separated string of trusted domains that should be CSRF exempt",
)

SESSION_COOKIE_NAME = get_string(
    name="SESSION_COOKIE_NAME",
    default="storefront_sessionid",
    description="Name of the session cookie.",
)

SECURE_SSL_REDIRECT = get_bool(
    name="STOREFRONT_SECURE_SSL_REDIRECT",
    default=False,
    description="Application-level SSL redirect setting.",
)

# Application definition
INSTALLED_APPS = (
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    # django-reversion
    "reversion",
    # Put our apps after this point
    "main",
    "ecommerce",
    # ol-django apps, must be after this project's apps for template precedence
    "mitol.common.apps.CommonApp",
)

MIDDLEWARE = (
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
)

LOGIN_REDIRECT_URL = "/"
LOGIN_URL = "/admin/login/"

ROOT_URLCONF = "main.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [os.path.join(BASE_DIR, "templates")],  # noqa: PTH118
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ]
        },
    }
]

WSGI_APPLICATION = "main.wsgi.application"


# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
DEFAULT_DATABASE_CONFIG = dj_database_url.parse(
    get_string(
        name="DATABASE_URL",
        default="sqlite:///{0}".format(os.path.join(BASE_DIR, "db.sqlite3")),  # noqa: PTH118, UP030
        description="The connection url to the database",
    )
)
DEFAULT_DATABASE_CONFIG["CONN_MAX_AGE"] = get_int(
    name="STOREFRONT_DB_CONN_MAX_AGE",
    default=0,
    description="Maximum age of connection to Postgres in seconds",
)

if get_bool(
    name="STOREFRONT_DB_DISABLE_SSL",
    default=True,
    description="Disables SSL to postgres if set to True",
):
    DEFAULT_DATABASE_CONFIG["OPTIONS"] = {}
else:
    DEFAULT_DATABASE_CONFIG["OPTIONS"] = {"sslmode": "require"}

DATABASES = {"default": DEFAULT_DATABASE_CONFIG}

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "/static/"
STATIC_ROOT = "staticfiles"

# e-mail configurable admins
ADMIN_EMAIL = get_string(
    name="STOREFRONT_ADMIN_EMAIL",
    default="",
    description="E-mail to send 500 reports to.",
)
if ADMIN_EMAIL != "":  # noqa: SIM108
    ADMINS = (("Admins", ADMIN_EMAIL),)
else:
    ADMINS = ()

# Logging configuration
LOG_LEVEL = get_string(
    name="STOREFRONT_LOG_LEVEL", default="INFO", description="The log level default"
)
DJANGO_LOG_LEVEL = get_string(
    name="DJANGO_LOG_LEVEL", default="INFO", description="The log level for django"
)

HOSTNAME = platform.node().split(".")[0]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {"require_debug_false": {"()": "django.utils.log.RequireDebugFalse"}},
    "formatters": {
        "verbose": {
            "format": (
                "[%(asctime)s] %(levelname)s %(process)d [%(name)s] "
                "%(filename)s:%(lineno)d - "
                f"[{HOSTNAME}] - %(message)s"
            ),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
        "mail_admins": {
            "level": "ERROR",
            "filters": ["require_debug_false"],
            "class": "django.utils.log.AdminEmailHandler",
        },
    },
    "loggers": {
        "django": {
            "propagate": True,
            "level": DJANGO_LOG_LEVEL,
            "handlers": ["console"],
        },
        "django.request": {
            "handlers": ["mail_admins"],
            "level": DJANGO_LOG_LEVEL,
            "propagate": True,
        },
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
}

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.SessionAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticated",),
    "EXCEPTION_HANDLER": "main.exceptions.exception_handler",
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
    "DEFAULT_RENDERER_CLASSES": ("rest_framework.renderers.JSONRenderer",)
    if not DEBUG
    else (
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ),
}

# Forms
# Maps a form name to the dotted path of its class, see main.form_factory
FORM_DEFINITIONS = {
    "coupon_code": "ecommerce.forms.CouponCodeForm",
}

FORMS_DEFAULT_SUCCESS_URL = get_string(
    name="FORMS_DEFAULT_SUCCESS_URL",
    default="/",
    description="Where to send users after a form succeeds if it didn't specify a success_url",
)

# Ecommerce
ECOMMERCE_DEFAULT_POSTAGE_PRICE = get_decimal("ECOMMERCE_DEFAULT_POSTAGE_PRICE", Decimal("0.00"))
ECOMMERCE_CART_URL = get_string(
    name="ECOMMERCE_CART_URL",
    default="/cart/",
    description="Path of the cart page users are sent back to when a coupon fails to apply",
)
