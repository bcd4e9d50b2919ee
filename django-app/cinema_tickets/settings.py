"""Django settings for the cinema tickets project.

There is no database and no URL configuration: Django is used for settings,
logging and the app registry only.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in {"1", "true", "yes", "on"}

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "purchases.apps.PurchasesConfig",
]

DATABASES: dict = {}

USE_TZ = True

TICKETS = {
    "PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
    "SEATED_TYPES": ["ADULT", "CHILD"],
    "MAX_TICKETS_PER_PURCHASE": 25,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "purchases": {
            "handlers": ["console"],
            "level": os.environ.get("PURCHASES_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
