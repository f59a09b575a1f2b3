from typing import Any


from .base import *  # noqa: F403, F401

from .base import LOGGING  # noqa: F405

from .base import env  # noqa: F403; noqa: F405


# SECURITY WARNING: don't run with debug turned on in production!

DEBUG = True


ALLOWED_HOSTS = ["localhost", "127.0.0.1"]


# Localized routing against the dev server

ROUTING_SITE_URL = env(  # noqa: F405
    "ROUTING_SITE_URL", default="http://localhost:8000"
)


# CORS settings for development

CORS_ALLOW_ALL_ORIGINS = False

CORS_ALLOWED_ORIGINS = [
    "http://localhost:5173",  # Vite development server
    "http://127.0.0.1:5173",
    "http://localhost:3000",  # Alternative React dev server
    "http://127.0.0.1:3000",
]

CORS_ALLOW_CREDENTIALS = True


# Development logging

LOGGING_DICT: dict[str, Any] = LOGGING  # noqa: F405

LOGGING_DICT["handlers"]["console"]["formatter"] = "simple"

LOGGING_DICT["root"]["level"] = "DEBUG"

LOGGING_DICT["loggers"]["apps.routing"]["level"] = "DEBUG"


# Cache Configuration for local development

# Use in-memory cache by default, no Redis required

if not env("REDIS_URL", default=""):  # noqa: F405

    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "unique-snowflake",
        }
    }


# Override session engine to use database instead of cache

SESSION_ENGINE = "django.contrib.sessions.backends.db"


# Disable throttling for development to avoid rate limit issues

REST_FRAMEWORK = REST_FRAMEWORK.copy()  # noqa: F405

REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
    "anon": "10000/hour",
    "user": "10000/hour",
}
