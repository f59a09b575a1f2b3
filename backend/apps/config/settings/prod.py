import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.redis import RedisIntegration

from .base import *  # noqa: F403, F401
from .base import env  # noqa: F403; noqa: F405

# SECURITY WARNING: don't run with debug turned on in production!

DEBUG = False


# Security

SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)  # noqa: F405

SECURE_HSTS_SECONDS = env.int(
    "SECURE_HSTS_SECONDS", default=31536000
)  # 1 year  # noqa: F405

SECURE_HSTS_INCLUDE_SUBDOMAINS = True

SECURE_HSTS_PRELOAD = True

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")


# Session security

SESSION_COOKIE_SECURE = True

CSRF_COOKIE_SECURE = True

SESSION_COOKIE_HTTPONLY = True


# Database

DATABASES = {"default": env.db("DATABASE_URL")}  # noqa: F405, F811

# Optimal connection pooling for production

DATABASES["default"]["CONN_MAX_AGE"] = env.int(
    "DB_CONN_MAX_AGE", 600
)  # 10 minutes  # noqa: F405

DATABASES["default"]["CONN_HEALTH_CHECKS"] = True


# Cache (shared by all workers; required for the route build generation)

CACHES = {"default": env.cache("REDIS_URL")}  # noqa: F405


# Localized routing

ROUTING_SITE_URL = env("ROUTING_SITE_URL")  # noqa: F405


# Sentry

SENTRY_DSN = env("SENTRY_DSN", default=None)  # noqa: F405

if SENTRY_DSN:

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[
            DjangoIntegration(
                transaction_style="url",
                middleware_spans=True,
                signals_spans=True,
            ),
            RedisIntegration(),
        ],
        traces_sample_rate=env.float(
            "SENTRY_TRACES_SAMPLE_RATE", default=0.1
        ),  # noqa: F405
        send_default_pii=False,
        debug=False,
    )


# Logging

LOGGING = {  # noqa: F811
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "apps": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}


# CORS

CORS_ALLOW_ALL_ORIGINS = False

CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[])  # noqa: F405

CORS_ALLOW_CREDENTIALS = True

CORS_PREFLIGHT_MAX_AGE = 86400  # 24 hours cache for preflight requests
