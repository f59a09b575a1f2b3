from .base import *  # noqa: F403, F401
from .base import env  # noqa: F401

# Database configuration - use DATABASE_URL if provided (for CI), otherwise SQLite

if env("DATABASE_URL", default=""):  # noqa: F405

    # CI environment - use the configured database and run migrations

    DATABASES = {"default": env.db("DATABASE_URL")}  # noqa: F405, F811

else:

    # Local test environment - use fast SQLite in-memory

    DATABASES = {  # noqa: F811
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

    # Disable migrations for local tests only

    class DisableMigrations:

        def __contains__(self, item):

            return True

        def __getitem__(self, item):

            return None

    MIGRATION_MODULES = DisableMigrations()


# Use locmem cache backend for tests unless Redis is configured

if env("REDIS_URL", default=""):  # noqa: F405

    CACHES = {"default": env.cache("REDIS_URL")}  # noqa: F405

else:

    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "unique-snowflake",
        }
    }


# Sessions in the database so the test client login does not depend on cache state

SESSION_ENGINE = "django.contrib.sessions.backends.db"


# Password hashers for faster tests

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]


# Disable logging during tests

LOGGING_CONFIG = None


# Localized routing with fixed values so URLs in assertions are stable

ROUTING_ENABLED = True

ROUTING_SITE_URL = "http://testserver"

ROUTING_PRODUCT_SEGMENT = "product"

ROUTING_TAXONOMY = "catalog"

ROUTING_RESOLUTION_ORDER = ["product", "taxonomy-term", "content-post"]

ROUTING_HOST_RULES = []


# Security settings (can be relaxed for tests)

SECRET_KEY = env(  # noqa: F405
    "SECRET_KEY", default="test-secret-key-not-for-production"
)  # nosec B105

# Add testserver to allowed hosts for Django test client
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]  # noqa: F405


REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
    # Disable throttling for tests
    "DEFAULT_THROTTLE_RATES": {
        "anon": None,
        "user": None,
    },
}
