from pathlib import Path

import environ

env = environ.Env()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Read .env file
env_file = BASE_DIR / '.env'
if env_file.exists():
    env.read_env(env_file)

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("DJANGO_SECRET_KEY", default="django-insecure-change-me-in-production")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env.bool("DEBUG", default=False)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])

# Application definition
DJANGO_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "rest_framework",
    "corsheaders",
    "drf_spectacular",
]

LOCAL_APPS = [
    "apps.core",
    "apps.i18n",
    "apps.catalog",
    "apps.routing",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",

    # CORS handling
    "corsheaders.middleware.CorsMiddleware",

    # Session management
    "django.contrib.sessions.middleware.SessionMiddleware",

    # Common middleware
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",

    # Authentication (MUST come before any middleware that uses request.user)
    "django.contrib.auth.middleware.AuthenticationMiddleware",

    # Localized routing (binds locale-prefixed paths before URL dispatch)
    "apps.routing.middleware.LocalizedRoutingMiddleware",

    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "apps.config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
            ],
        },
    },
]

WSGI_APPLICATION = "apps.config.wsgi.application"

# Database
# Default to SQLite for easy development, configurable via DATABASE_URL
DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR}/db.sqlite3")
}

# Database connection pooling
DATABASES['default']['CONN_MAX_AGE'] = env.int('DB_CONN_MAX_AGE', 600)  # 10 minutes default

# Enable persistent connections
DATABASES['default']['CONN_HEALTH_CHECKS'] = True

# Cache Configuration
# Translated slugs and the route build generation live here; use Redis so
# every worker process shares them.
CACHES = {
    "default": env.cache("REDIS_URL", default="redis://localhost:6379/0"),
}

# Session cache
SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_CACHE_ALIAS = 'default'

# Internationalization
# Routing languages come from the i18n Locale table, not from LANGUAGES
LANGUAGE_CODE = "en"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Django REST Framework
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.AnonRateThrottle",
        "rest_framework.throttling.UserRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "anon": "1000/hour",
        "user": "5000/hour",
    },
}

# Spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Localized Routing API",
    "DESCRIPTION": "Per-language slugs, URL translation and alternate links for catalog content",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "SCHEMA_PATH_PREFIX": "/api/v1/",
    "COMPONENT_SPLIT_REQUEST": True,
    "SERVE_PERMISSIONS": ["rest_framework.permissions.AllowAny"],
    "TAGS": [
        {"name": "Routing", "description": "URL translation, alternate links and route rules"},
    ],
}

# Localized routing
ROUTING_ENABLED = env.bool("ROUTING_ENABLED", default=True)
ROUTING_SITE_URL = env("ROUTING_SITE_URL", default="http://localhost:8000")
ROUTING_PRODUCT_SEGMENT = env("ROUTING_PRODUCT_SEGMENT", default="product")
ROUTING_TAXONOMY = env("ROUTING_TAXONOMY", default="catalog")
ROUTING_RESOLUTION_ORDER = env.list(
    "ROUTING_RESOLUTION_ORDER", default=["product", "taxonomy-term", "content-post"]
)
ROUTING_SLUG_CACHE_TIMEOUT = env.int("ROUTING_SLUG_CACHE_TIMEOUT", default=60 * 60)
ROUTING_HREFLANG_OVERRIDES = {"ru-ru": "ru-UA"}
ROUTING_MULTILINGUAL_CODEC = "apps.i18n.multilingual.MultilingualCodec"

# Host rules matched after the generated ones:
# (pattern, resource_type, canonical_slug, language)
ROUTING_HOST_RULES: list[tuple[str, str, str, str]] = []

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
            "style": "{",
        },
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "apps.routing": {
            "handlers": ["console"],
            "level": env("ROUTING_LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
    },
}

# Security
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# CORS
CORS_ALLOW_ALL_ORIGINS = env.bool("CORS_ALLOW_ALL_ORIGINS", default=False)
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[])
