"""Global pytest configuration and fixtures"""

import pytest

# Let pytest-django handle Django setup automatically
pytest_plugins = ["pytest_django"]


@pytest.fixture(autouse=True)
def clear_cache():
    """Translated slugs, languages and route generations live in the cache"""
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def languages(db):
    """Ukrainian default with Russian and English alternates"""
    from tests.factories import LocaleFactory

    return {
        "uk": LocaleFactory(code="uk", is_default=True, sort_order=0),
        "ru": LocaleFactory(code="ru", hreflang="ru-ru", sort_order=1),
        "en": LocaleFactory(code="en", sort_order=2),
    }


@pytest.fixture
def components():
    """The routing components built at startup"""
    from apps.routing.components import get_components

    return get_components()


@pytest.fixture
def api_client():
    """Create an API client"""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def staff_client(db):
    """Create an API client authenticated as staff"""
    from rest_framework.test import APIClient

    from tests.factories import StaffUserFactory

    client = APIClient()
    client.force_authenticate(user=StaffUserFactory())
    return client


@pytest.fixture
def zonty(languages):
    """The umbrella category with Russian and English slugs"""
    from tests.factories import TermFactory

    return TermFactory(
        name="Зонти",
        slug="zonty",
        seo_slug="[:ru]muzhskie-zonty-vinnica[:en]mens-umbrellas[:]",
    )
