"""Routing settings read from Django settings with their defaults."""

from dataclasses import dataclass, field

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.core.cache import CACHE_TIMEOUTS

PRODUCT = "product"
CONTENT_POST = "content-post"
TAXONOMY_TERM = "taxonomy-term"

RESOURCE_TYPES = (PRODUCT, TAXONOMY_TERM, CONTENT_POST)


@dataclass(frozen=True)
class RoutingSettings:
    enabled: bool = True
    site_url: str = "http://localhost:8000"
    product_segment: str = "product"
    taxonomy: str = "catalog"
    resolution_order: tuple = RESOURCE_TYPES
    slug_cache_timeout: int = CACHE_TIMEOUTS["slug"]
    hreflang_overrides: dict = field(default_factory=lambda: {"ru-ru": "ru-UA"})
    multilingual_codec: str = "apps.i18n.multilingual.MultilingualCodec"

    @classmethod
    def from_django(cls):
        defaults = cls()
        order = tuple(
            getattr(settings, "ROUTING_RESOLUTION_ORDER", defaults.resolution_order)
        )
        unknown = set(order) - set(RESOURCE_TYPES)
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown resource types in ROUTING_RESOLUTION_ORDER: {sorted(unknown)}"
            )

        return cls(
            enabled=getattr(settings, "ROUTING_ENABLED", defaults.enabled),
            site_url=getattr(settings, "ROUTING_SITE_URL", defaults.site_url).rstrip("/"),
            product_segment=getattr(
                settings, "ROUTING_PRODUCT_SEGMENT", defaults.product_segment
            ).strip("/"),
            taxonomy=getattr(settings, "ROUTING_TAXONOMY", defaults.taxonomy),
            resolution_order=order,
            slug_cache_timeout=getattr(
                settings, "ROUTING_SLUG_CACHE_TIMEOUT", defaults.slug_cache_timeout
            ),
            hreflang_overrides=dict(
                getattr(settings, "ROUTING_HREFLANG_OVERRIDES", defaults.hreflang_overrides)
            ),
            multilingual_codec=getattr(
                settings, "ROUTING_MULTILINGUAL_CODEC", defaults.multilingual_codec
            ),
        )
