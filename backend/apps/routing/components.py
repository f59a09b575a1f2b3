"""Construction of the routing components.

Everything is built once at startup and handed to its collaborators
explicitly; the app config keeps the resulting container.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.apps import apps
from django.conf import settings as django_settings
from django.utils.module_loading import import_string

from apps.core.exceptions import DependencyUnavailable

from .conf import RoutingSettings
from .hreflang import HreflangProcessor
from .resolver import RequestResolver
from .resources import ResourceRepository
from .rules import RebuildScheduler, RouteTable, RouteTableBuilder, host_rules_from
from .slugs import SlugCache, SlugStore
from .translator import UrlTranslator

logger = logging.getLogger(__name__)

I18N_APP = "apps.i18n"


@dataclass
class RoutingComponents:
    settings: RoutingSettings
    registry: object
    repository: ResourceRepository
    slug_store: SlugStore
    translator: UrlTranslator
    route_table: RouteTable
    resolver: RequestResolver
    hreflang: HreflangProcessor
    scheduler: RebuildScheduler
    unavailable_reported: bool = False

    def report_unavailable(self, error: DependencyUnavailable):
        """Log a missing language registry once per process."""
        if self.unavailable_reported:
            logger.debug(f"Localized routing inactive: {error}")
            return
        self.unavailable_reported = True
        logger.warning(f"Localized routing inactive, serving default routes: {error}")

    def invalidate(self):
        """React to a tracked resource mutation: drop slugs, schedule a rebuild."""
        self.slug_store.invalidate_all()
        self.scheduler.schedule()

    def rebuild_now(self) -> tuple:
        self.scheduler.pending = False
        self.slug_store.invalidate_all()
        return self.route_table.rebuild()


def build_components(settings: Optional[RoutingSettings] = None) -> RoutingComponents:
    """
    Wire the routing components together.

    Raises:
        DependencyUnavailable: the i18n app providing the language registry
            is not installed.
    """
    if not apps.is_installed(I18N_APP):
        raise DependencyUnavailable(f"{I18N_APP} is not installed")

    from apps.i18n.registry import LanguageRegistry

    settings = settings or RoutingSettings.from_django()
    codec = import_string(settings.multilingual_codec)()

    registry = LanguageRegistry()
    repository = ResourceRepository(taxonomy=settings.taxonomy)
    slug_store = SlugStore(repository, codec, SlugCache(timeout=settings.slug_cache_timeout))
    translator = UrlTranslator(registry, repository, slug_store, settings)
    route_table = RouteTable(
        RouteTableBuilder(slug_store),
        registry,
        repository,
        host_rules=host_rules_from(getattr(django_settings, "ROUTING_HOST_RULES", ())),
    )
    scheduler = RebuildScheduler(route_table.rebuild)

    return RoutingComponents(
        settings=settings,
        registry=registry,
        repository=repository,
        slug_store=slug_store,
        translator=translator,
        route_table=route_table,
        resolver=RequestResolver(registry, repository, slug_store, settings),
        hreflang=HreflangProcessor(translator, settings.hreflang_overrides),
        scheduler=scheduler,
    )


def get_components() -> Optional[RoutingComponents]:
    """Return the active components, or None when routing is disabled."""
    return apps.get_app_config("routing").components
