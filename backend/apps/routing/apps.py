import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class RoutingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.routing"
    verbose_name = "Localized Routing"

    components = None

    def ready(self):
        """Build the routing components and connect their signals."""
        from apps.core.exceptions import DependencyUnavailable

        from . import checks  # noqa
        from . import signals  # noqa
        from .components import build_components
        from .conf import RoutingSettings

        settings = RoutingSettings.from_django()
        if not settings.enabled:
            logger.info("Localized routing disabled by ROUTING_ENABLED")
            return

        try:
            self.components = build_components(settings)
        except DependencyUnavailable as e:
            logger.warning(f"Localized routing inactive: {e}")
            return

        self.components.scheduler.connect()
        signals.connect_locale_signals()
