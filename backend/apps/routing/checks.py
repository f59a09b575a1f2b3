from django.apps import apps
from django.conf import settings
from django.core.checks import Warning, register

from .components import I18N_APP


@register("routing")
def check_language_registry(app_configs, **kwargs):
    """Warn when localized routing is enabled without a language registry."""
    if not getattr(settings, "ROUTING_ENABLED", True):
        return []

    if apps.is_installed(I18N_APP):
        return []

    return [
        Warning(
            "Localized routing is enabled but the language registry is missing.",
            hint=f"Add '{I18N_APP}' to INSTALLED_APPS or set ROUTING_ENABLED = False.",
            obj="apps.routing",
            id="routing.W001",
        )
    ]
