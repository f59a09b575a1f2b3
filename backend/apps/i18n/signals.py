"""Signal handlers keeping the language registry cache in sync with locales."""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Locale
from .registry import LanguageRegistry

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Locale)
@receiver(post_delete, sender=Locale)
def clear_language_registry_cache(sender, instance, **kwargs):
    """Drop cached language snapshots when any locale changes."""
    LanguageRegistry().clear_cache()
    logger.info(f"Locale {instance.code} changed, language registry cache cleared")
