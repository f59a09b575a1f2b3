import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from apps.catalog.models import Post, Term

from .components import get_components

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Term)
def term_changed(sender, instance, **kwargs):
    """Drop cached slugs and schedule a route rebuild when a tracked term changes."""
    components = get_components()
    if components is None or instance.taxonomy != components.settings.taxonomy:
        return

    logger.info(f"Term '{instance.slug}' changed, scheduling route rebuild")
    components.invalidate()


@receiver([post_save, post_delete], sender=Post)
def post_changed(sender, instance, **kwargs):
    """Products and posts have no generated rules, only cached slugs."""
    components = get_components()
    if components is None:
        return

    components.slug_store.invalidate_all()


def locale_changed(sender, instance, **kwargs):
    components = get_components()
    if components is None:
        return

    logger.info(f"Locale '{instance.code}' changed, scheduling route rebuild")
    components.invalidate()


def connect_locale_signals():
    from apps.i18n.models import Locale

    post_save.connect(locale_changed, sender=Locale, dispatch_uid="routing-locale-saved")
    post_delete.connect(locale_changed, sender=Locale, dispatch_uid="routing-locale-deleted")
