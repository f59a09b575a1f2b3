from django.db import models

PUBLISHED = "published"


class PublishedQuerySet(models.QuerySet):
    """QuerySet with status-based filters for routable content"""

    def published(self):
        """Return only published records"""
        return self.filter(status=PUBLISHED)

    def draft(self):
        """Return only unpublished records"""
        return self.exclude(status=PUBLISHED)


class PublishedManager(models.Manager.from_queryset(PublishedQuerySet)):
    """Manager that filters for published content"""
