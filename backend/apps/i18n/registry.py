"""Language registry backed by the database Locale model.

Routing code reads locales only through this module. Every call returns
immutable ``Language`` snapshots, cached for a short period the same way the
locale settings sync does, and invalidated whenever a locale changes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError, ProgrammingError

from apps.core.exceptions import DependencyUnavailable

from .models import Locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Language:
    """Immutable snapshot of an active locale."""

    code: str
    prefix: str
    is_default: bool = False
    hreflang: str = ""
    name: str = ""

    @property
    def hreflang_tag(self) -> str:
        return self.hreflang or self.code


class LanguageRegistry:
    """Read-only access to the ordered set of active languages."""

    CACHE_KEY = "i18n_registry_languages"

    CACHE_TIMEOUT = 300  # 5 minutes

    def list_languages(self) -> tuple[Language, ...]:
        """Return active languages ordered by sort order.

        Raises:
            DependencyUnavailable: locale table missing or no default locale.
        """
        languages = cache.get(self.CACHE_KEY)
        if languages:
            return languages

        if not self._database_ready():
            raise DependencyUnavailable("Locale table is not available")

        languages = tuple(
            Language(
                code=locale.code,
                prefix=locale.prefix,
                is_default=locale.is_default,
                hreflang=locale.hreflang,
                name=locale.name,
            )
            for locale in Locale.objects.filter(is_active=True).order_by(
                "sort_order", "code"
            )
        )

        if not any(language.is_default for language in languages):
            raise DependencyUnavailable("No active default locale is configured")

        cache.set(self.CACHE_KEY, languages, self.CACHE_TIMEOUT)
        return languages

    def default_language(self) -> str:
        """Return the code of the default language."""
        for language in self.list_languages():
            if language.is_default:
                return language.code
        raise DependencyUnavailable("No active default locale is configured")

    def get(self, code: str) -> Optional[Language]:
        for language in self.list_languages():
            if language.code == code:
                return language
        return None

    def by_prefix(self, segment: str) -> Optional[Language]:
        """Find the language addressed by a URL path segment.

        A segment matches a language by either its URL prefix or its code.
        """
        for language in self.list_languages():
            if language.prefix == segment or language.code == segment:
                return language
        return None

    def clear_cache(self):
        cache.delete(self.CACHE_KEY)
        logger.debug("Cleared language registry cache")

    @staticmethod
    def _database_ready() -> bool:
        try:
            return Locale._meta.db_table in connection.introspection.table_names()
        except (OperationalError, ProgrammingError) as e:
            logger.debug(f"Locale table check failed: {e}")
            return False
