"""Translated slug lookups with a process-wide, wholesale-invalidated cache."""

import logging
from typing import Optional

from apps.core.cache import MISSING, GenerationalCache
from apps.core.exceptions import MalformedEncoding

from .resources import ResourceRef, ResourceRepository

logger = logging.getLogger(__name__)


class SlugCache:
    """
    Cache of ``(resource_type, resource_id, language) -> slug | None``.

    Absent translations are cached as None so repeated misses stay cheap.
    There is no per-key invalidation: ``clear()`` drops everything.
    """

    def __init__(self, timeout=None, alias="default"):
        self._cache = GenerationalCache("slug", alias=alias, timeout=timeout)

    def get(self, resource_type, resource_id, language_code):
        """Return the cached slug, None for a cached absence, or MISSING."""
        return self._cache.get((resource_type, resource_id, language_code))

    def put(self, resource_type, resource_id, language_code, slug):
        self._cache.put((resource_type, resource_id, language_code), slug)

    def clear(self):
        generation = self._cache.clear()
        logger.debug(f"Slug cache cleared, generation {generation}")


class SlugStore:
    """Resolve per-language slugs from each resource's multilingual field."""

    def __init__(self, repository: ResourceRepository, codec, cache: SlugCache):
        self.repository = repository
        self.codec = codec
        self.cache = cache

    def get_translated_slug(
        self, resource_id, resource_type, language_code
    ) -> Optional[str]:
        """
        Return the slug of a resource for a language, or None.

        None covers a missing or empty field, a value that fails to decode,
        and a value without an entry for ``language_code``. Codes are matched
        case-insensitively; decoded keys are lowercase.
        """
        language_code = language_code.lower()
        cached = self.cache.get(resource_type, resource_id, language_code)
        if cached is not MISSING:
            return cached

        slug = self._decode(resource_type, resource_id).get(language_code) or None
        self.cache.put(resource_type, resource_id, language_code, slug)
        return slug

    def _decode(self, resource_type, resource_id) -> dict:
        raw = self.repository.get_slug_field(resource_type, resource_id)
        if not raw:
            return {}
        try:
            return self.codec.decode(raw)
        except MalformedEncoding as e:
            logger.debug(f"Ignoring slug field of {resource_type} {resource_id}: {e}")
            return {}

    def find_by_translated_slug(
        self, resource_type, slug, language_code, candidates=None
    ) -> Optional[ResourceRef]:
        """
        Reverse lookup: the first resource whose translated slug equals ``slug``.

        Candidates are scanned in enumeration order, so the first match wins.
        Without explicit candidates only rows whose field contains the slug
        text are scanned.
        """
        if candidates is None:
            candidates = self.repository.iter_published(resource_type, containing=slug)

        for ref in candidates:
            if self.get_translated_slug(ref.id, ref.resource_type, language_code) == slug:
                return ref
        return None

    def invalidate_all(self):
        self.cache.clear()
