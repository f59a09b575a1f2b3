"""
URL translation between the default language and localized paths.

Forward (non-default target language): the trailing canonical slug of the
URL is resolved to a resource and rebuilt under the language prefix with the
resource's translated slug, or its canonical slug when no translation exists.

Reverse (default target language): the URL is rebuilt from the resource the
caller is currently displaying, because the default-language slug is the
resource's own slug and cannot be read back from a translated path.

Anything that cannot be resolved yields the fallback URL unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from apps.core.exceptions import DependencyUnavailable, ResourceNotFound, TranslationMissing

from .conf import CONTENT_POST, PRODUCT, TAXONOMY_TERM
from .resources import ResourceRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedPath:
    """A site path split into language, product marker, slug and page."""

    language: Optional[object]
    is_product: bool
    slugs: tuple
    page: Optional[int]
    query: str

    @property
    def slug(self) -> Optional[str]:
        return self.slugs[-1] if self.slugs else None


class UrlTranslator:
    """Translate site URLs into a target language."""

    def __init__(self, registry, repository, slug_store, settings):
        self.registry = registry
        self.repository = repository
        self.slug_store = slug_store
        self.site_url = settings.site_url
        self.product_segment = settings.product_segment
        self.resolution_order = settings.resolution_order

    def translate(
        self,
        url: str,
        language_code: str,
        current: Optional[ResourceRef] = None,
        fallback_url: Optional[str] = None,
    ) -> str:
        """
        Return the URL of the same resource in ``language_code``.

        Args:
            url: Site URL or path to translate
            language_code: Target language code
            current: Resource being displayed, needed for the default language
            fallback_url: Returned when nothing can be resolved (defaults to ``url``)
        """
        fallback = fallback_url or url

        try:
            target = self.registry.get(language_code)
            parsed = self.parse(url)
        except DependencyUnavailable as e:
            logger.debug(f"URL left untranslated, language registry unavailable: {e}")
            return fallback

        if target is None:
            logger.debug(f"URL left untranslated, unknown language '{language_code}'")
            return fallback

        try:
            if target.is_default:
                return self._to_default(parsed, current)
            return self._to_language(parsed, target)
        except (ResourceNotFound, TranslationMissing) as e:
            logger.debug(f"URL left untranslated: {e}")
            return fallback

    def parse(self, url: str) -> ParsedPath:
        parts = urlsplit(url)
        segments = [segment for segment in parts.path.split("/") if segment]

        language = None
        if segments:
            candidate = self.registry.by_prefix(segments[0])
            if candidate is not None and not candidate.is_default:
                language = candidate
                segments = segments[1:]

        page = None
        if len(segments) >= 3 and segments[-2] == "page" and segments[-1].isdigit():
            page = int(segments[-1])
            segments = segments[:-2]

        is_product = bool(segments) and segments[0] == self.product_segment
        if is_product:
            segments = segments[1:]

        return ParsedPath(language, is_product, tuple(segments), page, parts.query)

    def _to_language(self, parsed: ParsedPath, target) -> str:
        if not parsed.slug:
            raise TranslationMissing(f"No slug in path to translate into '{target.code}'")

        if parsed.is_product:
            kinds = (PRODUCT,)
        else:
            kinds = self.resolution_order

        for kind in kinds:
            ref = self._locate(kind, parsed.slug, parsed.language)
            if ref is None:
                continue
            slug = (
                self.slug_store.get_translated_slug(ref.id, kind, target.code)
                or ref.slug
            )
            return self.build_url(target.prefix, kind, slug, parsed.page, parsed.query)

        raise ResourceNotFound("/".join(kinds), parsed.slug)

    def _to_default(self, parsed: ParsedPath, current: Optional[ResourceRef]) -> str:
        if current is None:
            raise TranslationMissing("Default-language URL needs the current resource")

        if parsed.is_product and len(parsed.slugs) == 1 and current.resource_type == PRODUCT:
            return self.build_url(None, PRODUCT, current.slug, parsed.page, parsed.query)

        if (
            not parsed.is_product
            and len(parsed.slugs) == 1
            and current.resource_type in (TAXONOMY_TERM, CONTENT_POST)
        ):
            return self.build_url(
                None, current.resource_type, current.slug, parsed.page, parsed.query
            )

        raise TranslationMissing(
            f"Path does not match the shape of current {current.resource_type} '{current.slug}'"
        )

    def _locate(self, kind, slug, source_language) -> Optional[ResourceRef]:
        """Find a resource by canonical slug, then by the source language's slug."""
        ref = self.repository.find_published(kind, slug)
        if ref is None and source_language is not None:
            ref = self.slug_store.find_by_translated_slug(kind, slug, source_language.code)
        return ref

    def build_url(
        self,
        prefix: Optional[str],
        resource_type: str,
        slug: str,
        page: Optional[int] = None,
        query: str = "",
    ) -> str:
        segments = [self.site_url]
        if prefix:
            segments.append(prefix)
        if resource_type == PRODUCT:
            segments.append(self.product_segment)
        segments.append(slug)
        if page:
            segments.extend(["page", str(page)])

        url = "/".join(segments) + "/"
        if query:
            url = f"{url}?{query}"
        return url
