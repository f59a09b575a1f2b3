import logging
from typing import Optional

from apps.core.exceptions import DependencyUnavailable

from .conf import CONTENT_POST, PRODUCT, TAXONOMY_TERM
from .rules import RouteQuery

logger = logging.getLogger(__name__)


class RequestResolver:
    """
    Fallback resolution of locale-prefixed paths that no static rule matched.

    Handles ``{prefix}/{translated-slug}/[page/{n}/]`` by scanning the
    published terms of the tracked taxonomy and the content posts, in the
    configured resolution order, and
    ``{prefix}/{product-segment}/{translated-product-slug}/`` by reverse
    lookup over products.
    """

    def __init__(self, registry, repository, slug_store, settings):
        self.registry = registry
        self.repository = repository
        self.slug_store = slug_store
        self.product_segment = settings.product_segment
        self.slug_kinds = tuple(
            kind for kind in settings.resolution_order if kind != PRODUCT
        )

    def resolve(
        self, request_path: str, bound: Optional[RouteQuery] = None
    ) -> Optional[RouteQuery]:
        # Static routing already bound this request
        if bound is not None:
            return None

        parts = request_path.strip("/").split("/")

        # Need at least 2 parts: language prefix and slug
        if len(parts) < 2:
            return None

        try:
            language = self.registry.by_prefix(parts[0])
        except DependencyUnavailable as e:
            logger.debug(f"Fallback resolution skipped: {e}")
            return None

        if language is None or language.is_default:
            return None

        if parts[1] == self.product_segment and len(parts) >= 3:
            return self._resolve_product(parts[2], language.code)

        for kind in self.slug_kinds:
            ref = self._reverse_lookup(kind, parts[1], language.code)
            if ref is not None:
                break
        else:
            return None

        page = None
        if len(parts) >= 4 and parts[2] == "page" and parts[3].isdigit():
            page = int(parts[3])

        logger.debug(
            f"Resolved '{request_path}' to {kind} '{ref.slug}' ({language.code})"
        )
        return RouteQuery(kind, ref.slug, language.code, page)

    def _reverse_lookup(self, kind, slug, language_code):
        if kind == TAXONOMY_TERM:
            return self.slug_store.find_by_translated_slug(
                TAXONOMY_TERM, slug, language_code, candidates=self.repository.list_terms()
            )
        return self.slug_store.find_by_translated_slug(CONTENT_POST, slug, language_code)

    def _resolve_product(self, slug: str, language_code: str) -> Optional[RouteQuery]:
        product = self.slug_store.find_by_translated_slug(PRODUCT, slug, language_code)
        if product is None:
            return None
        return RouteQuery(PRODUCT, product.slug, language_code)
