"""
API views for localized routing.

The dispatcher serves whatever the middleware bound to the request and
otherwise falls back to canonical-slug routing in the default language.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import permissions, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.exceptions import DependencyUnavailable

from .components import get_components
from .conf import PRODUCT
from .hreflang import build_alternate_links
from .rules import RouteQuery
from .serializers import (
    AlternatesRequestSerializer,
    RebuildResultSerializer,
    ResolvedResourceSerializer,
    RouteRuleSerializer,
    TranslatedUrlSerializer,
    TranslateQuerySerializer,
)

logger = logging.getLogger(__name__)


class RoutingAPIView(APIView):
    """Base view giving access to the routing components."""

    @property
    def components(self):
        components = get_components()
        if components is None:
            raise NotFound("Localized routing is disabled")
        return components

    def current_resource(self, data):
        """Resolve the optional ``resource_type``/``resource_id`` pair."""
        if "resource_type" not in data:
            return None
        ref = self.components.repository.find_by_id(data["resource_type"], data["resource_id"])
        if ref is None:
            raise NotFound(
                f"No published {data['resource_type']} with id {data['resource_id']}"
            )
        return ref


class TranslateUrlView(RoutingAPIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="Translate a URL",
        description="Return the URL of the same resource in another language. "
        "Unresolvable URLs are returned unchanged.",
        parameters=[
            OpenApiParameter("url", str, required=True),
            OpenApiParameter("language", str, required=True),
            OpenApiParameter("resource_type", str),
            OpenApiParameter("resource_id", int),
        ],
        responses={200: TranslatedUrlSerializer},
        tags=["Routing"],
    )
    def get(self, request):
        serializer = TranslateQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        url = self.components.translator.translate(
            data["url"], data["language"], current=self.current_resource(data)
        )
        return Response(TranslatedUrlSerializer({"url": url, "language": data["language"]}).data)


class AlternateLinksView(RoutingAPIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="Correct alternate links",
        description="Rewrite the href of each alternate link to the translated URL "
        "and normalize region tags. x-default links keep their href.",
        request=AlternatesRequestSerializer,
        responses={200: {"type": "object", "additionalProperties": {"type": "string"}}},
        tags=["Routing"],
    )
    def post(self, request):
        serializer = AlternatesRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        processed = self.components.hreflang.process(
            data["alternate_links"],
            data["current_url"],
            current=self.current_resource(data),
        )
        return Response(processed)


class RouteListView(RoutingAPIView):
    permission_classes = [permissions.IsAdminUser]

    @extend_schema(
        summary="List active route rules",
        responses={200: RouteRuleSerializer(many=True)},
        tags=["Routing"],
    )
    def get(self, request):
        rules = self.components.route_table.rules
        return Response(RouteRuleSerializer(rules, many=True).data)


class RouteRebuildView(RoutingAPIView):
    permission_classes = [permissions.IsAdminUser]

    @extend_schema(
        summary="Rebuild route rules",
        description="Clear cached slugs and regenerate the route table immediately.",
        request=None,
        responses={200: RebuildResultSerializer},
        tags=["Routing"],
    )
    def post(self, request):
        rules = self.components.rebuild_now()
        logger.info(f"Route rebuild requested by {request.user}")
        return Response(
            RebuildResultSerializer({"rules": len(rules)}).data, status=status.HTTP_200_OK
        )


class ResourceDispatchView(RoutingAPIView):
    """Serve the resource a site path addresses, with its alternate links."""

    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="Resolve a site path",
        responses={200: ResolvedResourceSerializer},
        tags=["Routing"],
    )
    def get(self, request, path=""):
        components = self.components
        query = getattr(request, "route_query", None) or self.canonical_query(path)
        if query is None:
            raise NotFound(f"No resource at '/{path}'")

        ref = components.repository.find_published(query.resource_type, query.slug)
        if ref is None:
            raise NotFound(f"No published {query.resource_type} '{query.slug}'")

        translator = components.translator
        language = components.registry.get(query.language)
        if language is None or language.is_default:
            url = translator.build_url(None, ref.resource_type, ref.slug, query.page)
        else:
            slug = (
                components.slug_store.get_translated_slug(
                    ref.id, ref.resource_type, language.code
                )
                or ref.slug
            )
            url = translator.build_url(language.prefix, ref.resource_type, slug, query.page)

        instance = components.repository.load(ref)
        return Response(
            ResolvedResourceSerializer(
                {
                    "resource_type": ref.resource_type,
                    "id": ref.id,
                    "slug": ref.slug,
                    "title": str(instance),
                    "language": query.language,
                    "page": query.page,
                    "url": url,
                    "alternates": self.alternates(ref, url, query.page),
                }
            ).data
        )

    def canonical_query(self, path: str) -> Optional[RouteQuery]:
        """
        Routing by canonical slug.

        A leading non-default language prefix selects that language; the
        remaining path must name a resource by its canonical slug.
        """
        components = self.components
        parts = [part for part in path.strip("/").split("/") if part]

        try:
            language = components.registry.default_language()
            prefixed = components.registry.by_prefix(parts[0]) if parts else None
        except DependencyUnavailable as e:
            components.report_unavailable(e)
            return None

        if prefixed is not None and not prefixed.is_default:
            language = prefixed.code
            parts = parts[1:]

        page = None
        if len(parts) >= 3 and parts[-2] == "page" and parts[-1].isdigit():
            page = int(parts[-1])
            parts = parts[:-2]

        segment = components.settings.product_segment
        if len(parts) == 2 and parts[0] == segment:
            kinds, slug = (PRODUCT,), parts[1]
        elif len(parts) == 1:
            kinds = [kind for kind in components.settings.resolution_order if kind != PRODUCT]
            slug = parts[0]
        else:
            return None

        for kind in kinds:
            if components.repository.find_published(kind, slug) is not None:
                return RouteQuery(kind, slug, language, page)
        return None

    def alternates(self, ref, url: str, page: Optional[int]) -> dict:
        components = self.components
        try:
            languages = components.registry.list_languages()
        except DependencyUnavailable as e:
            components.report_unavailable(e)
            return {}

        canonical_url = components.translator.build_url(
            None, ref.resource_type, ref.slug, page
        )
        generic = build_alternate_links(
            urlsplit(canonical_url).path, languages, components.settings.site_url
        )
        return components.hreflang.process(generic, url, current=ref)
