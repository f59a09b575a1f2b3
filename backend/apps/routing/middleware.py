import logging

from django.utils.deprecation import MiddlewareMixin

from apps.core.exceptions import DependencyUnavailable

from .components import get_components

logger = logging.getLogger(__name__)


class LocalizedRoutingMiddleware(MiddlewareMixin):
    """
    Bind locale-prefixed paths to the canonical resource they address.

    Static rules are tried first; the fallback resolver only sees requests
    they left unbound. The result is stored on ``request.route_query``
    (None when the host's default routing applies).
    """

    EXCLUDED_PREFIXES = ("/api/", "/admin/", "/static/", "/media/")

    def process_request(self, request):
        request.route_query = None

        components = get_components()
        if components is None:
            return None

        path = request.path_info
        if path.startswith(self.EXCLUDED_PREFIXES):
            return None

        try:
            query = components.route_table.match(path)
            if query is None:
                query = components.resolver.resolve(path, bound=query)
        except DependencyUnavailable as e:
            components.report_unavailable(e)
            return None

        if query is not None:
            logger.debug(
                f"Bound '{path}' to {query.resource_type} '{query.slug}' ({query.language})"
            )
        request.route_query = query
        return None
