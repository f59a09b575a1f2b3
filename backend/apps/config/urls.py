from django.urls import include, path, re_path


from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)


from apps.routing.views import ResourceDispatchView


urlpatterns = [
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # API endpoints
    path("api/v1/routing/", include("apps.routing.urls")),
    # Site paths, canonical or locale-prefixed (must stay last)
    re_path(r"^(?P<path>(?!api/).*)$", ResourceDispatchView.as_view(), name="resource-dispatch"),
]
