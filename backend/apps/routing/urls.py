"""
URL configuration for routing app.
"""

from django.urls import path

from . import views

urlpatterns = [
    path("translate/", views.TranslateUrlView.as_view(), name="routing-translate"),
    path("alternates/", views.AlternateLinksView.as_view(), name="routing-alternates"),
    path("routes/", views.RouteListView.as_view(), name="routing-routes"),
    path(
        "routes/rebuild/",
        views.RouteRebuildView.as_view(),
        name="routing-routes-rebuild",
    ),
]
