"""URL configuration for Site Counts API v1."""

from django.urls import include, path

urlpatterns = [
    # Site Counts block
    path("site-counts/", include("site_counts.urls")),
]
