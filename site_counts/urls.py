"""URL configuration for the Site Counts app."""

from django.urls import path

from . import api

app_name = "site_counts"

urlpatterns = [
    path("<int:item_id>/", api.SiteCountsRenderView.as_view(), name="render"),
]
