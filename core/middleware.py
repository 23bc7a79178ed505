"""Middleware for adding context to Sentry error reports."""

import sentry_sdk
from django.conf import settings


class SentryContextMiddleware:
    """
    Add request and block cache context to Sentry error reports.

    Does nothing unless Sentry has been initialized (production with
    SENTRY_DSN set), so it is safe to keep in every environment.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if sentry_sdk.get_client().is_active():
            # Add authenticated user info (privacy-safe)
            if hasattr(request, 'user') and request.user.is_authenticated:
                sentry_sdk.set_user({
                    "id": request.user.id,
                    "is_staff": request.user.is_staff,
                    # Explicitly NOT including: email, ip_address (GDPR)
                })

            # Add request context
            sentry_sdk.set_tag("request_path", request.path)
            sentry_sdk.set_tag("request_method", request.method)

            sentry_sdk.set_context("site_counts", {
                "cache_enabled": settings.SITE_COUNTS_CACHE_ENABLED,
                "meta_key": settings.SITE_COUNTS_META_KEY,
            })

        return self.get_response(request)
