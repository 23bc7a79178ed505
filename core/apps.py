import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    name = "core"

    def ready(self):
        """Validate widget cache settings on startup."""
        from django.conf import settings

        meta_key = getattr(settings, "SITE_COUNTS_META_KEY", "xwp-site-counts")

        if not meta_key or not meta_key.strip():
            raise ImproperlyConfigured(
                "SITE_COUNTS_META_KEY must be a non-empty string. "
                "Unset it to use the default 'xwp-site-counts'."
            )

        if len(meta_key) > 255:
            raise ImproperlyConfigured(
                f"SITE_COUNTS_META_KEY must be at most 255 characters, got {len(meta_key)}"
            )

        if not getattr(settings, "SITE_COUNTS_CACHE_ENABLED", True):
            logger.info("Site counts fragment cache disabled")
