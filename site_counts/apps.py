"""Site Counts app configuration."""
from pathlib import Path

from django.apps import AppConfig


class SiteCountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "site_counts"
    verbose_name = "Site Counts Block"

    block = None

    def ready(self):
        """Build the block, register it, and connect the cache receivers."""
        from content.blocks import get_block_type, register_block_type_from_metadata

        from .block import SiteCountsBlock

        # content's ready() has run (INSTALLED_APPS order), so the post type
        # registry is populated before the snapshot is taken.
        self.block = SiteCountsBlock.from_settings()

        if get_block_type("xwp/site-counts") is None:
            register_block_type_from_metadata(
                Path(__file__).resolve().parent,
                self.render_callback,
            )

        import site_counts.signal_handlers  # noqa

    def render_callback(self, attributes, item_id):
        return self.block.render_callback(attributes, item_id)
