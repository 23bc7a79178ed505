"""Content app configuration."""
from django.apps import AppConfig


class ContentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "content"
    verbose_name = "Content"

    def ready(self):
        """Register the built-in post types."""
        from .post_types import register_default_post_types

        register_default_post_types()
