"""Signal handlers that invalidate cached Site Counts fragments."""

from django.apps import apps
from django.db.models.signals import pre_delete
from django.dispatch import receiver

from content.models import ContentItem
from content.signals import post_status_transitioned


def _fragment_cache():
    return apps.get_app_config("site_counts").block.cache


@receiver(post_status_transitioned, sender=ContentItem)
def invalidate_on_status_transition(sender, item, old_status, new_status, **kwargs):
    """Clear every cached fragment when a public item's count may change."""
    _fragment_cache().on_status_transition(
        new_status=new_status,
        old_status=old_status,
        post_type=item.post_type,
    )


@receiver(pre_delete, sender=ContentItem)
def invalidate_on_hard_delete(sender, instance, **kwargs):
    """
    Clear every cached fragment when an item is permanently removed.

    Items deleted straight from the trash are skipped. The stored status
    decides, not unsaved changes on the instance.
    """
    _fragment_cache().on_hard_delete(
        last_status=instance.persisted_status,
        post_type=instance.post_type,
    )
