"""Helpers for reading and writing content item metadata."""

from .models import ContentMeta


def get_meta(item_id: int, key: str) -> str:
    """Return the stored value, or an empty string when there is none."""
    value = (
        ContentMeta.objects.filter(item_id=item_id, key=key)
        .values_list("value", flat=True)
        .first()
    )
    return value or ""


def update_meta(item_id: int, key: str, value: str) -> None:
    ContentMeta.objects.update_or_create(
        item_id=item_id, key=key, defaults={"value": value}
    )


def delete_meta_by_key(key: str) -> int:
    """
    Delete the given key from every item that has it.

    Returns:
        Number of rows deleted
    """
    deleted, _ = ContentMeta.objects.filter(key=key).delete()
    return deleted
