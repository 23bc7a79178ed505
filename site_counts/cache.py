"""
Per-item cache for the rendered Site Counts fragment.

Fragments are stored as content metadata under a single key. Because every
fragment embeds sitewide counts, invalidation is global: a qualifying event
on any item clears the fragment of every item.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from content.meta import delete_meta_by_key, get_meta, update_meta

logger = logging.getLogger(__name__)

CACHE_META_KEY = "xwp-site-counts"

# New statuses that can change a public type's counted total
INVALIDATING_STATUSES = frozenset({"inherit", "publish", "trash"})


class MetadataStore(Protocol):
    """Key/value metadata attached to content items."""

    def get(self, item_id: int, key: str) -> str:
        """Return the stored value, or an empty string."""
        ...

    def set(self, item_id: int, key: str, value: str) -> None:
        ...

    def delete_by_key(self, key: str) -> int:
        """Delete ``key`` from every item; return how many were removed."""
        ...


class ContentMetaStore:
    """MetadataStore backed by ContentMeta rows."""

    def get(self, item_id: int, key: str) -> str:
        return get_meta(item_id, key)

    def set(self, item_id: int, key: str, value: str) -> None:
        update_meta(item_id, key, value)

    def delete_by_key(self, key: str) -> int:
        return delete_meta_by_key(key)


class FragmentCache:
    """
    Read, write and invalidate cached fragments.

    Args:
        store: Metadata backend
        public_types: Slugs of the public post types, captured once at startup
        key: Metadata key the fragments live under
        enabled: When False, reads miss and writes are skipped. Invalidation
            still runs.
    """

    def __init__(
        self,
        store: MetadataStore,
        public_types: Iterable[str],
        key: str = CACHE_META_KEY,
        enabled: bool = True,
    ):
        self.store = store
        self.public_types = frozenset(public_types)
        self.key = key
        self.enabled = enabled

    def get(self, item_id: int) -> str | None:
        if not self.enabled:
            return None
        fragment = self.store.get(item_id, self.key)
        if fragment:
            logger.debug(f"Site counts cache hit for item {item_id}")
            return fragment
        logger.debug(f"Site counts cache miss for item {item_id}")
        return None

    def set(self, item_id: int, fragment: str) -> None:
        if not self.enabled:
            return
        self.store.set(item_id, self.key, fragment)
        logger.debug(f"Stored site counts fragment for item {item_id}")

    def clear_all(self) -> int:
        return self.store.delete_by_key(self.key)

    def on_status_transition(self, new_status: str, old_status: str, post_type: str) -> bool:
        """
        Clear every fragment when a public item moves into a counted state.

        Returns:
            True if fragments were cleared
        """
        if post_type not in self.public_types:
            return False
        if new_status not in INVALIDATING_STATUSES:
            return False

        cleared = self.clear_all()
        logger.info(
            f"SITE_COUNTS_INVALIDATED trigger=transition post_type={post_type} "
            f"old_status={old_status} new_status={new_status} cleared={cleared}"
        )
        return True

    def on_hard_delete(self, last_status: str, post_type: str) -> bool:
        """
        Clear every fragment when an item is permanently removed.

        An item that was already in the trash was counted out when it got
        there, so deleting it changes nothing.

        Returns:
            True if fragments were cleared
        """
        if last_status == "trash":
            return False
        return self.on_status_transition("trash", last_status, post_type)
