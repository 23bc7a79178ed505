"""Django signals for content lifecycle events."""

from django.dispatch import Signal

# Fired after a content item is saved with a status different from the one
# it was loaded with (or on first save, where old_status is "new").
#
# Arguments:
#   sender: ContentItem class
#   item: ContentItem instance (already saved)
#   old_status: str - Previous status, or "new"
#   new_status: str - Status the item now has
#
# Permanent removal is not a transition; listen to pre_delete on ContentItem.
post_status_transitioned = Signal()
