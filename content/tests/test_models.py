"""Tests for content models and the status transition signal."""

from django.test import TestCase

from content.meta import delete_meta_by_key, get_meta, update_meta
from content.models import ContentItem, ContentMeta, ContentStatus, STATUS_NEW
from content.signals import post_status_transitioned
from content.tests.factories import ContentItemFactory, ContentMetaFactory


class StatusTransitionSignalTest(TestCase):
    """Tests for post_status_transitioned."""

    def setUp(self):
        super().setUp()
        self.transitions = []

        def record(sender, item, old_status, new_status, **kwargs):
            self.transitions.append((item.pk, old_status, new_status))

        post_status_transitioned.connect(record, sender=ContentItem, weak=False)
        self.addCleanup(post_status_transitioned.disconnect, record, sender=ContentItem)

    def test_creation_reports_new_as_old_status(self):
        """First save is a transition from 'new'."""
        item = ContentItemFactory(status=ContentStatus.DRAFT)
        self.assertEqual(self.transitions, [(item.pk, STATUS_NEW, "draft")])

    def test_status_change_fires_signal(self):
        """Changing the status fires with old and new values."""
        item = ContentItemFactory(draft=True)
        self.transitions.clear()

        item.status = ContentStatus.PUBLISH
        item.save()

        self.assertEqual(self.transitions, [(item.pk, "draft", "publish")])

    def test_save_without_status_change_is_silent(self):
        """Saving other fields does not fire the signal."""
        item = ContentItemFactory()
        self.transitions.clear()

        item.title = "Renamed"
        item.save()

        self.assertEqual(self.transitions, [])

    def test_transition_detected_on_reloaded_instance(self):
        """Old status comes from the database row the instance was loaded from."""
        item = ContentItemFactory()
        self.transitions.clear()

        reloaded = ContentItem.objects.get(pk=item.pk)
        reloaded.status = ContentStatus.PRIVATE
        reloaded.save()

        self.assertEqual(self.transitions, [(item.pk, "publish", "private")])

    def test_transition_detected_with_deferred_status(self):
        """A deferred status field is looked up before saving."""
        item = ContentItemFactory()
        self.transitions.clear()

        deferred = ContentItem.objects.only("title").get(pk=item.pk)
        deferred.status = ContentStatus.DRAFT
        deferred.save()

        self.assertEqual(self.transitions, [(item.pk, "publish", "draft")])

    def test_trash_moves_item_to_trash(self):
        """trash() is a status transition, not a deletion."""
        item = ContentItemFactory()
        self.transitions.clear()

        item.trash()

        item.refresh_from_db()
        self.assertEqual(item.status, "trash")
        self.assertEqual(self.transitions, [(item.pk, "publish", "trash")])

    def test_update_fields_without_status_is_silent(self):
        """A status change that is not written does not fire the signal."""
        item = ContentItemFactory(draft=True)
        self.transitions.clear()

        item.status = ContentStatus.PUBLISH
        item.title = "Renamed"
        item.save(update_fields=["title"])

        self.assertEqual(self.transitions, [])
        self.assertEqual(item.persisted_status, "draft")

    def test_status_written_after_partial_save_fires_once(self):
        """The stored status is still the old one when status is finally saved."""
        item = ContentItemFactory(draft=True)
        self.transitions.clear()

        item.status = ContentStatus.PUBLISH
        item.save(update_fields=["title"])
        item.save()

        self.assertEqual(self.transitions, [(item.pk, "draft", "publish")])


class PersistedStatusTest(TestCase):
    """Tests for ContentItem.persisted_status."""

    def test_unsaved_item_is_new(self):
        self.assertEqual(ContentItem(status=ContentStatus.PUBLISH).persisted_status, STATUS_NEW)

    def test_ignores_unsaved_change(self):
        item = ContentItemFactory()
        item.status = ContentStatus.TRASH
        self.assertEqual(item.persisted_status, "publish")

    def test_deferred_status_read_from_database(self):
        item = ContentItemFactory(draft=True)
        deferred = ContentItem.objects.only("title").get(pk=item.pk)
        self.assertEqual(deferred.persisted_status, "draft")


class ContentMetaHelpersTest(TestCase):
    """Tests for get_meta, update_meta and delete_meta_by_key."""

    def test_get_meta_missing_returns_empty_string(self):
        item = ContentItemFactory()
        self.assertEqual(get_meta(item.pk, "missing"), "")

    def test_update_meta_creates_then_replaces(self):
        """Only one row per item and key."""
        item = ContentItemFactory()

        update_meta(item.pk, "colour", "red")
        update_meta(item.pk, "colour", "blue")

        self.assertEqual(get_meta(item.pk, "colour"), "blue")
        self.assertEqual(ContentMeta.objects.filter(item=item, key="colour").count(), 1)

    def test_delete_meta_by_key_spans_items(self):
        """Every item loses the key; other keys are kept."""
        first = ContentMetaFactory(key="shared")
        second = ContentMetaFactory(key="shared")
        other = ContentMetaFactory(key="kept")

        deleted = delete_meta_by_key("shared")

        self.assertEqual(deleted, 2)
        self.assertEqual(get_meta(first.item_id, "shared"), "")
        self.assertEqual(get_meta(second.item_id, "shared"), "")
        self.assertEqual(get_meta(other.item_id, "kept"), "value")

    def test_meta_removed_with_item(self):
        meta = ContentMetaFactory()
        meta.item.delete()
        self.assertFalse(ContentMeta.objects.filter(pk=meta.pk).exists())
