"""Tests for cache invalidation driven by content lifecycle signals."""

from unittest.mock import patch

from content.models import ContentStatus
from content.tests.factories import ContentItemFactory
from core.tests.base import SiteCountsTestCase


class StatusTransitionInvalidationTest(SiteCountsTestCase):
    """post_status_transitioned clears every cached fragment."""

    def setUp(self):
        super().setUp()
        self.item_a = ContentItemFactory()
        self.item_b = ContentItemFactory(page=True)
        self.store_fragment(self.item_a, "<p>A</p>")
        self.store_fragment(self.item_b, "<p>B</p>")

    def test_publishing_any_public_item_clears_all(self):
        draft = ContentItemFactory(draft=True)
        # Creating the draft is not a qualifying transition
        self.assertEqual(self.cached_fragment(self.item_a), "<p>A</p>")

        draft.status = ContentStatus.PUBLISH
        draft.save()

        self.assertIsNone(self.cached_fragment(self.item_a))
        self.assertIsNone(self.cached_fragment(self.item_b))

    def test_creating_published_item_clears_all(self):
        ContentItemFactory()

        self.assertIsNone(self.cached_fragment(self.item_a))
        self.assertIsNone(self.cached_fragment(self.item_b))

    def test_trashing_clears_all(self):
        self.item_a.trash()

        self.assertIsNone(self.cached_fragment(self.item_a))
        self.assertIsNone(self.cached_fragment(self.item_b))

    def test_attachment_inherit_clears_all(self):
        ContentItemFactory(attachment=True)

        self.assertIsNone(self.cached_fragment(self.item_b))

    def test_unpublishing_to_draft_keeps_cache(self):
        self.item_a.status = ContentStatus.DRAFT
        self.item_a.save()

        self.assertEqual(self.cached_fragment(self.item_a), "<p>A</p>")
        self.assertEqual(self.cached_fragment(self.item_b), "<p>B</p>")

    def test_non_public_type_keeps_cache(self):
        ContentItemFactory(post_type="revision")

        self.assertEqual(self.cached_fragment(self.item_a), "<p>A</p>")

    def test_save_without_transition_keeps_cache(self):
        self.item_a.title = "Edited"
        self.item_a.save()

        self.assertEqual(self.cached_fragment(self.item_b), "<p>B</p>")

    def test_publish_after_partial_save_clears_all(self):
        draft = ContentItemFactory(draft=True)
        draft.status = ContentStatus.PUBLISH
        draft.save(update_fields=["title"])
        # Status was not written, nothing to invalidate yet
        self.assertEqual(self.cached_fragment(self.item_a), "<p>A</p>")

        draft.save()

        draft.refresh_from_db()
        self.assertEqual(draft.status, "publish")
        self.assertIsNone(self.cached_fragment(self.item_a))
        self.assertIsNone(self.cached_fragment(self.item_b))


class HardDeleteInvalidationTest(SiteCountsTestCase):
    """pre_delete on ContentItem clears every cached fragment."""

    def setUp(self):
        super().setUp()
        self.cached_item = ContentItemFactory()
        self.store_fragment(self.cached_item, "<p>cached</p>")

    def test_deleting_published_item_clears_all(self):
        victim = ContentItemFactory()
        # Publishing the victim cleared the cache, store it again
        self.store_fragment(self.cached_item, "<p>cached</p>")

        victim.delete()

        self.assertIsNone(self.cached_fragment(self.cached_item))

    def test_stored_status_decides_on_delete(self):
        victim = ContentItemFactory()
        self.store_fragment(self.cached_item, "<p>cached</p>")

        # Unsaved change, the row is still published
        victim.status = ContentStatus.TRASH
        victim.delete()

        self.assertIsNone(self.cached_fragment(self.cached_item))

    def test_deleting_trashed_item_keeps_cache(self):
        victim = ContentItemFactory(trashed=True)
        self.store_fragment(self.cached_item, "<p>cached</p>")

        victim.delete()

        self.assertEqual(self.cached_fragment(self.cached_item), "<p>cached</p>")

    def test_deleting_non_public_item_keeps_cache(self):
        victim = ContentItemFactory(post_type="nav_menu_item")

        victim.delete()

        self.assertEqual(self.cached_fragment(self.cached_item), "<p>cached</p>")

    @patch("site_counts.cache.logger")
    def test_hard_delete_logged(self, mock_logger):
        victim = ContentItemFactory(draft=True)

        victim.delete()

        message = mock_logger.info.call_args[0][0]
        self.assertIn("new_status=trash", message)
        self.assertIn("old_status=draft", message)


class RenderAndInvalidateTest(SiteCountsTestCase):
    """End-to-end: render, cache, then invalidate through the ORM."""

    def test_render_caches_until_publish(self):
        page = ContentItemFactory(page=True, title="Home")
        self.create_listed_post(title="Listed")

        html = self.block.render_callback({}, page.pk)

        self.assertEqual(self.cached_fragment(page), html)
        self.assertIn("<li>There is 1 Post</li>", html)
        self.assertIn("<li>There is 1 Page</li>", html)
        self.assertIn("<li>Listed</li>", html)

        self.create_listed_post(title="Another")

        self.assertIsNone(self.cached_fragment(page))
        refreshed = self.block.render_callback({}, page.pk)
        self.assertIn("<li>There are 2 Posts</li>", refreshed)
        self.assertIn("<li>Another</li>", refreshed)

    def test_cached_output_matches_direct_render(self):
        page = ContentItemFactory(page=True)
        self.create_listed_post()

        cached = self.block.render_callback({"className": "wide"}, page.pk)

        self.assertEqual(cached, self.block.render({"className": "wide"}, page.pk))

    def test_current_item_left_out_of_latest_posts(self):
        current = self.create_listed_post(title="Current")
        self.create_listed_post(title="Other")

        html = self.block.render_callback({}, current.pk)

        self.assertIn("<li>Other</li>", html)
        self.assertNotIn("<li>Current</li>", html)

    def test_latest_posts_capped_at_five(self):
        posts = [self.create_listed_post(title=f"Listed {n}") for n in range(7)]
        outsider = ContentItemFactory(page=True)

        html = self.block.render_callback({}, outsider.pk)

        for post in posts[:5]:
            self.assertIn(f"<li>{post.title}</li>", html)
        for post in posts[5:]:
            self.assertNotIn(f"<li>{post.title}</li>", html)
