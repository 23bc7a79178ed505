"""The Site Counts dynamic block."""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from django.conf import settings
from django.utils.html import escape
from django.utils.translation import gettext, ngettext

from content.post_types import PostType, get_post_types
from content.query import ContentQuery, count_items, query_items

from .cache import CACHE_META_KEY, ContentMetaStore, FragmentCache
from .sanitize import sanitize_post_html

logger = logging.getLogger(__name__)

BASE_CLASS_NAME = "site-counts-container"

LATEST_POSTS_QUERY = ContentQuery(
    post_types=("post", "page"),
    per_page=10,
    status="publish",
    ignore_sticky_posts=True,
    no_found_rows=True,
    update_meta_cache=False,
    update_term_cache=False,
    tag="foo",
    category_name="baz",
    hour_after=9,
    hour_before=17,
)

LATEST_POSTS_LIMIT = 5


class SiteCountsBlock:
    """
    Renders post type counts and the latest matching posts.

    Output is cached per displayed item through ``cache``. The post type
    list is the snapshot taken when the block was built and is used for
    both the counts and the cache invalidation checks.
    """

    def __init__(
        self,
        post_types: Iterable[PostType],
        cache: FragmentCache,
        query: Callable[[ContentQuery], Iterable[Any]] = query_items,
        counter: Callable[[str], Mapping[str, int]] = count_items,
    ):
        self.post_types = tuple(post_types)
        self.cache = cache
        self.query = query
        self.counter = counter

    @classmethod
    def from_settings(cls) -> "SiteCountsBlock":
        """Build the block with a snapshot of the public post types."""
        post_types = get_post_types(public=True)
        cache = FragmentCache(
            store=ContentMetaStore(),
            public_types=[post_type.slug for post_type in post_types],
            key=getattr(settings, "SITE_COUNTS_META_KEY", CACHE_META_KEY),
            enabled=getattr(settings, "SITE_COUNTS_CACHE_ENABLED", True),
        )
        return cls(post_types=post_types, cache=cache)

    def render_callback(self, attributes: Mapping[str, Any], item_id: int) -> str:
        """
        Render the block for the item being displayed.

        Args:
            attributes: Block attributes; ``className`` is appended to the
                container class
            item_id: ID of the item the block appears on

        Returns:
            Sanitized HTML markup
        """
        cached = self.cache.get(item_id)
        if cached:
            return cached

        html = self.render(attributes, item_id)
        logger.debug(f"Rendered site counts block for item {item_id}")
        self.cache.set(item_id, html)
        return html

    def render(self, attributes: Mapping[str, Any], item_id: int) -> str:
        """Build the markup without touching the cache."""
        class_name = BASE_CLASS_NAME
        if attributes.get("className"):
            class_name += " " + attributes["className"]

        html = []

        # Open container.
        html.append(f'<div class="{escape(class_name)}">')

        html.append(self.get_count_posts_html())

        html.append(
            "<p>" + gettext("The current post ID is %s") % item_id + "</p>"
        )

        html.append(self.get_latest_posts_html(item_id))

        # Close container.
        html.append("</div>")

        return sanitize_post_html("".join(html))

    def get_count_posts_html(self) -> str:
        """Counts of each public post type, one list item per type."""
        html = ["<h2>" + escape(gettext("Post Counts")) + "</h2>", "<ul>"]

        for post_type in self.post_types:
            counts = self.counter(post_type.slug)
            countable_status = "inherit" if post_type.slug == "attachment" else "publish"
            post_count = int(counts.get(countable_status, 0))

            note = ngettext(
                "There is %(count)d %(singular)s",
                "There are %(count)d %(plural)s",
                post_count,
            ) % {
                "count": post_count,
                "singular": post_type.singular_name,
                "plural": post_type.name,
            }
            html.append("<li>" + note + "</li>")

        html.append("</ul>")
        return "".join(html)

    def get_latest_posts_html(self, exclude: int) -> str:
        """
        Up to five of the latest matching posts, skipping ``exclude``.

        Returns an empty string when nothing is left to list.
        """
        items = []
        for item in self.query(LATEST_POSTS_QUERY):
            if len(items) >= LATEST_POSTS_LIMIT:
                break
            if item.id == exclude:
                continue
            items.append("<li>" + item.title + "</li>")

        if not items:
            return ""

        heading = escape(gettext("5 posts with the tag of foo and the category of baz"))
        return "<h2>" + heading + "</h2><ul>" + "".join(items) + "</ul>"
