"""
Content queries.

``ContentQuery`` captures the filters a consumer wants; ``query_items``
turns it into a queryset. ``count_items`` reports per-status totals for a
post type.
"""

from dataclasses import dataclass, field

from django.db.models import Count, QuerySet

from .models import ContentItem, Term


@dataclass(frozen=True)
class ContentQuery:
    """
    Filters for selecting content items.

    ``no_found_rows``, ``update_meta_cache`` and ``update_term_cache`` are
    performance hints. They never change which items are returned.
    """

    post_types: tuple[str, ...] = ("post",)
    status: str = "publish"
    per_page: int = 10
    tag: str | None = None
    category_name: str | None = None
    hour_after: int | None = None  # inclusive lower bound on publish hour
    hour_before: int | None = None  # inclusive upper bound on publish hour
    exclude_ids: tuple[int, ...] = field(default_factory=tuple)
    ignore_sticky_posts: bool = False
    no_found_rows: bool = False
    update_meta_cache: bool = True
    update_term_cache: bool = True


def query_items(query: ContentQuery) -> QuerySet:
    """
    Build the queryset for a ContentQuery.

    Items are ordered newest first. Unless sticky posts are ignored, sticky
    items are moved to the front.
    """
    qs = ContentItem.objects.filter(
        post_type__in=query.post_types,
        status=query.status,
    )

    if query.tag:
        qs = qs.filter(
            terms__taxonomy=Term.TAXONOMY_TAG, terms__slug=query.tag
        )
    if query.category_name:
        # Separate filter() calls so each condition can match a different term
        qs = qs.filter(
            terms__taxonomy=Term.TAXONOMY_CATEGORY, terms__slug=query.category_name
        )
    if query.hour_after is not None:
        qs = qs.filter(published_at__hour__gte=query.hour_after)
    if query.hour_before is not None:
        qs = qs.filter(published_at__hour__lte=query.hour_before)
    if query.exclude_ids:
        qs = qs.exclude(pk__in=query.exclude_ids)

    if query.ignore_sticky_posts:
        qs = qs.order_by("-published_at", "-id")
    else:
        qs = qs.order_by("-is_sticky", "-published_at", "-id")

    if query.update_meta_cache:
        qs = qs.prefetch_related("meta")
    if query.update_term_cache:
        qs = qs.prefetch_related("terms")

    return qs.distinct()[: query.per_page]


def count_items(post_type: str) -> dict[str, int]:
    """
    Count items of a post type grouped by status.

    Returns:
        Mapping of status to count. Statuses with no items are absent.
    """
    rows = (
        ContentItem.objects.filter(post_type=post_type)
        .order_by()
        .values("status")
        .annotate(total=Count("id"))
    )
    return {row["status"]: row["total"] for row in rows}
