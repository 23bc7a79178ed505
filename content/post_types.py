"""
Post type registry.

Post types describe the kinds of ContentItem the site knows about: their
display labels and whether they are public. Registration order is kept and
is the order every consumer iterates in.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostType:
    """Labels and visibility for one kind of content item."""

    slug: str
    singular_name: str
    name: str
    public: bool = True


_registry: dict[str, PostType] = {}


def register_post_type(post_type: PostType) -> PostType:
    """
    Register (or replace) a post type.

    Replacing an existing slug keeps its original position in the registry.
    """
    if post_type.slug in _registry:
        logger.debug(f"Replacing post type registration: {post_type.slug}")
    _registry[post_type.slug] = post_type
    return post_type


def unregister_post_type(slug: str) -> None:
    _registry.pop(slug, None)


def get_post_type(slug: str) -> PostType | None:
    return _registry.get(slug)


def get_post_types(public: bool | None = None) -> list[PostType]:
    """
    List registered post types in registration order.

    Args:
        public: When given, only return types whose ``public`` flag matches.

    Returns:
        List of PostType descriptors
    """
    return [
        post_type
        for post_type in _registry.values()
        if public is None or post_type.public == public
    ]


DEFAULT_POST_TYPES = (
    PostType("post", "Post", "Posts"),
    PostType("page", "Page", "Pages"),
    PostType("attachment", "Media", "Media"),
    PostType("revision", "Revision", "Revisions", public=False),
    PostType("nav_menu_item", "Navigation Menu Item", "Navigation Menu Items", public=False),
)


def register_default_post_types() -> None:
    for post_type in DEFAULT_POST_TYPES:
        if post_type.slug not in _registry:
            register_post_type(post_type)
