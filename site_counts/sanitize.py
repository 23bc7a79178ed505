"""
Allowlist HTML sanitizer for rendered post content.

Applies the same policy the site uses for user-generated post markup:
only known tags survive, each with its own attribute allowlist. Unknown
tags are unwrapped so their text is kept. Tags whose content is executable
or embedded are dropped along with everything inside them.
"""

import re
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Comment

_TEXT_ATTRS = frozenset({"class", "id", "title", "lang", "dir"})

ALLOWED_TAGS: dict[str, frozenset[str]] = {
    "a": _TEXT_ATTRS | {"href", "rel", "target", "name"},
    "abbr": _TEXT_ATTRS,
    "b": _TEXT_ATTRS,
    "blockquote": _TEXT_ATTRS | {"cite"},
    "br": frozenset(),
    "cite": _TEXT_ATTRS,
    "code": _TEXT_ATTRS,
    "del": _TEXT_ATTRS | {"datetime"},
    "div": _TEXT_ATTRS,
    "em": _TEXT_ATTRS,
    "figcaption": _TEXT_ATTRS,
    "figure": _TEXT_ATTRS,
    "h1": _TEXT_ATTRS,
    "h2": _TEXT_ATTRS,
    "h3": _TEXT_ATTRS,
    "h4": _TEXT_ATTRS,
    "h5": _TEXT_ATTRS,
    "h6": _TEXT_ATTRS,
    "hr": _TEXT_ATTRS,
    "i": _TEXT_ATTRS,
    "img": _TEXT_ATTRS | {"src", "alt", "width", "height", "loading"},
    "ins": _TEXT_ATTRS | {"datetime"},
    "li": _TEXT_ATTRS,
    "ol": _TEXT_ATTRS | {"start", "reversed"},
    "p": _TEXT_ATTRS,
    "pre": _TEXT_ATTRS,
    "small": _TEXT_ATTRS,
    "span": _TEXT_ATTRS,
    "strong": _TEXT_ATTRS,
    "sub": _TEXT_ATTRS,
    "sup": _TEXT_ATTRS,
    "ul": _TEXT_ATTRS,
}

# Removed together with their content
DROP_CONTENT_TAGS = frozenset(
    {"script", "style", "iframe", "object", "embed", "noscript", "template", "frame", "frameset"}
)

URL_ATTRS = frozenset({"href", "src", "cite"})
ALLOWED_SCHEMES = frozenset({"http", "https", "mailto"})

_CONTROL_AND_SPACE = re.compile(r"[\x00-\x20\x7f]+")


def is_safe_url(value: str) -> bool:
    """
    Check a URL attribute value against the allowed schemes.

    Relative URLs have no scheme and are allowed.
    """
    compact = _CONTROL_AND_SPACE.sub("", value).lower()
    if not compact:
        return True
    try:
        scheme = urlsplit(compact).scheme
    except ValueError:
        return False
    return not scheme or scheme in ALLOWED_SCHEMES


def sanitize_post_html(html: str) -> str:
    """
    Strip markup outside the post allowlist.

    Args:
        html: Untrusted HTML fragment

    Returns:
        Sanitized HTML fragment
    """
    soup = BeautifulSoup(html, "html.parser")

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(True):
        if tag.decomposed:
            continue

        if tag.name in DROP_CONTENT_TAGS:
            tag.decompose()
            continue

        allowed_attrs = ALLOWED_TAGS.get(tag.name)
        if allowed_attrs is None:
            tag.unwrap()
            continue

        for attr in list(tag.attrs):
            if attr not in allowed_attrs:
                del tag.attrs[attr]
            elif attr in URL_ATTRS and not is_safe_url(str(tag.attrs[attr])):
                del tag.attrs[attr]

    return str(soup)
