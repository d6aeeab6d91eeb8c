import re
from typing import Any, Dict
import nh3
from markupsafe import Markup, escape

# Rich-text subset accepted in content fields.
ALLOWED_TAGS = {
    "a", "b", "blockquote", "br", "code", "em", "h1", "h2", "h3", "h4",
    "i", "li", "mark", "ol", "p", "pre", "s", "small", "span", "strong",
    "sub", "sup", "u", "ul",
}
ALLOWED_ATTRIBUTES = {
    "a": {"href", "title", "target"},
    "span": {"class"},
    "p": {"class"},
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_UNSAFE_CSS_VALUE = re.compile(r"[;{}<>]|url\s*\(|expression\s*\(", re.IGNORECASE)


def sanitize_html(value: str | None) -> Markup:
    """Strip everything outside the allow-listed tags and attributes."""
    if not value:
        return Markup("")
    return Markup(
        nh3.clean(
            value,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            link_rel="noopener noreferrer",
        )
    )


def css_property(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; kebab-case passes through."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def style_attr(style: Dict[str, Any] | None) -> Markup:
    """
    Render a style dict as an inline ``style`` attribute value.

    Declarations whose value could break out of the attribute or load
    external resources are dropped.
    """
    if not style:
        return Markup("")

    declarations = []
    for name, value in style.items():
        if value is None or isinstance(value, (dict, list)):
            continue
        value = str(value).strip()
        if not value or _UNSAFE_CSS_VALUE.search(value):
            continue
        declarations.append(f"{css_property(str(name))}: {value}")

    return escape("; ".join(declarations))


def css_url(value: str | None) -> Markup:
    """``url(...)`` for a background image; anything but https or site-relative paths is dropped."""
    if not value:
        return Markup("")
    value = value.strip()
    if not value.startswith(("https://", "/")) or re.search(r"[\s'\"()\\]", value):
        return Markup("")
    return escape(f"url('{value}')")
