import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from portfolio.models.content_field import STYLE_SUFFIX

logger = logging.getLogger(__name__)


# Suggested field keys per section layout, offered by the admin when adding
# content to a section.
FIELD_TYPE_MAPPINGS: Dict[str, List[str]] = {
    "hero_section": [
        "title",
        "subtitle",
        "description",
        "button_text",
        "background_image",
    ],
    "about_section": [
        "title",
        "paragraph_1",
        "paragraph_2",
        "skills_title",
        "skills_list",
        "education_title",
        "education_list",
        "button_text",
    ],
    "projects_section": ["title", "description"],
    "articles_section": ["title", "description"],
    "contact_section": [
        "title",
        "description",
        "form_name_label",
        "form_email_label",
        "form_message_label",
        "form_button_text",
    ],
    "testimonial_section": ["title", "testimonials"],
    "feature_section": ["title", "subtitle", "features"],
    "pricing_section": ["title", "description", "plans"],
    "faq_section": ["title", "description", "faqs"],
    "cta_section": ["title", "description", "button_text", "button_url"],
    "generic_section": [
        "title",
        "subtitle",
        "content",
        "background_style",
        "title_style",
        "subtitle_style",
        "content_style",
    ],
}

# Checked in order; the first matching fragment wins.
_INPUT_TYPE_RULES = (
    (("image", "photo", "avatar"), "image"),
    (("url", "link"), "url"),
    (("email",), "email"),
    (("password",), "password"),
    (("date",), "date"),
    (("color",), "color"),
    (("paragraph", "description", "content"), "textarea"),
    (("list",), "list"),
    (("style",), "json"),
)

INPUT_TYPE_LABELS = {
    "text": "Text",
    "textarea": "Long Text",
    "rich_text": "Rich Text",
    "image": "Image URL",
    "url": "URL",
    "list": "List",
    "json": "JSON",
    "date": "Date",
    "email": "Email",
    "password": "Password",
    "color": "Color",
}


def get_field_input_type(field_name: str) -> str:
    """Guess the admin input widget for a content field from its key."""
    for fragments, input_type in _INPUT_TYPE_RULES:
        if any(fragment in field_name for fragment in fragments):
            return input_type
    return "text"


def get_input_type_label(field_name: str) -> str:
    return INPUT_TYPE_LABELS.get(get_field_input_type(field_name), "Text")


@dataclass(frozen=True)
class StyledContent:
    content: str
    style: Dict[str, Any] = field(default_factory=dict)


def _content_type(row) -> str:
    return row.get("content_type") or ""


def _content(row) -> str:
    return row.get("content") or ""


def _find(fields: Optional[Iterable[Mapping[str, Any]]], key: str):
    if not fields:
        return None
    for row in fields:
        if _content_type(row) == key:
            return row
    return None


def resolve(fields: Optional[Iterable[Mapping[str, Any]]], key: str) -> str:
    """
    Return the stored value of the field named ``key``.

    Missing fields (or a missing field list) resolve to an empty string.
    A sibling ``<key>_style`` row never affects the result.
    """
    row = _find(fields, key)
    return _content(row) if row is not None else ""


def resolve_list(fields: Optional[Iterable[Mapping[str, Any]]], key: str) -> List[str]:
    """
    Return a list-valued field.

    Values are stored comma-joined, so an item that itself contains a comma
    comes back as two items. A value written as a JSON array is parsed as
    JSON instead; if it does not parse as an array it is read comma-joined.
    """
    row = _find(fields, key)
    if row is None:
        return []

    raw = _content(row)
    stripped = raw.strip()
    if stripped.startswith("[") and stripped.endswith("]"):
        try:
            parsed = json.loads(stripped)
        except ValueError:
            logger.warning("Could not parse list content for %s: %r", key, raw)
        else:
            if isinstance(parsed, list):
                return [str(item) for item in parsed]
            logger.warning("List content for %s is not a JSON array", key)

    if not stripped:
        return []
    return [item.strip() for item in raw.split(",")]


def parse_style(raw: str, *, key: str = "") -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        style = json.loads(raw)
    except ValueError:
        logger.warning("Malformed style JSON for %s: %r", key or "<unknown>", raw)
        return {}
    if not isinstance(style, dict):
        logger.warning("Style JSON for %s is not an object", key or "<unknown>")
        return {}
    return style


def resolve_styled(fields: Optional[Iterable[Mapping[str, Any]]], key: str) -> StyledContent:
    """Resolve ``key`` together with its ``<key>_style`` sidecar."""
    style_key = key + STYLE_SUFFIX
    return StyledContent(
        content=resolve(fields, key),
        style=parse_style(resolve(fields, style_key), key=style_key),
    )


def content_rows(fields: Optional[Iterable[Mapping[str, Any]]]) -> List[Mapping[str, Any]]:
    """Drop style sidecar rows from a field listing."""
    if not fields:
        return []
    return [row for row in fields if not _content_type(row).endswith(STYLE_SUFFIX)]


def join_list(items: Iterable[str]) -> str:
    return ",".join(items)
