from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .content import resolve, resolve_list, resolve_styled, parse_style, StyledContent


class SectionKind(str, Enum):
    HERO = "hero"
    ABOUT = "about"
    PROJECTS = "projects"
    ARTICLES = "articles"
    CONTACT = "contact"
    GENERIC = "generic"

    @classmethod
    def for_name(cls, section_name: str) -> "SectionKind":
        try:
            kind = cls(section_name.lower())
        except ValueError:
            return cls.GENERIC
        return kind


@dataclass
class ResolvedSection:
    kind: SectionKind
    name: str
    section: Mapping[str, Any]
    fields: List[Mapping[str, Any]] = field(default_factory=list)

    @property
    def anchor(self) -> str:
        return self.name.lower()

    def get(self, key: str) -> str:
        return resolve(self.fields, key)

    def get_list(self, key: str) -> List[str]:
        return resolve_list(self.fields, key)

    def styled(self, key: str) -> StyledContent:
        return resolve_styled(self.fields, key)


@dataclass(frozen=True)
class GenericContent:
    title: StyledContent
    subtitle: StyledContent
    content: StyledContent
    background_style: Dict[str, Any]


def visible_in_order(rows: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """
    Keep visible rows and sort them by ``display_order``.

    ``sorted`` is stable, so rows sharing a display order keep the order in
    which the store returned them.
    """
    return sorted(
        (row for row in rows if row.get("is_visible", True)),
        key=lambda row: row.get("display_order") or 0,
    )


def resolve_sections(
    sections: Iterable[Mapping[str, Any]],
    fields_by_section: Optional[Mapping[str, List[Mapping[str, Any]]]] = None,
) -> List[ResolvedSection]:
    """Turn a page's section rows into the ordered list of sections to render."""
    fields_by_section = fields_by_section or {}

    return [
        ResolvedSection(
            kind=SectionKind.for_name(section["section_name"]),
            name=section["section_name"],
            section=section,
            fields=list(fields_by_section.get(section["section_name"], [])),
        )
        for section in visible_in_order(sections)
    ]


def generic_content(resolved: ResolvedSection) -> GenericContent:
    """
    Extract the fixed keys the generic renderer understands.

    The title falls back to the section name; subtitle and content stay
    empty when absent and are omitted by the template.
    """
    title = resolved.styled("title")
    if not title.content:
        title = StyledContent(content=resolved.name, style=title.style)

    return GenericContent(
        title=title,
        subtitle=resolved.styled("subtitle"),
        content=resolved.styled("content"),
        background_style=parse_style(resolved.get("background_style"), key="background_style"),
    )
