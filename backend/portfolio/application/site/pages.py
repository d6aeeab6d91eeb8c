# portfolio/application/site/pages.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from portfolio.domain.sections import ResolvedSection, resolve_sections, visible_in_order
from .queries import (
    ADMIN_PAGE_NAME,
    get_page_by_link,
    list_content,
    list_navigation,
    list_pages,
    list_sections,
)


@dataclass
class ResolvedPage:
    page: Dict[str, Any]
    sections: List[ResolvedSection] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "sections": [
                {
                    "kind": s.kind.value,
                    "section_name": s.name,
                    "layout_type": s.section.get("layout_type"),
                    "background_color": s.section.get("background_color"),
                    "background_image": s.section.get("background_image"),
                    "fields": s.fields,
                }
                for s in self.sections
            ],
        }


def resolve_page(page_link: str) -> Optional[ResolvedPage]:
    """
    Build the page -> sections -> fields tree for a public route.

    Hidden or unknown pages resolve to None. Only visible sections are
    kept, and each section carries its visible fields in display order.
    """
    page = get_page_by_link(page_link)
    if page is None or not page["is_visible"]:
        return None

    sections = visible_in_order(list_sections(page["page_name"]))
    fields_by_section = {
        s["section_name"]: visible_in_order(list_content(s["section_name"]))
        for s in sections
    }

    return ResolvedPage(page=page, sections=resolve_sections(sections, fields_by_section))


def navigation() -> Dict[str, List[Dict[str, Any]]]:
    """
    Both navigation sources: in-page scroll links from the navigation table
    and page links from pages flagged for navigation.
    """
    page_links = [
        {
            "id": p["id"],
            "label": p["page_name"],
            "link": p["page_link"] or p["page_name"].lower(),
            "display_order": p["display_order"],
        }
        for p in list_pages()
        if p["is_visible"]
        and p["include_in_navigation"]
        and p["page_name"].lower() != ADMIN_PAGE_NAME
    ]

    return {
        "sections": visible_in_order(list_navigation()),
        "pages": page_links,
    }


def site_structure() -> List[Dict[str, Any]]:
    """Every page with its sections and their fields, hidden rows included."""
    return [
        {
            **page,
            "sections": [
                {**section, "fields": list_content(section["section_name"])}
                for section in list_sections(page["page_name"])
            ],
        }
        for page in list_pages()
    ]
