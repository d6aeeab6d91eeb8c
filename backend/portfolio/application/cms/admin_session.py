# portfolio/application/cms/admin_session.py
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence
from portfolio.application.site.queries import HOME_PAGE_LINK, list_content, list_pages, list_sections
from portfolio.domain.content import content_rows


@dataclass
class AdminSession:
    """
    Page and section currently selected in the admin dashboard.

    Built once per request and handed to each tab, so tabs never share
    selection through module state.
    """

    selected_page: str = ""
    selected_section: str = ""

    @classmethod
    def start(cls, pages: Sequence[Mapping[str, Any]]) -> "AdminSession":
        """First load: "home" if it exists, else the first page as fetched."""
        names = [p["page_name"] for p in pages]
        if HOME_PAGE_LINK in names:
            return cls(selected_page=HOME_PAGE_LINK)
        return cls(selected_page=names[0] if names else "")

    def select_page(self, page_name: str) -> None:
        if page_name != self.selected_page:
            self.selected_page = page_name
            self.selected_section = ""

    def select_section(self, section_name: str, sections: Sequence[Mapping[str, Any]]) -> None:
        """Only sections of the selected page can be selected."""
        names = {s["section_name"] for s in sections}
        self.selected_section = section_name if section_name in names else ""


def build_session(page: Optional[str] = None, section: Optional[str] = None) -> AdminSession:
    session = AdminSession.start(list_pages())
    if page:
        session.select_page(page)
    if section:
        session.select_section(section, list_sections(session.selected_page))
    return session


def sections_tab(session: AdminSession) -> Dict[str, Any]:
    return {
        "selected_page": session.selected_page,
        "pages": list_pages(),
        "sections": list_sections(session.selected_page) if session.selected_page else [],
    }


def content_tab(session: AdminSession) -> Dict[str, Any]:
    """
    Pages, the selected page's sections and the selected section's fields.

    Style sidecar rows are left out of the field list; with no section
    selected the list is empty.
    """
    fields: List[Mapping[str, Any]] = []
    if session.selected_section:
        fields = content_rows(list_content(session.selected_section))

    return {
        **sections_tab(session),
        "selected_section": session.selected_section,
        "fields": fields,
    }
