from typing import Any, Dict, Optional
from portfolio.extensions import db
from portfolio.models.section import Section
from portfolio.normalizers.section import normalize_section
from portfolio.schemas.section import SectionForm
from portfolio.utils.cache import invalidate, sections_key
from portfolio.utils.order import next_display_order
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def save_section(*, data: Dict[str, Any], section_id: Optional[str] = None) -> Section:
    """
    Create or update a section of a page.

    A new section without an explicit display order is appended after the
    page's current last section. Section names are not checked for
    uniqueness within a page.
    """
    section = get_or_404(Section, section_id, "Section") if section_id else None
    base = normalize_section(section) if section else {}

    form = SectionForm.model_validate({**base, **data})
    row = form.to_row()

    if section is None and "display_order" not in data:
        siblings = Section.query.filter_by(page=form.page).all()
        row["display_order"] = next_display_order(siblings)

    old_page = section.page if section else None

    with mutation("section.save"):
        if section is None:
            section = Section()
            db.session.add(section)
        for field, value in row.items():
            setattr(section, field, value)
        db.session.flush()

    invalidate(*{sections_key(form.page), sections_key(old_page or form.page)})
    return section


def delete_section(*, section_id: str) -> None:
    """Delete a section. Its content rows are left in place."""
    section = get_or_404(Section, section_id, "Section")
    page = section.page

    with mutation("section.delete"):
        db.session.delete(section)

    invalidate(sections_key(page))
