import json
from typing import Any, Dict, Optional
from portfolio.extensions import db
from portfolio.models.content_field import ContentField, STYLE_SUFFIX
from portfolio.normalizers.content import normalize_content
from portfolio.schemas.content import ContentForm
from portfolio.utils.cache import content_key, invalidate
from portfolio.utils.order import next_display_order
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def _style_row(section: str, content_type: str) -> Optional[ContentField]:
    return ContentField.query.filter_by(
        section=section,
        content_type=content_type + STYLE_SUFFIX,
    ).first()


def save_content(*, data: Dict[str, Any], content_id: Optional[str] = None) -> ContentField:
    """
    Create or update a content field, and its style sidecar when the form
    carries a ``style`` object.

    Responsibilities:
    - Validate the whole form before any write
    - Write the field and its "<content_type>_style" row in one transaction,
      so neither is saved without the other
    - Invalidate the cached field lists of the touched sections
    """
    field = get_or_404(ContentField, content_id, "Content field") if content_id else None
    base = normalize_content(field) if field else {}

    form = ContentForm.model_validate({**base, **data})
    row = form.to_row()

    if field is None and "display_order" not in data:
        siblings = ContentField.query.filter_by(section=form.section).all()
        row["display_order"] = next_display_order(siblings)

    old_section = field.section if field else form.section

    with mutation("content.save"):
        if field is None:
            field = ContentField()
            db.session.add(field)
        for name, value in row.items():
            setattr(field, name, value)

        if form.style is not None:
            style = _style_row(form.section, form.content_type)
            if style is None:
                style = ContentField()
                style.section = form.section
                style.content_type = form.content_type + STYLE_SUFFIX
                style.field_type = "json"
                style.include_in_global_search = False
                db.session.add(style)
            style.content = json.dumps(form.style)
            style.display_order = form.display_order
            style.is_visible = True

        db.session.flush()

    invalidate(*{content_key(form.section), content_key(old_section)})
    return field


def delete_content(*, content_id: str) -> None:
    """Delete a content field together with its style sidecar, if any."""
    field = get_or_404(ContentField, content_id, "Content field")
    section = field.section

    with mutation("content.delete"):
        if not field.is_style:
            style = _style_row(section, field.content_type)
            if style is not None:
                db.session.delete(style)
        db.session.delete(field)

    invalidate(content_key(section))
