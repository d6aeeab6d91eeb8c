from typing import Any, Dict
from portfolio.models.page import Page
from portfolio.domain.invariants.page import (
    assert_page_name_available,
    assert_system_page_name_unchanged,
)
from portfolio.normalizers.page import normalize_page
from portfolio.schemas.page import PageForm
from portfolio.utils.cache import invalidate_page_tree
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def update_page(
    *,
    page_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Update a page from the admin edit form.

    Design rules:
    - The form is validated as a whole, submitted values over stored ones
    - page_link stays as created, even when the page is renamed
    - System pages keep their name and their system flag
    """
    page = get_or_404(Page, page_id, "Page")

    form = PageForm.model_validate({**normalize_page(page), **data})

    assert_system_page_name_unchanged(page, form.page_name)
    if form.page_name.lower() != page.page_name.lower():
        assert_page_name_available(form.page_name, exclude_id=page.id)

    old_name = page.page_name
    row = form.to_row()
    row.pop("is_system_page")

    with mutation("page.update"):
        for field, value in row.items():
            if getattr(page, field) != value:
                setattr(page, field, value)

    invalidate_page_tree(old_name, page.page_link)
    if old_name != page.page_name:
        invalidate_page_tree(page.page_name)

    return page
