from typing import Any, Dict
from flask import current_app
from portfolio.extensions import db
from portfolio.models.page import Page
from portfolio.domain.invariants.page import assert_page_name_available
from portfolio.schemas.page import PageForm
from portfolio.utils.cache import invalidate_page_tree
from portfolio.utils.slug import page_link_for
from portfolio.utils.transaction import mutation


def create_page(*, data: Dict[str, Any]) -> Page:
    """
    Create a new page from the admin "Add Page" form.

    Edge cases handled:
    - Missing or blank page name (422)
    - Duplicate page name, compared case-insensitively (409)
    - page_link is derived from the name here and never re-derived
    """
    form = PageForm.model_validate(data)
    assert_page_name_available(form.page_name)

    page = Page()
    for field, value in form.to_row().items():
        setattr(page, field, value)
    page.page_link = page_link_for(form.page_name)

    with mutation("page.create"):
        db.session.add(page)
        db.session.flush()  # ensures page.id exists

    invalidate_page_tree(page.page_name, page.page_link)
    current_app.logger.info("Created page %s (/%s)", page.page_name, page.page_link)

    return page
