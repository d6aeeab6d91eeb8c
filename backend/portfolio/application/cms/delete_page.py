from flask import current_app
from portfolio.extensions import db
from portfolio.models.page import Page
from portfolio.domain.invariants.page import assert_page_deletable
from portfolio.utils.cache import invalidate_page_tree
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def delete_page(*, page_id: str) -> None:
    """
    Delete a single page.

    Notes:
    - System pages are refused (403)
    - Sections of the page are left in place; nothing cascades
    """
    page = get_or_404(Page, page_id, "Page")
    assert_page_deletable(page)

    page_name, page_link = page.page_name, page.page_link

    with mutation("page.delete"):
        db.session.delete(page)

    invalidate_page_tree(page_name, page_link)
    current_app.logger.info("Deleted page %s", page_name)
