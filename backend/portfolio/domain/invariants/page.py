from sqlalchemy import func
from portfolio.models.page import Page
from ..exceptions import InvariantViolation, SystemPageProtected


def assert_page_deletable(page):
    if page.is_system_page:
        raise SystemPageProtected(
            f"System page '{page.page_name}' cannot be deleted."
        )


def assert_page_name_available(page_name, *, exclude_id=None):
    """
    Page names are unique, compared case-insensitively.
    """
    query = Page.query.filter(func.lower(Page.page_name) == page_name.strip().lower())
    if exclude_id is not None:
        query = query.filter(Page.id != exclude_id)

    if query.first() is not None:
        raise InvariantViolation(
            f"A page named '{page_name}' already exists.",
            status_code=409,
        )


def assert_system_page_name_unchanged(page, new_name):
    if page.is_system_page and new_name is not None and new_name != page.page_name:
        raise SystemPageProtected(
            f"System page '{page.page_name}' cannot be renamed."
        )
