# portfolio/application/cms/reorder.py
from typing import Any, Dict, List
from sqlalchemy import func
from portfolio.extensions import db
from portfolio.models import ContentField, NavigationItem, Page, Section, STYLE_SUFFIX
from portfolio.application.site.queries import ADMIN_PAGE_NAME
from portfolio.utils.cache import (
    NAVIGATION_KEY,
    PAGES_KEY,
    content_key,
    invalidate,
    sections_key,
)
from portfolio.domain.exceptions import InvariantViolation
from portfolio.utils.order import MOVE_DIRECTIONS, index_of, swap_partner
from portfolio.utils.transaction import mutation
from .lookup import get_or_404

ORDERABLE = {
    "pages": Page,
    "sections": Section,
    "content": ContentField,
    "navigation": NavigationItem,
}


def displayed_siblings(item) -> List[Any]:
    """
    The list the admin shows the item in, sorted the same way: the item's
    scope ordered by display order, then creation time.
    """
    model = type(item)
    query = model.query

    if model is Page:
        query = query.filter(func.lower(Page.page_name) != ADMIN_PAGE_NAME)
    elif model is Section:
        query = query.filter(Section.page == item.page)
    elif model is ContentField:
        query = query.filter(
            ContentField.section == item.section,
            ~ContentField.content_type.endswith(STYLE_SUFFIX, autoescape=True),
        )

    return query.order_by(model.display_order.asc(), model.created_at.asc()).all()


def write_display_order(item, display_order: int) -> None:
    item.display_order = display_order
    db.session.flush()


def _cache_keys(item) -> List[str]:
    if isinstance(item, Page):
        return [PAGES_KEY]
    if isinstance(item, Section):
        return [sections_key(item.page)]
    if isinstance(item, ContentField):
        return [content_key(item.section)]
    return [NAVIGATION_KEY]


def move_item(*, entity: str, item_id: str, direction: str) -> Dict[str, Any]:
    """
    Move an item one position up or down by swapping display orders with
    its neighbour in the displayed list.

    Responsibilities:
    - Both writes share one transaction; if either fails, neither order
      changes and MutationFailed is raised
    - Items already at the edge stay put (no write)
    - Orders are swapped as stored: duplicates are neither detected nor
      renumbered
    """
    if entity not in ORDERABLE:
        raise InvariantViolation(f"Entity '{entity}' cannot be reordered")
    if direction not in MOVE_DIRECTIONS:
        raise InvariantViolation(f"Invalid move direction: {direction}")

    item = get_or_404(ORDERABLE[entity], item_id)
    siblings = displayed_siblings(item)

    try:
        index = index_of(siblings, item.id)
    except ValueError as exc:
        raise InvariantViolation(str(exc)) from exc

    pair = swap_partner(siblings, index, direction)
    if pair is None:
        return {"moved": False, "id": item.id, "display_order": item.display_order}

    current, neighbour = pair
    current_order, neighbour_order = current.display_order, neighbour.display_order

    with mutation(f"{entity}.move_{direction}"):
        write_display_order(current, neighbour_order)
        write_display_order(neighbour, current_order)

    invalidate(*_cache_keys(item))

    return {
        "moved": True,
        "id": current.id,
        "display_order": current.display_order,
        "swapped_with": {"id": neighbour.id, "display_order": neighbour.display_order},
    }
