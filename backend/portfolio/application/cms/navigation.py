from typing import Any, Dict, Optional
from portfolio.extensions import db
from portfolio.models.navigation import NavigationItem
from portfolio.normalizers.navigation import normalize_navigation_item
from portfolio.schemas.navigation import NavigationForm
from portfolio.utils.cache import NAVIGATION_KEY, invalidate
from portfolio.utils.order import next_display_order
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def save_navigation_item(*, data: Dict[str, Any], item_id: Optional[str] = None) -> NavigationItem:
    item = get_or_404(NavigationItem, item_id, "Navigation item") if item_id else None
    base = normalize_navigation_item(item) if item else {}

    form = NavigationForm.model_validate({**base, **data})
    row = form.to_row()

    if item is None and "display_order" not in data:
        row["display_order"] = next_display_order(NavigationItem.query.all())

    with mutation("navigation.save"):
        if item is None:
            item = NavigationItem()
            db.session.add(item)
        for field, value in row.items():
            setattr(item, field, value)
        db.session.flush()

    invalidate(NAVIGATION_KEY)
    return item


def delete_navigation_item(*, item_id: str) -> None:
    item = get_or_404(NavigationItem, item_id, "Navigation item")

    with mutation("navigation.delete"):
        db.session.delete(item)

    invalidate(NAVIGATION_KEY)
