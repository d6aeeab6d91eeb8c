from portfolio.extensions import db
from portfolio.domain.exceptions import NotFound


def get_or_404(model, item_id, label=None):
    item = db.session.get(model, item_id)
    if item is None:
        raise NotFound(f"{label or model.__name__} not found")
    return item
