from portfolio.extensions import db
from .base import BaseModel

class NavigationItem(BaseModel):
    __tablename__ = "navigation"

    label = db.Column(db.String(100), nullable=False)
    target_section = db.Column(db.String(200), nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    button_type = db.Column(db.String(50), nullable=False, default="link")  # link, button
