from portfolio.extensions import db
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "site_config"

    section_name = db.Column(db.String(200), nullable=False, index=True)
    page = db.Column(db.String(200), nullable=True, index=True)  # page_name
    layout_type = db.Column(db.String(100), nullable=False, default="default")  # hero, features, cta...
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    background_color = db.Column(db.String(50), nullable=True)
    background_image = db.Column(db.String(512), nullable=True)
