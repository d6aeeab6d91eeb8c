from portfolio.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = 'pages'

    page_name = db.Column(db.String(200), nullable=False, unique=True)
    page_link = db.Column(db.String(200), nullable=True, index=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    include_in_navigation = db.Column(db.Boolean, nullable=False, default=True)
    is_system_page = db.Column(db.Boolean, nullable=False, default=False)

    # Sections reference their page by name, so there is no relationship here
    # and deleting a page leaves its sections in place.
