from portfolio.extensions import db
from .base import BaseModel

STYLE_SUFFIX = "_style"

class ContentField(BaseModel):
    __tablename__ = "site_content"

    section = db.Column(db.String(200), nullable=False, index=True)  # section_name
    content_type = db.Column(db.String(100), nullable=False)  # title, skills_list, title_style...
    content = db.Column(db.Text, nullable=False, default="")
    field_type = db.Column(db.String(100), nullable=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    include_in_global_search = db.Column(db.Boolean, nullable=False, default=False, index=True)

    __table_args__ = (
        db.Index("idx_site_content_section_type", "section", "content_type"),
    )

    @property
    def is_style(self) -> bool:
        return self.content_type.endswith(STYLE_SUFFIX)
