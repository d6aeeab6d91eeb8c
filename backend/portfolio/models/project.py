from portfolio.extensions import db
from .base import BaseModel

class Project(BaseModel):
    __tablename__ = "projects"

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(512), nullable=False, default="")
    tags = db.Column(db.JSON, nullable=False, default=list)
    link = db.Column(db.String(512), nullable=True)
