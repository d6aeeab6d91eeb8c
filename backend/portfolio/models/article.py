from datetime import date
from portfolio.extensions import db
from .base import BaseModel

class Article(BaseModel):
    __tablename__ = "articles"

    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(100), nullable=False)
    excerpt = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    date = db.Column(db.Date, nullable=False, default=date.today, index=True)
    read_time = db.Column(db.Integer, nullable=False, default=5)  # minutes
    link = db.Column(db.String(512), nullable=True)
