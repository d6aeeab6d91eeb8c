import datetime as dt
from typing import Optional
from pydantic import Field
from .common import FormModel, OptionalText, RequiredText


class ArticleForm(FormModel):
    id: Optional[str] = None
    title: RequiredText
    category: RequiredText
    excerpt: RequiredText
    content: RequiredText
    read_time: int = 5
    date: dt.date = Field(default_factory=dt.date.today)
    link: OptionalText = None
