from typing import List, Optional
from pydantic import field_validator
from .common import FormModel, OptionalText, RequiredText


class ProjectForm(FormModel):
    id: Optional[str] = None
    title: RequiredText
    description: RequiredText
    image_url: str = ""
    tags: List[str] = []
    link: OptionalText = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(tag).strip() for tag in value if str(tag).strip()]
