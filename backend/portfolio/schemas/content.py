from typing import Any, Dict, List, Optional, Union
from pydantic import field_validator, model_validator
from portfolio.domain.content import join_list
from portfolio.models.content_field import STYLE_SUFFIX
from .common import FormModel, OptionalText, RequiredText


class ContentForm(FormModel):
    id: Optional[str] = None
    section: RequiredText
    content_type: RequiredText
    content: RequiredText
    field_type: OptionalText = None
    display_order: int = 0
    is_visible: bool = True
    include_in_global_search: bool = False

    # Written to the "<content_type>_style" sidecar row.
    style: Optional[Dict[str, Any]] = None

    @field_validator("content", mode="before")
    @classmethod
    def join_list_content(cls, value: Union[str, List[str], None]):
        if isinstance(value, list):
            return join_list(str(item).strip() for item in value)
        return value

    @model_validator(mode="after")
    def default_field_type(self):
        if not self.field_type:
            self.field_type = self.content_type
        if self.style is not None and self.content_type.endswith(STYLE_SUFFIX):
            raise ValueError("A style row cannot carry its own style")
        return self

    def to_row(self) -> dict:
        return self.model_dump(exclude={"id", "style"})
