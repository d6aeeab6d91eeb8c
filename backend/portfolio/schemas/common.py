from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict


def _not_blank(value: str) -> str:
    if not value:
        raise ValueError("This field is required")
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


RequiredText = Annotated[str, AfterValidator(_not_blank)]
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]


class FormModel(BaseModel):
    """Base for admin edit forms: trims strings, ignores unknown keys."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    def to_row(self) -> dict:
        return self.model_dump(exclude={"id"})
