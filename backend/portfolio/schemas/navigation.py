from typing import Optional
from .common import FormModel, RequiredText


class NavigationForm(FormModel):
    id: Optional[str] = None
    label: RequiredText
    target_section: RequiredText
    display_order: int = 0
    is_visible: bool = True
    button_type: RequiredText = "link"
