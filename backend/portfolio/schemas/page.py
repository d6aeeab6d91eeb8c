from typing import Optional
from .common import FormModel, RequiredText


class PageForm(FormModel):
    id: Optional[str] = None
    page_name: RequiredText
    display_order: int = 0
    is_visible: bool = True
    include_in_navigation: bool = True
    is_system_page: bool = False
