from .page import Page
from .section import Section
from .content_field import ContentField, STYLE_SUFFIX
from .navigation import NavigationItem
from .project import Project
from .article import Article
from .user import User

__all__ = [
    "Page",
    "Section",
    "ContentField",
    "STYLE_SUFFIX",
    "NavigationItem",
    "Project",
    "Article",
    "User",
]
