# portfolio/application/site/queries.py
from typing import Any, Dict, List, Optional
from sqlalchemy import and_, func, or_
from portfolio.models import Article, ContentField, NavigationItem, Page, Project, Section
from portfolio.normalizers.article import normalize_article
from portfolio.normalizers.content import normalize_content
from portfolio.normalizers.navigation import normalize_navigation_item
from portfolio.normalizers.page import normalize_page
from portfolio.normalizers.project import normalize_project
from portfolio.normalizers.section import normalize_section
from portfolio.utils.cache import (
    ARTICLES_KEY,
    NAVIGATION_KEY,
    PAGES_KEY,
    PROJECTS_KEY,
    cached,
    content_key,
    page_key,
    sections_key,
)

ADMIN_PAGE_NAME = "admin"
HOME_PAGE_LINK = "home"


def list_pages() -> List[Dict[str, Any]]:
    return cached(PAGES_KEY, lambda: [
        normalize_page(p)
        for p in Page.query.order_by(Page.display_order.asc(), Page.created_at.asc()).all()
    ])


def get_page_by_link(page_link: str) -> Optional[Dict[str, Any]]:
    """
    Find a page by its link. Pages created without a link match on their
    lower-cased name.
    """
    page_link = page_link.strip("/").lower()
    if not page_link:
        return None

    def load():
        page = Page.query.filter(
            or_(
                Page.page_link == page_link,
                and_(Page.page_link.is_(None), func.lower(Page.page_name) == page_link),
            )
        ).first()
        return normalize_page(page) if page else None

    return cached(page_key(page_link), load)


def list_sections(page_name: str) -> List[Dict[str, Any]]:
    return cached(sections_key(page_name), lambda: [
        normalize_section(s)
        for s in Section.query.filter_by(page=page_name)
        .order_by(Section.display_order.asc(), Section.created_at.asc())
        .all()
    ])


def list_content(section_name: str) -> List[Dict[str, Any]]:
    return cached(content_key(section_name), lambda: [
        normalize_content(f)
        for f in ContentField.query.filter_by(section=section_name)
        .order_by(ContentField.display_order.asc(), ContentField.created_at.asc())
        .all()
    ])


def list_navigation() -> List[Dict[str, Any]]:
    return cached(NAVIGATION_KEY, lambda: [
        normalize_navigation_item(n)
        for n in NavigationItem.query.order_by(
            NavigationItem.display_order.asc(), NavigationItem.created_at.asc()
        ).all()
    ])


def list_projects() -> List[Dict[str, Any]]:
    return cached(PROJECTS_KEY, lambda: [
        normalize_project(p)
        for p in Project.query.order_by(Project.created_at.desc()).all()
    ])


def list_articles() -> List[Dict[str, Any]]:
    return cached(ARTICLES_KEY, lambda: [
        normalize_article(a)
        for a in Article.query.order_by(Article.date.desc(), Article.created_at.desc()).all()
    ])
