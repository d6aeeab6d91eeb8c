# portfolio/application/search.py
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from flask import current_app
from markupsafe import Markup, escape
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from portfolio.extensions import db
from portfolio.application.site.queries import HOME_PAGE_LINK
from portfolio.models import Article, ContentField, Page, Project, Section

CONTEXT_CHARS = 50
ELLIPSIS = "..."
UNKNOWN_PAGE = ("unknown", None)


@dataclass
class SearchResult:
    id: str
    content_id: str
    kind: str  # content | article | project
    section: str
    page: str
    field_type: str
    content: str
    title: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    url: Optional[str] = None
    page_link: Optional[str] = None

    @property
    def heading(self) -> str:
        if self.kind == "content":
            return self.field_type.replace("_", " ")
        return self.title or ""

    @property
    def location(self) -> str:
        if self.kind == "article":
            return "Article"
        if self.kind == "project":
            return "Project"
        return f"{self.page} / {self.section} / {self.field_type}"

    @property
    def link(self) -> str:
        if self.kind == "content":
            link = self.page_link or ""
            path = "/" if link in ("", HOME_PAGE_LINK) else f"/{link}"
            return f"{path}#{self.section.lower()}"
        return self.url or f"/#{self.kind}s"

    def to_dict(self, term: str = "", max_length: int = 200) -> Dict[str, Any]:
        data = asdict(self)
        data["location"] = self.location
        data["link"] = self.link
        if term:
            data["snippet"] = str(highlight(truncate(self.content, term, max_length), term))
        return data


def highlight(text: str, term: str) -> Markup:
    """
    Wrap every case-insensitive occurrence of ``term`` in ``<mark>``.

    The term is matched literally, and all other text is HTML-escaped.
    """
    if not text:
        return Markup("")
    if not term or not term.strip():
        return escape(text)

    parts = re.split(f"({re.escape(term)})", text, flags=re.IGNORECASE)
    out = []
    for index, part in enumerate(parts):
        # re.split with one capture group puts matches at odd indexes
        if index % 2:
            out.append(Markup("<mark>%s</mark>") % part)
        else:
            out.append(escape(part))
    return Markup("").join(out)


def truncate(text: str, term: str, max_length: int = 200) -> str:
    """
    Shorten ``text`` around the first match of ``term``.

    Keeps up to 50 characters either side of the match, with "..." on each
    clipped end. Without a match, the first ``max_length`` characters are
    kept.
    """
    if len(text) <= max_length:
        return text

    index = text.lower().find(term.lower()) if term else -1
    if index == -1:
        return text[:max_length] + ELLIPSIS

    start = max(0, index - CONTEXT_CHARS)
    end = min(len(text), index + len(term) + CONTEXT_CHARS)

    return (
        (ELLIPSIS if start > 0 else "")
        + text[start:end]
        + (ELLIPSIS if end < len(text) else "")
    )


def _contains(column, term: str):
    return func.lower(column).contains(term.lower(), autoescape=True)


def _content_match(term: str):
    if db.engine.dialect.name == "postgresql":
        return func.to_tsvector("english", ContentField.content).op("@@")(
            func.plainto_tsquery("english", term)
        )
    return _contains(ContentField.content, term)


def _section_pages(section_names) -> Dict[str, Tuple[str, Optional[str]]]:
    """Section name -> (page name, page link) in one query."""
    if not section_names:
        return {}
    rows = db.session.execute(
        db.select(Section.section_name, Section.page, Page.page_link, Page.page_name)
        .select_from(Section)
        .outerjoin(Page, Page.page_name == Section.page)
        .where(Section.section_name.in_(section_names))
    ).all()
    return {
        name: (page, (link or page_name.lower()) if page_name else None)
        for name, page, link, page_name in rows
    }


def _content_results(term: str) -> List[SearchResult]:
    fields = db.session.execute(
        db.select(ContentField)
        .where(ContentField.include_in_global_search.is_(True), _content_match(term))
        .order_by(ContentField.section, ContentField.display_order)
    ).scalars().all()

    pages = _section_pages({f.section for f in fields})

    results = []
    for f in fields:
        if f.is_style:
            continue
        page, page_link = pages.get(f.section, UNKNOWN_PAGE)
        results.append(SearchResult(
            id=f.id,
            content_id=f.id,
            kind="content",
            section=f.section,
            page=page,
            page_link=page_link,
            field_type=f.field_type or f.content_type,
            content=f.content or "",
        ))
    return results


def _article_results(term: str) -> List[SearchResult]:
    articles = db.session.execute(
        db.select(Article)
        .where(or_(
            _contains(Article.title, term),
            _contains(Article.excerpt, term),
            _contains(Article.content, term),
        ))
        .order_by(Article.date.desc())
    ).scalars().all()

    return [
        SearchResult(
            id=a.id,
            content_id=a.id,
            kind="article",
            section="articles",
            page="articles",
            field_type="article",
            content=a.excerpt or a.content or "",
            title=a.title,
            date=a.date.isoformat() if a.date else None,
            category=a.category,
            url=a.link,
        )
        for a in articles
    ]


def _project_results(term: str) -> List[SearchResult]:
    projects = db.session.execute(
        db.select(Project)
        .where(or_(_contains(Project.title, term), _contains(Project.description, term)))
        .order_by(Project.created_at.desc())
    ).scalars().all()

    return [
        SearchResult(
            id=p.id,
            content_id=p.id,
            kind="project",
            section="projects",
            page="projects",
            field_type="project",
            content=p.description or "",
            title=p.title,
            tags=list(p.tags or []),
            url=p.link,
        )
        for p in projects
    ]


def search(term: Optional[str]) -> List[SearchResult]:
    """
    Search flagged content fields, articles and projects for ``term``.

    Returns content results first, then articles, then projects. A blank
    term returns nothing; store failures are logged and return nothing.
    """
    term = (term or "").strip()
    if not term:
        return []

    try:
        results = _content_results(term) + _article_results(term) + _project_results(term)
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error("Search for %r failed: %s", term, exc)
        return []

    current_app.logger.debug("Search for %r returned %d results", term, len(results))
    return results
