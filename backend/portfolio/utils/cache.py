from typing import Any, Callable
from flask import current_app
from portfolio.extensions import cache

PAGES_KEY = "pages"
NAVIGATION_KEY = "navigation"
PROJECTS_KEY = "projects"
ARTICLES_KEY = "articles"


def page_key(page_link: str) -> str:
    return f"page:{page_link}"


def sections_key(page_name: str) -> str:
    return f"site_config:{page_name}"


def content_key(section_name: str) -> str:
    return f"site_content:{section_name}"


def cached(key: str, loader: Callable[[], Any]) -> Any:
    """
    Read-through cache keyed by entity type and scope.

    ``None`` is never cached, so a missing row is looked up again next time.
    """
    value = cache.get(key)
    if value is not None:
        return value

    value = loader()
    if value is not None:
        cache.set(key, value)
    return value


def invalidate(*keys: str) -> None:
    if not keys:
        return
    current_app.logger.debug("Invalidating cache keys: %s", ", ".join(keys))
    cache.delete_many(*keys)


def invalidate_page_tree(page_name: str | None, page_link: str | None = None) -> None:
    """Drop everything a rendered page was built from."""
    keys = [PAGES_KEY]
    if page_name:
        keys.append(sections_key(page_name))
        keys.append(page_key(page_name.lower()))
    if page_link:
        keys.append(page_key(page_link))
    invalidate(*keys)
