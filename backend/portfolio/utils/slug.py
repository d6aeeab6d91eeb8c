import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def page_link_for(page_name: str) -> str:
    """
    Derive a page's URL segment from its name, e.g. ``"About Me" -> "about-me"``.

    Only applied when a page is created; renaming keeps the existing link.
    """
    return _NON_ALNUM.sub("-", page_name.strip().lower()).strip("-")
