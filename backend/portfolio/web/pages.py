# portfolio/web/pages.py
from flask import abort, current_app, redirect, render_template, request
from portfolio.application.search import highlight, search, truncate
from portfolio.application.site.pages import navigation, resolve_page
from portfolio.application.site.queries import HOME_PAGE_LINK, list_articles, list_content, list_projects
from portfolio.domain.content import resolve
from portfolio.domain.sections import SectionKind, generic_content
from . import web_bp

FOOTER_SECTION = "footer"

FOOTER_DEFAULTS = {
    "company_name": "DataFolio",
    "company_description": "A portfolio showcasing data science projects, articles, and insights.",
    "contact_email": "contact@example.com",
    "copyright_text": "",
}


def _footer():
    fields = list_content(FOOTER_SECTION)
    return {key: resolve(fields, key) or default for key, default in FOOTER_DEFAULTS.items()}


@web_bp.app_context_processor
def inject_layout():
    """Navigation and footer shared by every public template."""
    return {
        "site_navigation": navigation(),
        "footer": _footer(),
    }


def _render_page(page_link):
    page = resolve_page(page_link)
    if page is None:
        current_app.logger.info("No visible page for link %r", page_link)
        abort(404)

    kinds = {s.kind for s in page.sections}

    return render_template(
        "page.html",
        page=page.page,
        sections=page.sections,
        kinds=SectionKind,
        generic_content=generic_content,
        projects=list_projects() if SectionKind.PROJECTS in kinds else [],
        articles=list_articles() if SectionKind.ARTICLES in kinds else [],
    )


@web_bp.route("/", methods=["GET"])
def home():
    return _render_page(HOME_PAGE_LINK)


@web_bp.route("/search", methods=["GET"])
def search_results():
    term = request.args.get("q", "").strip()
    max_length = current_app.config.get("SEARCH_SNIPPET_LENGTH", 200)

    results = [
        (result, highlight(truncate(result.content, term, max_length), term))
        for result in search(term)
    ]

    return render_template("search.html", query=term, results=results)


@web_bp.route("/<page_link>", methods=["GET"])
def page(page_link):
    return _render_page(page_link)


@web_bp.route("/admin", methods=["GET"])
def admin():
    # Admin tabs are served by /api/v1/admin
    return redirect("/swagger/")
