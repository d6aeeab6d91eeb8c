# portfolio/api/v1/site.py
from flask import jsonify
from portfolio.application.site.pages import navigation, resolve_page
from portfolio.application.site.queries import list_articles, list_projects
from portfolio.domain.exceptions import NotFound
from . import v1_bp


@v1_bp.route("/site/pages/<path:page_link>", methods=["GET"])
def get_site_page(page_link):
    page = resolve_page(page_link)
    if page is None:
        raise NotFound("Page not found")
    return jsonify(page.to_dict())


@v1_bp.route("/site/navigation", methods=["GET"])
def get_site_navigation():
    return jsonify(navigation())


@v1_bp.route("/site/projects", methods=["GET"])
def get_site_projects():
    return jsonify({"items": list_projects()})


@v1_bp.route("/site/articles", methods=["GET"])
def get_site_articles():
    return jsonify({"items": list_articles()})
