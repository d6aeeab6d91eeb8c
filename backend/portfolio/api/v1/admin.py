# portfolio/api/v1/admin.py
from flask import jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import func
from portfolio.application.cms.admin_session import build_session, content_tab, sections_tab
from portfolio.application.cms.articles import delete_article, save_article
from portfolio.application.cms.content import delete_content, save_content
from portfolio.application.cms.create_page import create_page
from portfolio.application.cms.delete_page import delete_page
from portfolio.application.cms.lookup import get_or_404
from portfolio.application.cms.navigation import delete_navigation_item, save_navigation_item
from portfolio.application.cms.projects import delete_project, save_project
from portfolio.application.cms.reorder import move_item
from portfolio.application.cms.sections import delete_section, save_section
from portfolio.application.cms.update_page import update_page
from portfolio.application.site.pages import site_structure
from portfolio.application.site.queries import ADMIN_PAGE_NAME
from portfolio.domain.content import FIELD_TYPE_MAPPINGS, INPUT_TYPE_LABELS, get_field_input_type
from portfolio.models import Article, ContentField, NavigationItem, Page, Project, Section
from portfolio.normalizers.article import normalize_article
from portfolio.normalizers.content import normalize_content
from portfolio.normalizers.navigation import normalize_navigation_item
from portfolio.normalizers.page import normalize_page
from portfolio.normalizers.project import normalize_project
from portfolio.normalizers.section import normalize_section
from portfolio.schemas.section import LAYOUT_OPTIONS
from portfolio.utils.decorators import admin_required
from portfolio.utils.optimistic_lock import enforce_optimistic_lock
from . import v1_bp


def _payload():
    return request.get_json(silent=True) or {}


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/admin/pages", methods=["GET"])
@jwt_required()
@admin_required
def list_admin_pages():
    pages = (
        Page.query.filter(func.lower(Page.page_name) != ADMIN_PAGE_NAME)
        .order_by(Page.display_order.asc(), Page.created_at.asc())
        .all()
    )
    return jsonify({"items": [normalize_page(p, admin=True) for p in pages]})


@v1_bp.route("/admin/pages", methods=["POST"])
@jwt_required()
@admin_required
def create_admin_page():
    page = create_page(data=_payload())
    return jsonify(normalize_page(page, admin=True)), 201


@v1_bp.route("/admin/pages/<page_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_admin_page(page_id):
    enforce_optimistic_lock(get_or_404(Page, page_id, "Page"))
    page = update_page(page_id=page_id, data=_payload())
    return jsonify(normalize_page(page, admin=True))


@v1_bp.route("/admin/pages/<page_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_admin_page(page_id):
    delete_page(page_id=page_id)
    return jsonify({"message": "Page deleted successfully"})


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/admin/sections", methods=["GET"])
@jwt_required()
@admin_required
def list_admin_sections():
    session = build_session(page=request.args.get("page"))
    tab = sections_tab(session)
    return jsonify({
        "selected_page": tab["selected_page"],
        "items": tab["sections"],
    })


@v1_bp.route("/admin/sections", methods=["POST"])
@jwt_required()
@admin_required
def create_admin_section():
    section = save_section(data=_payload())
    return jsonify(normalize_section(section, admin=True)), 201


@v1_bp.route("/admin/sections/<section_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_admin_section(section_id):
    enforce_optimistic_lock(get_or_404(Section, section_id, "Section"))
    section = save_section(data=_payload(), section_id=section_id)
    return jsonify(normalize_section(section, admin=True))


@v1_bp.route("/admin/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_admin_section(section_id):
    delete_section(section_id=section_id)
    return jsonify({"message": "Section deleted successfully"})


# ------------------------
# Content fields
# ------------------------

@v1_bp.route("/admin/content", methods=["GET"])
@jwt_required()
@admin_required
def list_admin_content():
    session = build_session(
        page=request.args.get("page"),
        section=request.args.get("section"),
    )
    tab = content_tab(session)
    return jsonify({
        "selected_page": tab["selected_page"],
        "selected_section": tab["selected_section"],
        "sections": [s["section_name"] for s in tab["sections"]],
        "items": tab["fields"],
    })


@v1_bp.route("/admin/content", methods=["POST"])
@jwt_required()
@admin_required
def create_admin_content():
    field = save_content(data=_payload())
    return jsonify(normalize_content(field, admin=True)), 201


@v1_bp.route("/admin/content/<content_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_admin_content(content_id):
    enforce_optimistic_lock(get_or_404(ContentField, content_id, "Content field"))
    field = save_content(data=_payload(), content_id=content_id)
    return jsonify(normalize_content(field, admin=True))


@v1_bp.route("/admin/content/<content_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_admin_content(content_id):
    delete_content(content_id=content_id)
    return jsonify({"message": "Content field deleted successfully"})


# ------------------------
# Navigation
# ------------------------

@v1_bp.route("/admin/navigation", methods=["GET"])
@jwt_required()
@admin_required
def list_admin_navigation():
    items = NavigationItem.query.order_by(
        NavigationItem.display_order.asc(), NavigationItem.created_at.asc()
    ).all()
    return jsonify({"items": [normalize_navigation_item(i, admin=True) for i in items]})


@v1_bp.route("/admin/navigation", methods=["POST"])
@jwt_required()
@admin_required
def create_admin_navigation_item():
    item = save_navigation_item(data=_payload())
    return jsonify(normalize_navigation_item(item, admin=True)), 201


@v1_bp.route("/admin/navigation/<item_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_admin_navigation_item(item_id):
    enforce_optimistic_lock(get_or_404(NavigationItem, item_id, "Navigation item"))
    item = save_navigation_item(data=_payload(), item_id=item_id)
    return jsonify(normalize_navigation_item(item, admin=True))


@v1_bp.route("/admin/navigation/<item_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_admin_navigation_item(item_id):
    delete_navigation_item(item_id=item_id)
    return jsonify({"message": "Navigation item deleted successfully"})


# ------------------------
# Projects
# ------------------------

@v1_bp.route("/admin/projects", methods=["GET"])
@jwt_required()
@admin_required
def list_admin_projects():
    projects = Project.query.order_by(Project.created_at.desc()).all()
    return jsonify({"items": [normalize_project(p, admin=True) for p in projects]})


@v1_bp.route("/admin/projects", methods=["POST"])
@jwt_required()
@admin_required
def create_admin_project():
    project = save_project(data=_payload())
    return jsonify(normalize_project(project, admin=True)), 201


@v1_bp.route("/admin/projects/<project_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_admin_project(project_id):
    enforce_optimistic_lock(get_or_404(Project, project_id, "Project"))
    project = save_project(data=_payload(), project_id=project_id)
    return jsonify(normalize_project(project, admin=True))


@v1_bp.route("/admin/projects/<project_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_admin_project(project_id):
    delete_project(project_id=project_id)
    return jsonify({"message": "Project deleted successfully"})


# ------------------------
# Articles
# ------------------------

@v1_bp.route("/admin/articles", methods=["GET"])
@jwt_required()
@admin_required
def list_admin_articles():
    articles = Article.query.order_by(Article.date.desc(), Article.created_at.desc()).all()
    return jsonify({"items": [normalize_article(a, admin=True) for a in articles]})


@v1_bp.route("/admin/articles", methods=["POST"])
@jwt_required()
@admin_required
def create_admin_article():
    article = save_article(data=_payload())
    return jsonify(normalize_article(article, admin=True)), 201


@v1_bp.route("/admin/articles/<article_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_admin_article(article_id):
    enforce_optimistic_lock(get_or_404(Article, article_id, "Article"))
    article = save_article(data=_payload(), article_id=article_id)
    return jsonify(normalize_article(article, admin=True))


@v1_bp.route("/admin/articles/<article_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_admin_article(article_id):
    delete_article(article_id=article_id)
    return jsonify({"message": "Article deleted successfully"})


# ------------------------
# Ordering
# ------------------------

@v1_bp.route("/admin/<entity>/<item_id>/move-<any(up, down):direction>", methods=["POST"])
@jwt_required()
@admin_required
def move_admin_item(entity, item_id, direction):
    return jsonify(move_item(entity=entity, item_id=item_id, direction=direction))


# ------------------------
# Site map & field help
# ------------------------

@v1_bp.route("/admin/site-map", methods=["GET"])
@jwt_required()
@admin_required
def admin_site_map():
    return jsonify({"pages": site_structure()})


@v1_bp.route("/admin/field-types", methods=["GET"])
@jwt_required()
@admin_required
def admin_field_types():
    layout = request.args.get("layout")
    mappings = FIELD_TYPE_MAPPINGS
    if layout:
        mappings = {layout: FIELD_TYPE_MAPPINGS.get(layout, [])}

    return jsonify({
        "layouts": LAYOUT_OPTIONS,
        "input_types": INPUT_TYPE_LABELS,
        "fields": {
            name: [{"field": f, "input_type": get_field_input_type(f)} for f in fields]
            for name, fields in mappings.items()
        },
    })
