from flask import Blueprint
from portfolio.utils.html import css_url, sanitize_html, style_attr

# Public site, rendered server-side
web_bp = Blueprint("web", __name__)

web_bp.add_app_template_filter(sanitize_html, "rich")
web_bp.add_app_template_filter(style_attr, "style_attr")
web_bp.add_app_template_filter(css_url, "css_url")

# Import route modules so they register with web_bp
from . import pages
