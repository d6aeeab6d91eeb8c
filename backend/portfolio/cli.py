# portfolio/cli.py
import click
from flask import current_app
from portfolio.application.cms.content import save_content
from portfolio.application.cms.create_page import create_page
from portfolio.application.cms.navigation import save_navigation_item
from portfolio.application.cms.sections import save_section
from portfolio.application.site.queries import ADMIN_PAGE_NAME, HOME_PAGE_LINK
from portfolio.extensions import db
from portfolio.models import Page, User

DEFAULT_SECTIONS = [
    ("hero", "hero"),
    ("about", "resume"),
    ("projects", "portfolio"),
    ("articles", "blog"),
    ("contact", "contact_form"),
]

DEFAULT_CONTENT = {
    "hero": [
        ("title", "Turning Data into"),
        ("subtitle", "Meaningful Insights"),
        ("description", "Data science portfolio showcasing projects and articles on "
                        "machine learning, data analysis, and visualization."),
        ("button_text", "View Projects"),
    ],
    "about": [
        ("title", "About Me"),
        ("paragraph_1", "I'm a data scientist with expertise in machine learning, "
                        "statistical analysis, and data visualization."),
        ("skills_title", "Skills"),
        ("skills_list", "Machine Learning,Data Analysis,Statistical Modeling"),
        ("education_title", "Education"),
        ("education_list", "M.S. in Data Science,B.S. in Computer Science"),
    ],
    "projects": [("title", "Featured Projects")],
    "articles": [("title", "Latest Articles")],
    "contact": [
        ("title", "Get In Touch"),
        ("description", "Have a project in mind or want to collaborate? "
                        "Feel free to reach out through the form below."),
    ],
}

DEFAULT_NAVIGATION = [
    ("About", "about", "link"),
    ("Projects", "projects", "link"),
    ("Articles", "articles", "link"),
    ("Contact", "contact", "button"),
]


def seed_site():
    """Create the home and admin pages with the default sections, once."""
    if Page.query.filter_by(page_name=HOME_PAGE_LINK).first():
        return False

    create_page(data={"page_name": HOME_PAGE_LINK, "is_system_page": True})
    create_page(data={
        "page_name": ADMIN_PAGE_NAME,
        "display_order": 99,
        "include_in_navigation": False,
        "is_system_page": True,
    })

    for order, (name, layout) in enumerate(DEFAULT_SECTIONS):
        save_section(data={
            "section_name": name,
            "page": HOME_PAGE_LINK,
            "layout_type": layout,
            "display_order": order,
        })
        for field_order, (key, value) in enumerate(DEFAULT_CONTENT.get(name, [])):
            save_content(data={
                "section": name,
                "content_type": key,
                "content": value,
                "display_order": field_order,
                "include_in_global_search": key.startswith(("description", "paragraph")),
            })

    for order, (label, target, button_type) in enumerate(DEFAULT_NAVIGATION):
        save_navigation_item(data={
            "label": label,
            "target_section": target,
            "button_type": button_type,
            "display_order": order,
        })

    return True


def register_commands(app):
    @app.cli.command("seed")
    def seed():
        """Create tables and the default site content."""
        db.create_all()
        if seed_site():
            click.echo("Seeded default pages and sections.")
        else:
            click.echo("Site already seeded; nothing to do.")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.argument("password")
    def create_admin(email, password):
        """Create an admin user, or reset the password of an existing one."""
        email = email.strip().lower()
        user = User.query.filter_by(email=email).first()
        if user is None:
            user = User()
            user.email = email
            db.session.add(user)
        user.role = "admin"
        user.is_active = True
        user.set_password(password)
        db.session.commit()

        current_app.logger.info("Admin user %s saved", email)
        click.echo(f"Admin user {email} saved.")
