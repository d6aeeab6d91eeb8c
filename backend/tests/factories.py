from portfolio.application.cms.content import save_content
from portfolio.application.cms.create_page import create_page
from portfolio.application.cms.sections import save_section


def make_page(name="home", **data):
    return create_page(data={"page_name": name, **data})


def make_section(name, page="home", **data):
    return save_section(data={"section_name": name, "page": page, "layout_type": "default", **data})


def make_field(section, content_type, content, **data):
    return save_content(data={
        "section": section,
        "content_type": content_type,
        "content": content,
        **data,
    })
