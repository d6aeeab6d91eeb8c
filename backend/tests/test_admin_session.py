from portfolio.application.cms.admin_session import AdminSession, build_session, content_tab
from factories import make_field, make_page, make_section


def test_first_load_prefers_home():
    pages = [{"page_name": "blog"}, {"page_name": "home"}]
    assert AdminSession.start(pages).selected_page == "home"


def test_first_load_without_home_takes_first_page():
    pages = [{"page_name": "blog"}, {"page_name": "about"}]
    assert AdminSession.start(pages).selected_page == "blog"
    assert AdminSession.start([]).selected_page == ""


def test_selecting_another_page_resets_section():
    session = AdminSession(selected_page="home", selected_section="hero")

    session.select_page("home")
    assert session.selected_section == "hero"

    session.select_page("blog")
    assert session.selected_section == ""


def test_section_outside_page_is_ignored():
    session = AdminSession(selected_page="home")
    session.select_section("sidebar", [{"section_name": "hero"}])
    assert session.selected_section == ""


def test_content_tab_lists_fields_of_selected_section(app):
    make_page("home")
    make_page("blog")
    make_section("hero")
    make_section("posts", page="blog")
    make_field("hero", "title", "Welcome", style={"color": "red"})

    empty = content_tab(build_session())
    assert empty["selected_page"] == "home"
    assert empty["selected_section"] == ""
    assert empty["fields"] == []

    tab = content_tab(build_session(section="hero"))
    assert [s["section_name"] for s in tab["sections"]] == ["hero"]
    assert [f["content_type"] for f in tab["fields"]] == ["title"]

    other = content_tab(build_session(page="blog", section="hero"))
    assert other["selected_page"] == "blog"
    assert other["selected_section"] == ""
    assert other["fields"] == []


def test_content_tab_over_api(client, auth_headers):
    make_page("home")
    make_section("hero")
    make_field("hero", "title", "Welcome")

    body = client.get("/api/v1/admin/content?section=hero", headers=auth_headers).get_json()

    assert body["selected_page"] == "home"
    assert body["sections"] == ["hero"]
    assert [f["content"] for f in body["items"]] == ["Welcome"]
