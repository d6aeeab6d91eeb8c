import re
from portfolio.application.site.pages import navigation, resolve_page
from portfolio.application.cms.navigation import save_navigation_item
from factories import make_field, make_page, make_section


def test_home_renders_hero_heading(client):
    make_page("home")
    make_section("hero", layout_type="hero")
    make_field("hero", "title", "Welcome")

    response = client.get("/")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    heading = re.search(r"<h1>(.*?)</h1>", html, re.S)
    assert heading is not None
    assert "Welcome" in heading.group(1)


def test_hero_falls_back_to_default_copy(client):
    make_page("home")
    make_section("hero")

    html = client.get("/").get_data(as_text=True)

    assert "Meaningful" in html
    assert "View Projects" in html


def test_hidden_section_is_not_rendered(client):
    make_page("home")
    make_section("hero", display_order=0, is_visible=False)
    make_field("hero", "title", "Hidden hero")
    make_section("contact", display_order=1)

    html = client.get("/").get_data(as_text=True)

    assert "Hidden hero" not in html
    assert 'id="contact"' in html
    assert "Get In Touch" in html


def test_generic_section_sanitizes_markup(client):
    make_page("home")
    make_section("story")
    make_field("story", "content", '<p>Hello <strong>there</strong></p><script>alert(1)</script>',
               style={"fontSize": "18px"})

    html = client.get("/").get_data(as_text=True)

    assert "<strong>there</strong>" in html
    assert "<script>" not in html
    assert 'style="font-size: 18px"' in html
    # the title falls back to the section name
    assert "story</h2>" in html


def test_other_pages_by_link(client):
    make_page("home")
    make_page("About Me")
    make_section("about", page="About Me")
    make_field("about", "title", "Who I am")

    response = client.get("/about-me")

    assert response.status_code == 200
    assert "Who I am" in response.get_data(as_text=True)


def test_unknown_and_hidden_pages_render_404(client):
    make_page("home")
    make_page("drafts", is_visible=False)

    for path in ("/nope", "/drafts"):
        response = client.get(path)
        assert response.status_code == 404
        assert "Page not found" in response.get_data(as_text=True)


def test_resolved_page_tree(app):
    make_page("home")
    make_section("hero", display_order=1)
    make_section("about", display_order=0)
    make_field("hero", "title", "Welcome")
    make_field("hero", "subtitle", "hidden", is_visible=False)

    page = resolve_page("home")

    assert [s.name for s in page.sections] == ["about", "hero"]
    hero = page.sections[1]
    assert [f["content_type"] for f in hero.fields] == ["title"]


def test_navigation_exposes_both_sources(app):
    make_page("home")
    make_page("admin", include_in_navigation=False, is_system_page=True)
    make_page("Blog")
    save_navigation_item(data={"label": "Contact", "target_section": "contact"})

    nav = navigation()

    assert [item["label"] for item in nav["sections"]] == ["Contact"]
    assert [item["link"] for item in nav["pages"]] == ["home", "blog"]


def test_site_json_api(client):
    make_page("home")
    make_section("hero")
    make_field("hero", "title", "Welcome")

    response = client.get("/api/v1/site/pages/home")

    assert response.status_code == 200
    body = response.get_json()
    assert body["page"]["page_name"] == "home"
    assert body["sections"][0]["kind"] == "hero"
    assert body["sections"][0]["fields"][0]["content"] == "Welcome"

    missing = client.get("/api/v1/site/pages/missing")
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "NotFound"


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.get_json() == {"status": "ok", "service": "portfolio-cms"}
