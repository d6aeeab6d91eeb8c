import time
from datetime import datetime, timedelta, timezone

import pytest
from werkzeug.http import http_date
from portfolio.extensions import db
from portfolio.models import ContentField, Page
from factories import make_field, make_page, make_section


def test_admin_routes_require_token(client):
    assert client.get("/api/v1/admin/pages").status_code == 401


def test_admin_routes_require_admin_role(client, app):
    from flask_jwt_extended import create_access_token

    token = create_access_token(identity="someone", additional_claims={"role": "editor"})
    response = client.get("/api/v1/admin/pages", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


def test_create_page_derives_link(client, auth_headers):
    response = client.post("/api/v1/admin/pages", json={"page_name": "About Me"}, headers=auth_headers)

    assert response.status_code == 201
    body = response.get_json()
    assert body["page_link"] == "about-me"
    assert body["is_visible"] is True
    assert body["include_in_navigation"] is True


def test_create_page_validation_errors(client, auth_headers):
    response = client.post("/api/v1/admin/pages", json={"page_name": "  ", "display_order": "x"},
                           headers=auth_headers)

    assert response.status_code == 422
    body = response.get_json()
    assert body["error"] == "ValidationError"
    assert body["fields"]["page_name"] == "This field is required"
    assert "display_order" in body["fields"]
    assert Page.query.count() == 0


def test_duplicate_page_name_conflicts(client, auth_headers):
    make_page("Blog")

    response = client.post("/api/v1/admin/pages", json={"page_name": "blog"}, headers=auth_headers)

    assert response.status_code == 409
    assert response.get_json()["error"] == "InvariantViolation"


def test_rename_keeps_page_link(client, auth_headers):
    page = make_page("Blog")

    response = client.put(f"/api/v1/admin/pages/{page.id}", json={"page_name": "Journal"},
                          headers=auth_headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body["page_name"] == "Journal"
    assert body["page_link"] == "blog"


def test_system_pages_cannot_be_deleted_or_renamed(client, auth_headers):
    page = make_page("admin", is_system_page=True)

    deleted = client.delete(f"/api/v1/admin/pages/{page.id}", headers=auth_headers)
    renamed = client.put(f"/api/v1/admin/pages/{page.id}", json={"page_name": "root"},
                         headers=auth_headers)

    assert deleted.status_code == 403
    assert deleted.get_json()["error"] == "SystemPageProtected"
    assert renamed.status_code == 403
    assert db.session.get(Page, page.id) is not None


def test_pages_list_hides_admin_page(client, auth_headers):
    make_page("home", display_order=1)
    make_page("admin", display_order=0, is_system_page=True)
    make_page("blog", display_order=2)

    body = client.get("/api/v1/admin/pages", headers=auth_headers).get_json()

    assert [p["page_name"] for p in body["items"]] == ["home", "blog"]


def test_pages_list_hides_admin_page_in_any_case(client, auth_headers):
    make_page("home")
    make_page("Admin", is_system_page=True)

    body = client.get("/api/v1/admin/pages", headers=auth_headers).get_json()

    assert [p["page_name"] for p in body["items"]] == ["home"]


def test_delete_missing_page_is_404(client, auth_headers):
    response = client.delete("/api/v1/admin/pages/does-not-exist", headers=auth_headers)

    assert response.status_code == 404
    assert response.get_json() == {"error": "NotFound", "message": "Page not found"}


def test_content_saved_with_style_sidecar(client, auth_headers):
    make_page("home")
    make_section("hero")

    response = client.post("/api/v1/admin/content", json={
        "section": "hero",
        "content_type": "title",
        "content": "Welcome",
        "style": {"color": "teal"},
    }, headers=auth_headers)

    assert response.status_code == 201
    rows = {f.content_type: f for f in ContentField.query.filter_by(section="hero")}
    assert set(rows) == {"title", "title_style"}
    assert rows["title"].field_type == "title"
    assert rows["title_style"].content == '{"color": "teal"}'


def test_content_delete_removes_sidecar(client, auth_headers):
    make_page("home")
    make_section("hero")
    field = make_field("hero", "title", "Welcome", style={"color": "teal"})

    response = client.delete(f"/api/v1/admin/content/{field.id}", headers=auth_headers)

    assert response.status_code == 200
    assert ContentField.query.filter_by(section="hero").count() == 0


def test_content_list_accepts_list_value(client, auth_headers):
    make_page("home")
    make_section("about")

    response = client.post("/api/v1/admin/content", json={
        "section": "about",
        "content_type": "skills_list",
        "content": ["Python", " SQL "],
    }, headers=auth_headers)

    assert response.get_json()["content"] == "Python,SQL"
    assert response.get_json()["input_type"] == "list"


def test_update_invalidates_public_cache(client, auth_headers):
    make_page("home")
    make_section("hero")
    field = make_field("hero", "title", "Welcome")

    assert "Welcome" in client.get("/").get_data(as_text=True)

    client.put(f"/api/v1/admin/content/{field.id}", json={"content": "Hello again"},
               headers=auth_headers)

    html = client.get("/").get_data(as_text=True)
    assert "Hello again" in html
    assert "Welcome" not in html


def test_stale_update_conflicts(client, auth_headers):
    make_page("home")
    make_section("hero")
    field = make_field("hero", "title", "Welcome")

    response = client.put(
        f"/api/v1/admin/content/{field.id}",
        json={"content": "Too late"},
        headers={**auth_headers, "If-Unmodified-Since": "Mon, 01 Jan 2001 00:00:00 GMT"},
    )

    assert response.status_code == 409
    assert db.session.get(ContentField, field.id).content == "Welcome"


@pytest.fixture
def ahead_of_utc(monkeypatch):
    monkeypatch.setenv("TZ", "XST-05:30")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_fresh_update_passes_lock_when_server_is_ahead_of_utc(client, auth_headers, ahead_of_utc):
    make_page("home")
    make_section("hero")
    field = make_field("hero", "title", "Welcome")
    just_after_save = http_date(datetime.now(timezone.utc) + timedelta(minutes=1))

    response = client.put(
        f"/api/v1/admin/content/{field.id}",
        json={"content": "On time"},
        headers={**auth_headers, "If-Unmodified-Since": just_after_save},
    )

    assert response.status_code == 200
    assert db.session.get(ContentField, field.id).content == "On time"


def test_update_older_than_save_conflicts(client, auth_headers):
    make_page("home")
    make_section("hero")
    field = make_field("hero", "title", "Welcome")
    before_save = http_date(datetime.now(timezone.utc) - timedelta(minutes=1))

    response = client.put(
        f"/api/v1/admin/content/{field.id}",
        json={"content": "Too late"},
        headers={**auth_headers, "If-Unmodified-Since": before_save},
    )

    assert response.status_code == 409


def test_timestamps_are_stored_in_utc(app):
    make_page("home")
    make_section("hero")
    field = make_field("hero", "title", "Welcome")

    assert field.updated_at.tzinfo is None
    assert abs(datetime.now(timezone.utc).replace(tzinfo=None) - field.updated_at) < timedelta(minutes=1)


def test_move_endpoint(client, auth_headers):
    make_page("home")
    a = make_section("a", display_order=1)
    b = make_section("b", display_order=2)

    response = client.post(f"/api/v1/admin/sections/{b.id}/move-up", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["moved"] is True
    sections = client.get("/api/v1/admin/sections?page=home", headers=auth_headers).get_json()
    assert [s["section_name"] for s in sections["items"]] == ["b", "a"]


def test_projects_and_articles_crud(client, auth_headers):
    created = client.post("/api/v1/admin/projects", json={
        "title": "Churn model",
        "description": "Predicting churn",
        "tags": "ml, python, ",
    }, headers=auth_headers)
    assert created.status_code == 201
    assert created.get_json()["tags"] == ["ml", "python"]

    article = client.post("/api/v1/admin/articles", json={
        "title": "Intro",
        "category": "ML",
        "excerpt": "Short",
        "content": "Long",
        "read_time": "7",
        "date": "2024-03-01",
    }, headers=auth_headers)
    assert article.status_code == 201
    assert article.get_json()["read_time"] == 7
    assert article.get_json()["date"] == "2024-03-01"

    missing = client.post("/api/v1/admin/articles", json={"title": "Only title"}, headers=auth_headers)
    assert missing.status_code == 422
    assert set(missing.get_json()["fields"]) == {"category", "excerpt", "content"}

    public = client.get("/api/v1/site/projects").get_json()
    assert [p["title"] for p in public["items"]] == ["Churn model"]

    project_id = created.get_json()["id"]
    assert client.delete(f"/api/v1/admin/projects/{project_id}", headers=auth_headers).status_code == 200
    assert client.get("/api/v1/site/projects").get_json()["items"] == []


def test_site_map_and_field_types(client, auth_headers):
    make_page("home")
    make_section("hero")
    make_field("hero", "title", "Welcome")

    site_map = client.get("/api/v1/admin/site-map", headers=auth_headers).get_json()
    assert site_map["pages"][0]["sections"][0]["fields"][0]["content"] == "Welcome"

    help_ = client.get("/api/v1/admin/field-types?layout=hero_section", headers=auth_headers).get_json()
    assert help_["fields"]["hero_section"][-1] == {"field": "background_image", "input_type": "image"}
    assert help_["layouts"]["hero"] == "Hero Banner"
