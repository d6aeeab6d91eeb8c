from portfolio.models import NavigationItem, Page, Section, User


def test_seed_is_idempotent(app):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed"])
    second = runner.invoke(args=["seed"])

    assert "Seeded" in first.output
    assert "already seeded" in second.output
    assert {p.page_name for p in Page.query.all()} == {"home", "admin"}
    assert all(p.is_system_page for p in Page.query.all())
    assert Section.query.filter_by(page="home").count() == 5
    assert NavigationItem.query.count() == 4


def test_seeded_home_renders(app, client):
    app.test_cli_runner().invoke(args=["seed"])

    html = client.get("/").get_data(as_text=True)

    assert "Turning Data into" in html
    assert "Send Message" in html
    assert "Machine Learning" in html


def test_create_admin(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["create-admin", "Owner@Example.com", "pw-123456"])

    assert result.exit_code == 0
    user = User.query.filter_by(email="owner@example.com").one()
    assert user.role == "admin"
    assert user.check_password("pw-123456")
