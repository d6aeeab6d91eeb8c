from flask_jwt_extended import decode_token
from portfolio.extensions import db


def test_login_issues_admin_token(client, admin_user):
    response = client.post("/api/v1/auth/login", json={
        "email": "Admin@Example.com",
        "password": "s3cret-pass",
    })

    assert response.status_code == 200
    token = response.get_json()["access_token"]
    claims = decode_token(token)
    assert claims["sub"] == admin_user.id
    assert claims["role"] == "admin"

    pages = client.get("/api/v1/admin/pages", headers={"Authorization": f"Bearer {token}"})
    assert pages.status_code == 200


def test_login_rejects_bad_password(client, admin_user):
    response = client.post("/api/v1/auth/login", json={
        "email": "admin@example.com",
        "password": "wrong",
    })
    assert response.status_code == 401


def test_login_rejects_disabled_user(client, admin_user):
    admin_user.is_active = False
    db.session.commit()

    response = client.post("/api/v1/auth/login", json={
        "email": "admin@example.com",
        "password": "s3cret-pass",
    })
    assert response.status_code == 403


def test_login_requires_body(client):
    assert client.post("/api/v1/auth/login").status_code == 400
    assert client.post("/api/v1/auth/login", json={"email": "a@b.c"}).status_code == 400
