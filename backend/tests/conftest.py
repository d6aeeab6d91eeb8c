import pytest
from flask_jwt_extended import create_access_token
from portfolio import create_app
from portfolio.extensions import db
from portfolio.models import User


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(app):
    user = User()
    user.email = "admin@example.com"
    user.role = "admin"
    user.set_password("s3cret-pass")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_headers(admin_user):
    token = create_access_token(
        identity=admin_user.id,
        additional_claims={"role": admin_user.role},
    )
    return {"Authorization": f"Bearer {token}"}
