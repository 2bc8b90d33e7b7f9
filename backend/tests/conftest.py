"""
Janseva CMS - Test Configuration and Fixtures
"""
import os

import pytest
from flask_jwt_extended import create_access_token

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only")

from janseva import create_app
from janseva.application.cms.create_page import create_page
from janseva.extensions import db
from janseva.models.user import User


@pytest.fixture
def app(tmp_path):
    """Fresh application and empty in-memory database for each test"""
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(email: str, role: str) -> User:
    user = User()
    user.email = email
    user.name = email.split("@")[0]
    user.role = role
    user.set_password("testpassword123")
    db.session.add(user)
    db.session.commit()
    return user


def _headers_for(user: User) -> dict:
    token = create_access_token(identity=str(user.id), additional_claims={"role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(app) -> User:
    return _make_user("admin@example.com", "ADMIN")


@pytest.fixture
def super_admin_user(app) -> User:
    return _make_user("root@example.com", "SUPER_ADMIN")


@pytest.fixture
def admin_headers(admin_user) -> dict:
    return _headers_for(admin_user)


@pytest.fixture
def super_admin_headers(super_admin_user) -> dict:
    return _headers_for(super_admin_user)


@pytest.fixture
def make_page(app):
    """Factory creating pages through the real create_page operation"""
    def factory(slug="about", template=None, published=True, **fields):
        data = {"title_hi": fields.pop("title_hi", "हमारे बारे में"), "slug": slug, "is_published": published}
        data.update(fields)
        return create_page(actor_id=None, data=data, template_id=template)

    return factory
