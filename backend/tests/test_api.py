"""
HTTP surface: auth, role checks, error mapping and the public render.
"""
import io
import os

from sqlalchemy.exc import SQLAlchemyError

from janseva.api.v1 import media as media_api
from janseva.application.cms.settings import upsert_settings
from janseva.extensions import db
from janseva.models.audit_log import AuditLog
from janseva.models.page import Page
from janseva.models.section import Section

API = "/api/v1"


def test_health(client):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


class TestAuth:
    def test_login_issues_tokens(self, client, admin_user):
        response = client.post(
            f"{API}/auth/login",
            json={"email": "admin@example.com", "password": "testpassword123"},
        )

        assert response.status_code == 200
        assert response.get_json()["access_token"]

        me = client.get(
            f"{API}/auth/me",
            headers={"Authorization": f"Bearer {response.get_json()['access_token']}"},
        )
        assert me.get_json()["role"] == "ADMIN"

    def test_login_wrong_password(self, client, admin_user):
        response = client.post(
            f"{API}/auth/login",
            json={"email": "admin@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthorized"

    def test_admin_routes_require_a_token(self, client):
        response = client.get(f"{API}/admin/pages")

        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthorized"

    def test_garbage_token_rejected(self, client):
        response = client.get(f"{API}/admin/pages", headers={"Authorization": "Bearer junk"})

        assert response.status_code == 401


class TestPagesApi:
    def test_create_page_from_template(self, client, admin_headers):
        response = client.post(
            f"{API}/admin/pages",
            json={"title_hi": "हमारे बारे में", "slug": "about", "template": "article"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.get_json()
        assert [(s["type"], s["order"]) for s in body["sections"]] == [("HERO", 0), ("RICHTEXT", 1)]

    def test_duplicate_slug_is_conflict(self, client, admin_headers, make_page):
        make_page(slug="about")

        response = client.post(
            f"{API}/admin/pages",
            json={"title_hi": "दूसरा", "slug": "about"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.get_json() == {
            "error": "DuplicateSlug",
            "message": "A page with slug 'about' already exists",
            "slug": "about",
        }

    def test_validation_errors_are_400(self, client, admin_headers):
        response = client.post(f"{API}/admin/pages", json={"slug": "x"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.get_json()["error"] == "ValidationFailure"
        assert Page.query.count() == 0

    def test_delete_requires_super_admin(self, client, admin_headers, super_admin_headers, make_page):
        page = make_page(slug="about", template="article")
        page_id = page.id

        forbidden = client.delete(f"{API}/admin/pages/{page_id}", headers=admin_headers)
        assert forbidden.status_code == 403

        deleted = client.delete(f"{API}/admin/pages/{page_id}", headers=super_admin_headers)
        assert deleted.status_code == 200

        db.session.expire_all()
        assert db.session.get(Page, page_id) is None
        assert Section.query.filter_by(page_id=page_id).count() == 0

    def test_list_pages_paginates_newest_first(self, client, admin_headers, make_page):
        for slug in ("one", "two", "three"):
            make_page(slug=slug)

        first = client.get(f"{API}/admin/pages?limit=2", headers=admin_headers).get_json()
        assert [p["slug"] for p in first["items"]] == ["three", "two"]
        assert first["pagination"]["has_more"] is True

        cursor = first["pagination"]["next_cursor"]
        second = client.get(f"{API}/admin/pages?limit=2&cursor={cursor}", headers=admin_headers).get_json()
        assert [p["slug"] for p in second["items"]] == ["one"]
        assert second["pagination"] == {"has_more": False, "next_cursor": None}

    def test_publish_toggle(self, client, admin_headers, make_page):
        page = make_page(slug="draft", published=False)

        assert client.get(f"{API}/public/hi/pages/draft").status_code == 404

        client.post(f"{API}/admin/pages/{page.id}/publish", headers=admin_headers)
        assert client.get(f"{API}/public/hi/pages/draft").status_code == 200

        client.post(f"{API}/admin/pages/{page.id}/unpublish", headers=admin_headers)
        assert client.get(f"{API}/public/hi/pages/draft").status_code == 404

    def test_disabled_cms_feature_blocks_admin_routes(self, client, admin_headers):
        upsert_settings(actor_id=None, values={"feature_cms": False})

        response = client.get(f"{API}/admin/templates", headers=admin_headers)

        assert response.status_code == 403


class TestSectionsApi:
    def test_move_section_endpoint(self, client, admin_headers, make_page):
        page = make_page(slug="about", template="article")
        richtext = Section.query.filter_by(page_id=page.id, type="RICHTEXT").one()

        response = client.post(
            f"{API}/admin/sections/{richtext.id}/move",
            json={"direction": "UP"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.get_json()["moved"] is True

        listing = client.get(f"{API}/admin/pages/{page.id}/sections", headers=admin_headers).get_json()
        assert [s["type"] for s in listing] == ["RICHTEXT", "HERO"]

    def test_move_missing_section(self, client, admin_headers):
        response = client.post(
            f"{API}/admin/sections/999/move",
            json={"direction": "DOWN"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.get_json()["error"] == "NotFound"

    def test_add_and_hide_section(self, client, admin_headers, make_page):
        page = make_page(slug="about")

        created = client.post(
            f"{API}/admin/pages/{page.id}/sections",
            json={"type": "faq"},
            headers=admin_headers,
        )
        assert created.status_code == 201
        section_id = created.get_json()["id"]

        client.patch(
            f"{API}/admin/sections/{section_id}",
            json={"is_visible": False},
            headers=admin_headers,
        )

        rendered = client.get(f"{API}/public/hi/pages/about").get_json()
        assert rendered["sections"] == []

        preview = client.get(f"{API}/admin/pages/{page.id}/preview", headers=admin_headers).get_json()
        assert [s["is_visible"] for s in preview["sections"]] == [False]


class TestPublicApi:
    def test_render_in_english(self, client, make_page):
        make_page(slug="about", template="article", title_en="About Us")

        body = client.get(f"{API}/public/en/pages/about").get_json()

        assert body["page"]["title"] == "About Us"
        assert body["sections"][0]["data"]["title"] == "Title Here"
        assert body["typography"]["--site-base-size"] == "16px"

    def test_unsupported_locale(self, client, make_page):
        make_page(slug="about")

        response = client.get(f"{API}/public/fr/pages/about")

        assert response.status_code == 400

    def test_typography_endpoint(self, client, make_page):
        make_page(slug="about", typography={"baseSize": "20"})

        body = client.get(f"{API}/public/typography?slug=about").get_json()

        assert body["values"]["baseSize"] == "20"
        assert body["css_variables"]["--site-base-size"] == "20px"


def test_media_upload_and_serve(client, admin_headers):
    response = client.post(
        f"{API}/admin/media",
        data={"file": (io.BytesIO(b"\x89PNG fake"), "photo.png")},
        content_type="multipart/form-data",
        headers=admin_headers,
    )

    assert response.status_code == 201
    url = response.get_json()["url"]
    assert url.startswith("/uploads/") and url.endswith(".png")
    assert client.get(url).data == b"\x89PNG fake"


def test_media_upload_with_devanagari_filename(client, admin_headers):
    response = client.post(
        f"{API}/admin/media",
        data={"file": (io.BytesIO(b"\x89PNG fake"), "फोटो.png")},
        content_type="multipart/form-data",
        headers=admin_headers,
    )

    assert response.status_code == 201
    url = response.get_json()["url"]
    assert url.endswith(".png")

    log = AuditLog.query.filter_by(action="media.upload").one()
    assert log.entity_id == url.rsplit("/", 1)[-1]


def test_media_file_removed_when_audit_fails(app, client, admin_headers, monkeypatch):
    def broken_log_action(**kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(media_api, "log_action", broken_log_action)

    response = client.post(
        f"{API}/admin/media",
        data={"file": (io.BytesIO(b"clip"), "rally.webm")},
        content_type="multipart/form-data",
        headers=admin_headers,
    )

    assert response.status_code == 500
    assert response.get_json()["error"] == "StoreFailure"
    assert os.listdir(app.config["UPLOAD_FOLDER"]) == []


def test_media_rejects_unknown_extension(client, admin_headers):
    response = client.post(
        f"{API}/admin/media",
        data={"file": (io.BytesIO(b"#!/bin/sh"), "run.sh")},
        content_type="multipart/form-data",
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_audit_trail_is_super_admin_only(client, admin_headers, super_admin_headers, make_page):
    make_page(slug="about")

    assert client.get(f"{API}/admin/audit", headers=admin_headers).status_code == 403

    body = client.get(
        f"{API}/admin/audit?entity_type=page",
        headers=super_admin_headers,
    ).get_json()

    assert [log["action"] for log in body["items"]] == ["page.create"]
    assert AuditLog.query.count() >= 1
