import pytest

from janseva.application.cms import update_page as update_page_module
from janseva.application.cms.update_page import set_page_published, update_page
from janseva.domain.errors import DuplicateSlug, NotFound, ValidationFailure
from janseva.models.audit_log import AuditLog
from janseva.models.page import Page


def test_update_changes_only_given_fields(make_page):
    page = make_page(slug="about", seo_title="पुराना")

    page = update_page(
        page_id=page.id,
        actor_id=None,
        data={"title_en": "About", "typography": {"navSize": "15", "shadow": "x"}, "template": "media"},
    )

    assert page.title_en == "About"
    assert page.typography == {"navSize": "15"}
    assert page.seo_title == "पुराना"
    assert page.template == "blank"

    log = AuditLog.query.filter_by(action="page.update").one()
    assert sorted(log.payload["fields"]) == ["title_en", "typography"]


def test_slug_change_checks_other_pages(make_page):
    make_page(slug="contact")
    page = make_page(slug="about")

    with pytest.raises(DuplicateSlug):
        update_page(page_id=page.id, actor_id=None, data={"slug": "contact"})

    assert update_page(page_id=page.id, actor_id=None, data={"slug": "about/team"}).slug == "about/team"


def test_noop_update_rejected(make_page):
    page = make_page(slug="about")

    with pytest.raises(ValidationFailure):
        update_page(page_id=page.id, actor_id=None, data={"slug": "about"})


def test_invalid_slug_rejected(make_page):
    page = make_page(slug="about")

    with pytest.raises(ValidationFailure):
        update_page(page_id=page.id, actor_id=None, data={"slug": "About Us"})


def test_publish_flag(make_page):
    page = make_page(slug="about", published=False)

    assert set_page_published(page_id=page.id, actor_id=None, published=True).is_published is True

    with pytest.raises(NotFound):
        set_page_published(page_id=999, actor_id=None, published=True)


def test_slug_claimed_after_check_is_duplicate(make_page, monkeypatch):
    """A slug taken between the check and the commit still reports DuplicateSlug"""
    make_page(slug="contact")
    page = make_page(slug="about")
    page_id = page.id

    real_slug_taken = update_page_module._slug_taken
    calls = []

    def stale_slug_taken(slug, page_id):
        calls.append(slug)
        return False if len(calls) == 1 else real_slug_taken(slug, page_id)

    monkeypatch.setattr(update_page_module, "_slug_taken", stale_slug_taken)

    with pytest.raises(DuplicateSlug) as exc:
        update_page(page_id=page_id, actor_id=None, data={"slug": "contact"})

    assert exc.value.slug == "contact"
    assert len(calls) == 2
    assert Page.query.filter_by(id=page_id).one().slug == "about"
    assert AuditLog.query.filter_by(action="page.update").count() == 0
