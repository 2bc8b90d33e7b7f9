import pytest
from sqlalchemy.exc import SQLAlchemyError

from janseva.application.cms import move_section as move_section_module
from janseva.application.cms.move_section import move_section, renumber_sections
from janseva.application.cms.render_page import ordered_sections
from janseva.application.cms.sections import create_section
from janseva.domain.errors import NotFound, StoreFailure, ValidationFailure
from janseva.extensions import db
from janseva.models.section import Section


def _orders(page_id):
    db.session.expire_all()
    return {s.id: s.order for s in Section.query.filter_by(page_id=page_id).all()}


def _types_in_order(page_id):
    db.session.expire_all()
    return [s.type for s in ordered_sections(page_id)]


@pytest.fixture
def media_page(make_page):
    """HERO(0), VIDEOS(1), RICHTEXT(2)"""
    return make_page(slug="media", template="media")


def test_about_article_scenario(make_page):
    page = make_page(slug="about", template="article")
    hero, richtext = ordered_sections(page.id)
    assert (hero.type, hero.order) == ("HERO", 0)
    assert (richtext.type, richtext.order) == ("RICHTEXT", 1)

    assert move_section(section_id=hero.id, direction="DOWN", actor_id=None) is True

    orders = _orders(page.id)
    assert orders[hero.id] == 1
    assert orders[richtext.id] == 0
    assert _types_in_order(page.id) == ["RICHTEXT", "HERO"]


def test_up_then_down_restores_order(media_page):
    sections = ordered_sections(media_page.id)
    before = _orders(media_page.id)

    move_section(section_id=sections[1].id, direction="UP", actor_id=None)
    assert _types_in_order(media_page.id) == ["VIDEOS", "HERO", "RICHTEXT"]

    move_section(section_id=sections[1].id, direction="DOWN", actor_id=None)
    assert _orders(media_page.id) == before


def test_down_then_up_restores_order(media_page):
    sections = ordered_sections(media_page.id)
    before = _orders(media_page.id)

    move_section(section_id=sections[0].id, direction="DOWN", actor_id=None)
    move_section(section_id=sections[0].id, direction="UP", actor_id=None)

    assert _orders(media_page.id) == before


def test_boundaries_are_successful_no_ops(media_page):
    sections = ordered_sections(media_page.id)
    before = _orders(media_page.id)

    assert move_section(section_id=sections[0].id, direction="UP", actor_id=None) is False
    assert move_section(section_id=sections[-1].id, direction="DOWN", actor_id=None) is False
    assert _orders(media_page.id) == before


def test_only_two_sections_touched(media_page):
    sections = ordered_sections(media_page.id)
    before = _orders(media_page.id)

    move_section(section_id=sections[2].id, direction="UP", actor_id=None)

    after = _orders(media_page.id)
    changed = [sid for sid in before if before[sid] != after[sid]]
    assert sorted(changed) == sorted([sections[1].id, sections[2].id])


def test_neighbor_search_skips_gaps_and_other_pages(make_page):
    page = make_page(slug="gaps")
    other = make_page(slug="other")
    first = create_section(page_id=page.id, actor_id=None, section_type="HERO")
    other_section = create_section(page_id=other.id, actor_id=None, section_type="FAQ")
    second = create_section(page_id=page.id, actor_id=None, section_type="FAQ")

    second.order = 10
    db.session.commit()

    move_section(section_id=second.id, direction="UP", actor_id=None)

    orders = _orders(page.id)
    assert orders[second.id] == 0
    assert orders[first.id] == 10
    assert _orders(other.id) == {other_section.id: 0}


def test_case_insensitive_direction(media_page):
    sections = ordered_sections(media_page.id)
    assert move_section(section_id=sections[1].id, direction="up", actor_id=None) is True


def test_missing_section_is_not_found(app):
    with pytest.raises(NotFound):
        move_section(section_id=999, direction="UP", actor_id=None)


@pytest.mark.parametrize("direction", [None, "", "LEFT", 1])
def test_invalid_direction_rejected(media_page, direction):
    section = ordered_sections(media_page.id)[0]

    with pytest.raises(ValidationFailure):
        move_section(section_id=section.id, direction=direction, actor_id=None)


def test_failed_swap_leaves_orders_untouched(media_page, monkeypatch):
    sections = ordered_sections(media_page.id)
    before = _orders(media_page.id)

    def broken_log_action(**kwargs):
        raise SQLAlchemyError("deadlock")

    monkeypatch.setattr(move_section_module, "log_action", broken_log_action)

    with pytest.raises(StoreFailure):
        move_section(section_id=sections[0].id, direction="DOWN", actor_id=None)

    assert _orders(media_page.id) == before


def test_renumber_repairs_duplicates_and_gaps(make_page):
    page = make_page(slug="messy", template="media")
    hero, videos, richtext = ordered_sections(page.id)
    hero.order, videos.order, richtext.order = 5, 5, 40
    db.session.commit()

    changed = renumber_sections(page_id=page.id)

    assert changed == 3
    orders = _orders(page.id)
    assert [orders[hero.id], orders[videos.id], orders[richtext.id]] == [0, 1, 2]
    assert renumber_sections(page_id=page.id) == 0
