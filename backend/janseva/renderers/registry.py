from typing import Any, Callable, Dict, Optional

from flask import current_app

from janseva.domain.errors import ValidationFailure
from janseva.domain.section_types import parse_section_content
from janseva.models.section import Section
from . import sections as r

SectionRenderer = Callable[[Any, str], Dict[str, Any]]

# Exactly one renderer per recognized section type.
SECTION_RENDERERS: Dict[str, SectionRenderer] = {
    "HERO": r.render_hero,
    "RICHTEXT": r.render_richtext,
    "BIOGRAPHY": r.render_biography,
    "STATS": r.render_stats,
    "VIDEOS": r.render_feed("videos"),
    "TIMELINE": r.render_feed("timeline"),
    "GALLERY": r.render_feed("gallery"),
    "TESTIMONIALS": r.render_feed("testimonials"),
    "NEWSLETTER": r.render_newsletter,
    "FAQ": r.render_faq,
}


def render_section(section: Section, locale: str) -> Optional[Dict[str, Any]]:
    """
    Render one stored section, or return None when it cannot be shown.

    Unknown types and content that no longer matches its schema are
    skipped so the rest of the page still renders.
    """
    renderer = SECTION_RENDERERS.get(section.type)
    if renderer is None:
        current_app.logger.warning("Unknown section type %r (section %s)", section.type, section.id)
        return None

    try:
        content = parse_section_content(section.type, section.content)
    except ValidationFailure as exc:
        current_app.logger.warning("Skipping section %s: %s", section.id, exc.message)
        return None

    return {
        "id": section.id,
        "type": section.type,
        "order": section.order,
        "data": renderer(content, locale),
    }
