from typing import Any, Dict, List, Optional

from janseva.domain.errors import NotFound
from janseva.models.page import Page
from janseva.models.section import Section
from janseva.renderers.locale import normalize_locale, pick
from janseva.renderers.registry import render_section
from .resolve_typography import resolve_typography, typography_css_variables
from .update_page import get_page_or_404


def ordered_sections(page_id: int, *, visible_only: bool = True) -> List[Section]:
    """
    A page's sections by ascending order, ties broken by creation (id).
    """
    query = Section.query.filter_by(page_id=page_id)
    if visible_only:
        query = query.filter_by(is_visible=True)
    return query.order_by(Section.order.asc(), Section.id.asc()).all()


def _compose(page: Page, locale: str, sections: List[Section]) -> Dict[str, Any]:
    rendered = []
    for section in sections:
        output = render_section(section, locale)
        if output is None:
            continue
        if not section.is_visible:
            output["is_visible"] = False
        rendered.append(output)

    typography = resolve_typography(page.slug)

    return {
        "page": {
            "id": page.id,
            "slug": page.slug,
            "locale": locale,
            "title": pick(page, "title", locale),
            "seo_title": page.seo_title or pick(page, "title", locale),
            "seo_desc": page.seo_desc,
        },
        "sections": rendered,
        "typography": typography_css_variables(typography),
    }


def render_page(*, slug: str, locale: Optional[str] = None) -> Dict[str, Any]:
    """
    Public render of a published page.

    Read-only. Hidden sections are omitted and sections that cannot be
    rendered are skipped rather than failing the page.
    """
    locale = normalize_locale(locale)

    page = Page.query.filter_by(slug=slug, is_published=True).first()
    if page is None:
        raise NotFound(f"Page '{slug}' not found")

    return _compose(page, locale, ordered_sections(page.id))


def preview_page(*, page_id: Any, locale: Optional[str] = None) -> Dict[str, Any]:
    """Admin render: ignores the publish flag and keeps hidden sections, marked."""
    locale = normalize_locale(locale)
    page = get_page_or_404(page_id)

    return _compose(page, locale, ordered_sections(page.id, visible_only=False))
