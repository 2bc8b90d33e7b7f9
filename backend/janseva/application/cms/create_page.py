from typing import Any, Dict, Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError
from janseva.extensions import db
from janseva.models.page import Page
from janseva.models.section import Section
from janseva.domain.errors import DuplicateSlug, StoreFailure
from janseva.domain.invariants.page import assert_slug, assert_title, clean_typography
from janseva.domain.invariants.section import assert_section
from janseva.domain.templates import resolve_template
from janseva.utils.audit import log_action
from janseva.utils.transaction import transactional


def create_page(
    *,
    actor_id: Any,
    data: Dict[str, Any],
    template_id: Optional[str] = None,
) -> Page:
    """
    Create a page, optionally pre-filled from a template blueprint.

    The page row and all of its template sections are written in one
    transaction; a failure leaves neither behind.

    Edge cases handled:
    - Missing Hindi title or slug (ValidationFailure, before any store access)
    - Duplicate slug, including a concurrent insert (DuplicateSlug)
    - Unknown template id (falls back to a blank page)
    """
    title_hi = assert_title(data.get("title_hi"))
    slug = assert_slug(data.get("slug"))
    typography = clean_typography(data.get("typography"))

    blueprint = resolve_template(template_id or data.get("template"))

    # Validate blueprint content up front so a bad catalog entry never
    # reaches the store.
    section_payloads = [
        (entry.type, assert_section(entry.type, entry.instantiate_content()))
        for entry in blueprint.sections
    ]

    if Page.query.filter_by(slug=slug).first() is not None:
        raise DuplicateSlug(slug)

    page = Page()
    page.title_hi = title_hi
    page.title_en = data.get("title_en") or None
    page.slug = slug
    page.seo_title = data.get("seo_title") or None
    page.seo_desc = data.get("seo_desc") or None
    page.is_published = bool(data.get("is_published", False))
    page.typography = typography
    page.template = blueprint.id

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            for order, (section_type, content) in enumerate(section_payloads):
                section = Section()
                section.page_id = page.id
                section.type = section_type
                section.order = order
                section.content = content
                section.is_visible = True
                db.session.add(section)

            log_action(
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={
                    "slug": page.slug,
                    "template": blueprint.id,
                    "sections": len(section_payloads),
                },
            )
    except StoreFailure as exc:
        # The unique constraint catches a slug claimed between our check
        # and the commit.
        if isinstance(exc.__cause__, IntegrityError) and Page.query.filter_by(slug=slug).first():
            raise DuplicateSlug(slug) from exc
        raise

    current_app.logger.info(
        "Created page %s (%s) from template %s", page.id, page.slug, blueprint.id
    )
    return page
