from typing import Any
from flask import current_app
from janseva.models.page import Page
from janseva.models.section import Section
from janseva.utils.audit import log_action
from janseva.utils.transaction import transactional
from .update_page import get_page_or_404


def delete_page(
    *,
    page_id: Any,
    actor_id: Any,
) -> None:
    """
    Hard-delete a page and all of its sections.

    Sections go first, then the page, inside one transaction, so the
    cascade does not depend on how the database was configured.
    """
    page = get_page_or_404(page_id)
    slug = page.slug

    with transactional():
        removed = Section.query.filter_by(
            page_id=page.id,
        ).delete()

        Page.query.filter_by(id=page.id).delete()

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            actor_id=actor_id,
            payload={
                "slug": slug,
                "sections": removed,
            },
        )

    current_app.logger.info("Deleted page %s (%s) with %d sections", page_id, slug, removed)
