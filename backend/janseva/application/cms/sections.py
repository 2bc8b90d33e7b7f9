from typing import Any, Dict, Optional

from flask import current_app

from janseva.domain.errors import NotFound, ValidationFailure
from janseva.domain.invariants.section import assert_section
from janseva.domain.section_types import default_section_content, normalize_section_type
from janseva.extensions import db
from janseva.models.section import Section
from janseva.utils.audit import log_action
from janseva.utils.transaction import transactional
from .update_page import get_page_or_404


def get_section_or_404(section_id: Any) -> Section:
    section = db.session.get(Section, section_id)
    if section is None:
        raise NotFound("Section not found")
    return section


def create_section(
    *,
    page_id: Any,
    actor_id: Any,
    section_type: Any,
    content: Optional[Dict[str, Any]] = None,
) -> Section:
    """
    Append a visible section to the end of a page.

    Without content, the section starts from its type's placeholder.
    """
    page = get_page_or_404(page_id)
    section_type = normalize_section_type(section_type)

    if content is None:
        content = default_section_content(section_type)
    content = assert_section(section_type, content)

    max_order = (
        db.session.query(db.func.max(Section.order))
        .filter(Section.page_id == page.id)
        .scalar()
    )

    section = Section()
    section.page_id = page.id
    section.type = section_type
    section.order = 0 if max_order is None else max_order + 1
    section.content = content
    section.is_visible = True

    with transactional():
        db.session.add(section)
        db.session.flush()

        log_action(
            action="section.create",
            entity_type="section",
            entity_id=section.id,
            actor_id=actor_id,
            payload={
                "page_id": page.id,
                "type": section.type,
                "order": section.order,
            },
        )

    return section


def update_section(
    *,
    section_id: Any,
    actor_id: Any,
    data: Dict[str, Any],
) -> Section:
    """Replace content and/or toggle visibility. Type and order are not editable here."""
    section = get_section_or_404(section_id)

    changed_fields = []

    with transactional():
        if "content" in data:
            content = assert_section(section.type, data["content"])
            if content != section.content:
                section.content = content
                changed_fields.append("content")

        if "is_visible" in data:
            if not isinstance(data["is_visible"], bool):
                raise ValidationFailure("is_visible must be a boolean", fields={"is_visible": "invalid"})
            if data["is_visible"] != section.is_visible:
                section.is_visible = data["is_visible"]
                changed_fields.append("is_visible")

        if changed_fields:
            log_action(
                action="section.update",
                entity_type="section",
                entity_id=section.id,
                actor_id=actor_id,
                payload={"fields": changed_fields},
            )

    return section


def delete_section(*, section_id: Any, actor_id: Any) -> None:
    section = get_section_or_404(section_id)
    page_id = section.page_id

    with transactional():
        db.session.delete(section)

        log_action(
            action="section.delete",
            entity_type="section",
            entity_id=section_id,
            actor_id=actor_id,
            payload={"page_id": page_id},
        )

    current_app.logger.info("Deleted section %s from page %s", section_id, page_id)
