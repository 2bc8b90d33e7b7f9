from typing import Any

from flask import current_app

from janseva.domain.errors import ValidationFailure
from janseva.models.section import Section
from janseva.utils.audit import log_action
from janseva.utils.order import compact_section_order
from janseva.utils.transaction import transactional
from .sections import get_section_or_404
from .update_page import get_page_or_404

DIRECTIONS = ("UP", "DOWN")


def find_neighbor(section: Section, direction: str) -> Section | None:
    """
    Nearest section on the same page with a strictly smaller (UP) or
    larger (DOWN) order. Equal orders are never neighbors.
    """
    query = Section.query.filter(Section.page_id == section.page_id)

    if direction == "UP":
        return (
            query.filter(Section.order < section.order)
            .order_by(Section.order.desc(), Section.id.desc())
            .first()
        )

    return (
        query.filter(Section.order > section.order)
        .order_by(Section.order.asc(), Section.id.asc())
        .first()
    )


def move_section(
    *,
    section_id: Any,
    direction: Any,
    actor_id: Any,
) -> bool:
    """
    Swap a section's order with its neighbor.

    Returns True when a swap happened and False when the section was
    already first (UP) or last (DOWN). Both rows are written in a single
    transaction; no other section is touched.
    """
    if not isinstance(direction, str) or direction.strip().upper() not in DIRECTIONS:
        raise ValidationFailure(
            "Direction must be UP or DOWN",
            fields={"direction": "invalid"},
        )
    direction = direction.strip().upper()

    section = get_section_or_404(section_id)
    neighbor = find_neighbor(section, direction)

    if neighbor is None:
        return False

    with transactional():
        section.order, neighbor.order = neighbor.order, section.order

        log_action(
            action="section.move",
            entity_type="section",
            entity_id=section.id,
            actor_id=actor_id,
            payload={
                "direction": direction,
                "swapped_with": neighbor.id,
                "order": section.order,
            },
        )

    current_app.logger.info(
        "Moved section %s %s (swapped with %s)", section.id, direction, neighbor.id
    )
    return True


def renumber_sections(*, page_id: Any, actor_id: Any = None) -> int:
    """
    Maintenance: rewrite a page's section orders to 0..N-1.

    Repairs duplicate or gapped orders left by concurrent editors without
    changing the visible sequence.
    """
    page = get_page_or_404(page_id)

    with transactional():
        changed = compact_section_order(page.id)

        if changed:
            log_action(
                action="section.renumber",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={"changed": changed},
            )

    return changed
