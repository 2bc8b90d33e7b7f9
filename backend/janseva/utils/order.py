from janseva.extensions import db
from janseva.models.section import Section


def compact_section_order(page_id: int) -> int:
    """
    Re-assigns sequential order values (0..N-1) for a page's sections,
    keeping the current (order, id) sequence. Returns the number of rows
    whose order changed.
    """
    sections = (
        Section.query
        .filter_by(page_id=page_id)
        .order_by(Section.order.asc(), Section.id.asc())
        .all()
    )

    changed = 0
    for index, section in enumerate(sections):
        if section.order != index:
            section.order = index
            changed += 1

    db.session.flush()
    return changed
