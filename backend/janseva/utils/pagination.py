# janseva/utils/pagination.py
from __future__ import annotations

from typing import Optional, TypedDict, Type, Any

from sqlalchemy.orm import Query

from janseva.domain.errors import ValidationFailure

MAX_PAGE_SIZE = 100


class CursorMeta(TypedDict):
    """
    Cursor pagination metadata shared by every list_* endpoint.
    """
    has_more: bool
    next_cursor: Optional[str]


def decode_cursor(cursor: Optional[str]) -> Optional[int]:
    """
    Cursors are the id of the last row of the previous page.

    Integer ids are assigned in creation order, so "id < cursor" walks
    from newest to oldest without gaps or duplicates.
    """
    if not cursor:
        return None

    try:
        value = int(cursor)
    except (TypeError, ValueError) as exc:
        raise ValidationFailure("Invalid cursor format", fields={"cursor": "invalid"}) from exc

    if value <= 0:
        raise ValidationFailure("Invalid cursor format", fields={"cursor": "invalid"})
    return value


def parse_limit(raw: Any, default: int = 20) -> int:
    if raw in (None, ""):
        return default
    try:
        limit = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationFailure("Limit must be an integer", fields={"limit": "invalid"}) from exc

    if limit <= 0:
        raise ValidationFailure("Limit must be greater than zero", fields={"limit": "invalid"})
    return min(limit, MAX_PAGE_SIZE)


def paginate_cursor(
    query: Query,
    *,
    model: Type[Any],
    limit: int,
    cursor: Optional[str] = None,
) -> tuple[list[Any], CursorMeta]:
    """
    Execute a cursor-paginated query, newest first.

    Fetches limit + 1 rows to detect continuation and trims the extra row.
    """
    cursor_id = decode_cursor(cursor)
    if cursor_id is not None:
        query = query.filter(model.id < cursor_id)

    rows = query.order_by(model.id.desc()).limit(limit + 1).all()

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor = str(items[-1].id) if has_more and items else None

    return items, {
        "has_more": has_more,
        "next_cursor": next_cursor,
    }
