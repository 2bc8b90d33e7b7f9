from typing import Any, Optional

from janseva.models.page import Page
from janseva.utils.pagination import CursorMeta, paginate_cursor


def list_pages(
    *,
    limit: int,
    cursor: Optional[str] = None,
    published: Optional[bool] = None,
) -> tuple[list[Any], CursorMeta]:
    query = Page.query
    if published is not None:
        query = query.filter_by(is_published=published)

    return paginate_cursor(query, model=Page, limit=limit, cursor=cursor)
