from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from janseva.extensions import db
from janseva.models.page import Page
from janseva.domain.errors import DuplicateSlug, NotFound, StoreFailure, ValidationFailure
from janseva.domain.invariants.page import assert_slug, assert_title, clean_typography
from janseva.utils.audit import log_action
from janseva.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = (
    "title_hi", "title_en", "slug", "seo_title", "seo_desc", "is_published", "typography",
)


def get_page_or_404(page_id: Any) -> Page:
    page = db.session.get(Page, page_id)
    if page is None:
        raise NotFound("Page not found")
    return page


def _slug_taken(slug: str, page_id: int) -> bool:
    return Page.query.filter(Page.slug == slug, Page.id != page_id).first() is not None


def _clean(field: str, value: Any) -> Any:
    if field == "title_hi":
        return assert_title(value)
    if field == "slug":
        return assert_slug(value)
    if field == "typography":
        return clean_typography(value)
    if field == "is_published":
        if not isinstance(value, bool):
            raise ValidationFailure("is_published must be a boolean", fields={field: "invalid"})
        return value
    return value or None


def update_page(
    *,
    page_id: Any,
    actor_id: Any,
    data: Dict[str, Any],
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    - A new slug must not belong to another page
    """
    page = get_page_or_404(page_id)

    updates = {
        field: _clean(field, data[field])
        for field in ALLOWED_UPDATE_FIELDS
        if field in data
    }

    if "slug" in updates and updates["slug"] != page.slug:
        if _slug_taken(updates["slug"], page.id):
            raise DuplicateSlug(updates["slug"])

    changed_fields: list[str] = []

    try:
        with transactional():
            for field, value in updates.items():
                if getattr(page, field) != value:
                    setattr(page, field, value)
                    changed_fields.append(field)

            if not changed_fields:
                raise ValidationFailure("No valid fields provided for update")

            log_action(
                action="page.update",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={
                    "fields": changed_fields,
                },
            )
    except StoreFailure as exc:
        # Another writer took the slug after the check above.
        if (
            "slug" in updates
            and isinstance(exc.__cause__, IntegrityError)
            and _slug_taken(updates["slug"], page.id)
        ):
            raise DuplicateSlug(updates["slug"]) from exc
        raise

    return page


def set_page_published(*, page_id: Any, actor_id: Any, published: bool) -> Page:
    page = get_page_or_404(page_id)

    with transactional():
        page.is_published = published

        log_action(
            action="page.publish" if published else "page.unpublish",
            entity_type="page",
            entity_id=page.id,
            actor_id=actor_id,
            payload={"slug": page.slug},
        )

    return page
