import re
from typing import Any, Dict, Optional

from janseva.domain.errors import ValidationFailure
from janseva.domain.typography import OVERRIDE_KEYS

# Path segments of letters, digits, dashes; "/" joins nested slugs. Case is significant.
SLUG_PATTERN = re.compile(r"^[a-zA-Z0-9ऀ-ॿ]+(?:-[a-zA-Z0-9ऀ-ॿ]+)*(?:/[a-zA-Z0-9ऀ-ॿ]+(?:-[a-zA-Z0-9ऀ-ॿ]+)*)*$")


def assert_slug(slug: Any) -> str:
    if not isinstance(slug, str) or not slug.strip():
        raise ValidationFailure("Slug is required", fields={"slug": "required"})

    slug = slug.strip()
    if not SLUG_PATTERN.match(slug):
        raise ValidationFailure(
            f"Invalid slug: {slug}",
            fields={"slug": "use letters, digits, '-' and '/'"},
        )
    return slug


def assert_title(title: Any, *, field: str = "title_hi") -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationFailure("Title (Hindi) is required", fields={field: "required"})
    return title.strip()


def clean_typography(overrides: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """
    Keep only recognized override keys with non-empty values.
    """
    if overrides is None:
        return {}
    if not isinstance(overrides, dict):
        raise ValidationFailure("Typography must be an object", fields={"typography": "invalid"})

    return {
        key: str(value).strip()
        for key, value in overrides.items()
        if key in OVERRIDE_KEYS and value is not None and str(value).strip()
    }
