from typing import Any, Dict, Mapping, Optional

from janseva.domain.typography import SETTING_PREFIX, TYPOGRAPHY_KEYS
from janseva.models.page import Page
from .settings import get_settings


def _present(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def merge_typography(
    page_overrides: Optional[Mapping[str, Any]],
    settings: Optional[Mapping[str, str]],
) -> Dict[str, str]:
    """
    Resolve every recognized key: page override > site setting > default.

    Only the fixed key set is resolved; anything else in either source is
    ignored.
    """
    page_overrides = page_overrides or {}
    settings = settings or {}

    resolved: Dict[str, str] = {}
    for key in TYPOGRAPHY_KEYS:
        override = page_overrides.get(key.override_key)
        setting = settings.get(key.setting_key)

        if _present(override):
            resolved[key.override_key] = str(override).strip()
        elif _present(setting):
            resolved[key.override_key] = str(setting).strip()
        else:
            resolved[key.override_key] = key.default

    return resolved


def resolve_typography(page_slug: Optional[str] = None) -> Dict[str, str]:
    """
    Effective typography for a page, or for the whole site when no slug
    is given. Unknown slugs resolve like the site-wide case.
    """
    settings = get_settings(prefix=SETTING_PREFIX)

    overrides: Dict[str, Any] = {}
    if page_slug:
        page = Page.query.filter_by(slug=page_slug).first()
        if page is not None and isinstance(page.typography, dict):
            overrides = page.typography

    return merge_typography(overrides, settings)


def typography_css_variables(resolved: Mapping[str, str]) -> Dict[str, str]:
    return {
        key.css_var: f"{resolved[key.override_key]}{key.unit}"
        for key in TYPOGRAPHY_KEYS
        if key.override_key in resolved
    }
