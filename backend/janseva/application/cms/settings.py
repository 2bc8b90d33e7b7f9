"""
Key-value site configuration.

Settings are free-form string pairs in storage, but consumers read them
through a fixed set of recognized keys: typography (`typo_*`) and feature
toggles (`feature_*`).
"""
from typing import Any, Dict, Optional

from flask import current_app

from janseva.domain.errors import ValidationFailure
from janseva.extensions import db
from janseva.models.site_setting import SiteSetting
from janseva.utils.audit import log_action
from janseva.utils.transaction import transactional

FEATURE_PREFIX = "feature_"

FEATURE_DEFAULTS: Dict[str, bool] = {
    "cms": True,
    "media_uploads": True,
}

GROUP_BY_PREFIX = (
    ("typo_", "TYPOGRAPHY"),
    (FEATURE_PREFIX, "FEATURES"),
    ("hero_", "HERO"),
    ("contact_", "CONTACT"),
    ("social_", "SOCIAL"),
)

MAX_KEY_LENGTH = 100


def group_for_key(key: str) -> str:
    for prefix, group in GROUP_BY_PREFIX:
        if key.startswith(prefix):
            return group
    return "GENERAL"


def get_settings(prefix: Optional[str] = None) -> Dict[str, str]:
    query = SiteSetting.query
    if prefix:
        query = query.filter(SiteSetting.key.startswith(prefix, autoescape=True))

    return {s.key: s.value for s in query.order_by(SiteSetting.key.asc()).all()}


def get_public_settings() -> Dict[str, str]:
    return {
        key: value
        for key, value in get_settings().items()
        if not key.startswith(FEATURE_PREFIX)
    }


def _coerce(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def upsert_settings(*, actor_id: Any, values: Dict[str, Any]) -> Dict[str, str]:
    """
    Insert or update every given key in one transaction.
    """
    if not isinstance(values, dict) or not values:
        raise ValidationFailure("Settings payload must be a non-empty object")

    for key in values:
        if not isinstance(key, str) or not key.strip() or len(key) > MAX_KEY_LENGTH:
            raise ValidationFailure(f"Invalid setting key: {key!r}", fields={"key": "invalid"})
        if values[key] is None:
            raise ValidationFailure(f"Setting '{key}' has no value", fields={key: "required"})

    existing = {
        s.key: s
        for s in SiteSetting.query.filter(SiteSetting.key.in_(list(values))).all()
    }

    with transactional():
        for key, raw in values.items():
            setting = existing.get(key)
            if setting is None:
                setting = SiteSetting()
                setting.key = key
                setting.group = group_for_key(key)
                setting.type = "BOOLEAN" if isinstance(raw, bool) else "TEXT"
                db.session.add(setting)
            setting.value = _coerce(raw)

        log_action(
            action="settings.update",
            entity_type="settings",
            entity_id="*",
            actor_id=actor_id,
            payload={"keys": sorted(values)},
        )

    current_app.logger.info("Updated %d site settings", len(values))
    return {key: _coerce(raw) for key, raw in values.items()}


def is_feature_enabled(name: str) -> bool:
    setting = SiteSetting.query.filter_by(key=f"{FEATURE_PREFIX}{name}").first()
    if setting is None:
        return FEATURE_DEFAULTS.get(name, False)
    return setting.as_bool()
