from typing import Any, Optional

from flask import current_app, has_app_context

from janseva.domain.errors import ValidationFailure

SUPPORTED_LOCALES = ("hi", "en")
DEFAULT_LOCALE = "hi"


def normalize_locale(locale: Optional[str]) -> str:
    if not locale:
        if has_app_context():
            return current_app.config.get("DEFAULT_LOCALE", DEFAULT_LOCALE)
        return DEFAULT_LOCALE

    locale = locale.strip().lower()
    if locale not in SUPPORTED_LOCALES:
        raise ValidationFailure(f"Unsupported locale: {locale}", fields={"locale": "use 'hi' or 'en'"})
    return locale


def _value(source: Any, name: str) -> Any:
    if isinstance(source, dict):
        return source.get(name)
    return getattr(source, name, None)


def pick(source: Any, field: str, locale: str) -> Optional[str]:
    """
    Select `<field>_hi` or `<field>_en` for the locale.

    English falls back to Hindi when the English value is empty or absent.
    """
    hindi = _value(source, f"{field}_hi")
    if locale == "en":
        english = _value(source, f"{field}_en")
        if english:
            return english
    return hindi or None
