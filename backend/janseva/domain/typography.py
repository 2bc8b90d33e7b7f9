from dataclasses import dataclass
from typing import Dict, Tuple

SETTING_PREFIX = "typo_"


@dataclass(frozen=True)
class TypographyKey:
    override_key: str   # key inside Page.typography
    setting_key: str    # SiteSetting.key
    default: str
    css_var: str
    unit: str = ""


TYPOGRAPHY_KEYS: Tuple[TypographyKey, ...] = (
    TypographyKey("baseSize", "typo_site_base_size", "16", "--site-base-size", "px"),
    TypographyKey("bodyWeight", "typo_site_body_weight", "400", "--site-body-weight"),
    TypographyKey("navSize", "typo_header_nav_size", "14", "--site-nav-size", "px"),
    TypographyKey("navWeight", "typo_header_nav_weight", "500", "--site-nav-weight"),
    TypographyKey("footerTitleSize", "typo_footer_title_size", "18", "--site-footer-title-size", "px"),
    TypographyKey("footerBodySize", "typo_footer_body_size", "14", "--site-footer-body-size", "px"),
    TypographyKey("heroTitleSize", "typo_hero_title_size", "48", "--site-hero-title-size", "px"),
    TypographyKey("heroDescSize", "typo_hero_desc_size", "18", "--site-hero-desc-size", "px"),
)

OVERRIDE_KEYS = frozenset(k.override_key for k in TYPOGRAPHY_KEYS)

DEFAULT_TYPOGRAPHY: Dict[str, str] = {k.override_key: k.default for k in TYPOGRAPHY_KEYS}
