"""
Typed section content.

Each recognized section type owns one pydantic model describing its
``content`` payload. Stored JSON keeps the camelCase, bilingual
(``xxxHi`` / ``xxxEn``) shape the front end consumes, so models are
aliased with ``to_camel`` and dumped ``by_alias``.
"""
from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ValidationFailure


class SectionContent(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    section_type: ClassVar[str] = ""


class TitledContent(SectionContent):
    title_hi: Optional[str] = None
    title_en: Optional[str] = None


class FeedContent(TitledContent):
    """Sections that list records owned by other parts of the site."""
    subtitle_hi: Optional[str] = None
    subtitle_en: Optional[str] = None
    count: int = Field(default=6, ge=1, le=50)


class StatItem(SectionContent):
    value: str
    label_hi: str = ""
    label_en: str = ""
    icon: Optional[str] = None


class FAQItem(SectionContent):
    question_hi: str = ""
    question_en: str = ""
    answer_hi: str = ""
    answer_en: str = ""


class HeroContent(TitledContent):
    section_type: ClassVar[str] = "HERO"

    description_hi: Optional[str] = None
    description_en: Optional[str] = None
    image_url: Optional[str] = None


class RichTextContent(SectionContent):
    section_type: ClassVar[str] = "RICHTEXT"

    html_hi: str = ""
    html_en: str = ""


class BiographyContent(TitledContent):
    section_type: ClassVar[str] = "BIOGRAPHY"

    content_hi: str = ""
    content_en: str = ""
    image_url: Optional[str] = None
    stats: List[StatItem] = Field(default_factory=list)


class StatsContent(TitledContent):
    section_type: ClassVar[str] = "STATS"

    stats: List[StatItem] = Field(default_factory=list)
    columns: int = Field(default=4, ge=1, le=4)


class VideosContent(FeedContent):
    section_type: ClassVar[str] = "VIDEOS"

    count: int = Field(default=4, ge=1, le=50)


class TimelineContent(FeedContent):
    section_type: ClassVar[str] = "TIMELINE"


class GalleryContent(FeedContent):
    section_type: ClassVar[str] = "GALLERY"


class TestimonialsContent(FeedContent):
    section_type: ClassVar[str] = "TESTIMONIALS"


class NewsletterContent(TitledContent):
    section_type: ClassVar[str] = "NEWSLETTER"

    description_hi: Optional[str] = None
    description_en: Optional[str] = None
    placeholder_hi: Optional[str] = None
    placeholder_en: Optional[str] = None
    button_text_hi: Optional[str] = None
    button_text_en: Optional[str] = None


class FAQContent(TitledContent):
    section_type: ClassVar[str] = "FAQ"

    items: List[FAQItem] = Field(default_factory=list)


SECTION_CONTENT_MODELS: Dict[str, Type[SectionContent]] = {
    model.section_type: model
    for model in (
        HeroContent,
        RichTextContent,
        BiographyContent,
        StatsContent,
        VideosContent,
        TimelineContent,
        GalleryContent,
        TestimonialsContent,
        NewsletterContent,
        FAQContent,
    )
}

SECTION_TYPES = tuple(SECTION_CONTENT_MODELS)

# Placeholder content for sections added one at a time from the editor.
DEFAULT_SECTION_CONTENT: Dict[str, Dict[str, Any]] = {
    "HERO": {"titleHi": "नया हीरो", "titleEn": "New Hero", "imageUrl": ""},
    "RICHTEXT": {"htmlHi": "<p>सामग्री...</p>", "htmlEn": "<p>Content...</p>"},
    "BIOGRAPHY": {
        "titleHi": "मेरे बारे में",
        "titleEn": "About Me",
        "contentHi": "यहाँ अपनी जीवनी लिखें...",
        "contentEn": "Write your biography here...",
    },
    "STATS": {"titleHi": "प्रमुख आंकड़े", "titleEn": "Key Statistics", "stats": []},
    "VIDEOS": {"titleHi": "नवीनतम वीडियो", "titleEn": "Latest Videos", "count": 4},
    "TIMELINE": {"titleHi": "जीवन यात्रा", "titleEn": "Journey", "count": 6},
    "GALLERY": {"titleHi": "फोटो गैलरी", "titleEn": "Photo Gallery", "count": 6},
    "TESTIMONIALS": {"titleHi": "जनता की राय", "titleEn": "Testimonials", "count": 6},
    "NEWSLETTER": {
        "titleHi": "समाचार पत्र",
        "titleEn": "Newsletter",
        "buttonTextHi": "सदस्यता लें",
        "buttonTextEn": "Subscribe",
    },
    "FAQ": {"titleHi": "अक्सर पूछे जाने वाले प्रश्न", "titleEn": "FAQ", "items": []},
}


def normalize_section_type(section_type: Any) -> str:
    if not isinstance(section_type, str) or not section_type.strip():
        raise ValidationFailure("Section type is required", fields={"type": "required"})

    normalized = section_type.strip().upper()
    if normalized not in SECTION_CONTENT_MODELS:
        raise ValidationFailure(
            f"Unknown section type: {section_type}",
            fields={"type": "unknown"},
        )
    return normalized


def parse_section_content(section_type: str, raw: Optional[Dict[str, Any]]) -> SectionContent:
    """
    Validate a raw content payload against the schema of its type.

    Raises ValidationFailure for unknown types and malformed payloads.
    """
    model = SECTION_CONTENT_MODELS.get(section_type)
    if model is None:
        raise ValidationFailure(f"Unknown section type: {section_type}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValidationFailure("Section content must be an object", fields={"content": "invalid"})

    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        fields = {
            ".".join(str(part) for part in err["loc"]): err["msg"]
            for err in exc.errors()
        }
        raise ValidationFailure(
            f"Invalid content for {section_type} section",
            fields=fields,
        ) from exc


def dump_section_content(content: SectionContent) -> Dict[str, Any]:
    return content.model_dump(by_alias=True, exclude_none=True)


def default_section_content(section_type: str) -> Dict[str, Any]:
    section_type = normalize_section_type(section_type)
    parsed = parse_section_content(section_type, DEFAULT_SECTION_CONTENT[section_type])
    return dump_section_content(parsed)
