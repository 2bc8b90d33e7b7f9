import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

BLANK_TEMPLATE_ID = "blank"


@dataclass(frozen=True)
class SectionBlueprint:
    type: str
    content: Dict[str, Any] = field(default_factory=dict)

    def instantiate_content(self) -> Dict[str, Any]:
        # Pages get their own copy; the catalog is never mutated.
        return copy.deepcopy(self.content)


@dataclass(frozen=True)
class TemplateBlueprint:
    id: str
    name: str
    description: str
    sections: Tuple[SectionBlueprint, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "sections": [s.type for s in self.sections],
        }


TEMPLATES: Tuple[TemplateBlueprint, ...] = (
    TemplateBlueprint(
        id=BLANK_TEMPLATE_ID,
        name="Blank Page",
        description="Start with a completely empty page.",
    ),
    TemplateBlueprint(
        id="article",
        name="Simple Article",
        description="Standard layout for policy pages, terms, or simple text articles.",
        sections=(
            SectionBlueprint("HERO", {
                "titleHi": "शीर्षक यहाँ",
                "titleEn": "Title Here",
                "descriptionHi": "विवरण यहाँ लिखें",
                "descriptionEn": "Write description here",
            }),
            SectionBlueprint("RICHTEXT", {
                "htmlHi": "<p>अपनी सामग्री यहाँ लिखना शुरू करें...</p>",
                "htmlEn": "<p>Start writing your content here...</p>",
            }),
        ),
    ),
    TemplateBlueprint(
        id="biography",
        name="Biography / Profile",
        description="Premium profile layout with biography, stats, and achievements.",
        sections=(
            SectionBlueprint("BIOGRAPHY", {
                "titleHi": "मेरे बारे में",
                "titleEn": "About Me",
                "imageUrl": "/images/hero-bg.jpg",
                "contentHi": "यहाँ अपनी जीवनी लिखें...",
                "contentEn": "Write your biography here...",
            }),
            SectionBlueprint("STATS", {
                "titleHi": "प्रमुख आंकड़े",
                "titleEn": "Key Statistics",
                "stats": [
                    {"value": "25+", "labelHi": "वर्षों का अनुभव", "labelEn": "Years Experience"},
                    {"value": "1M+", "labelHi": "सेवा प्राप्त लोग", "labelEn": "People Served"},
                ],
            }),
        ),
    ),
    TemplateBlueprint(
        id="media",
        name="Media & Events",
        description="Showcase videos and news alerts.",
        sections=(
            SectionBlueprint("HERO", {
                "titleHi": "मीडिया और समाचार",
                "titleEn": "Media & News",
            }),
            SectionBlueprint("VIDEOS", {
                "titleHi": "नवीनतम वीडियो",
                "titleEn": "Latest Videos",
                "count": 6,
            }),
            SectionBlueprint("RICHTEXT", {
                "htmlHi": "<h3>प्रेस विज्ञप्ति</h3>",
                "htmlEn": "<h3>Press Releases</h3>",
            }),
        ),
    ),
)

_TEMPLATES_BY_ID: Dict[str, TemplateBlueprint] = {t.id: t for t in TEMPLATES}


def list_templates() -> List[TemplateBlueprint]:
    return list(TEMPLATES)


def get_template(template_id: Optional[str]) -> Optional[TemplateBlueprint]:
    if not template_id:
        return None
    return _TEMPLATES_BY_ID.get(template_id)


def resolve_template(template_id: Optional[str]) -> TemplateBlueprint:
    """Unknown or missing ids fall back to the blank blueprint."""
    return get_template(template_id) or _TEMPLATES_BY_ID[BLANK_TEMPLATE_ID]
