"""
Presentation functions, one per section type.

Each takes validated content plus the active locale and returns a
localized view model for the front end.
"""
from typing import Any, Dict

from janseva.domain.section_types import (
    BiographyContent,
    FAQContent,
    FeedContent,
    HeroContent,
    NewsletterContent,
    RichTextContent,
    StatItem,
    StatsContent,
)
from .locale import pick


def _stat(item: StatItem, locale: str) -> Dict[str, Any]:
    return {"value": item.value, "label": pick(item, "label", locale), "icon": item.icon}


def render_hero(content: HeroContent, locale: str) -> Dict[str, Any]:
    return {
        "title": pick(content, "title", locale),
        "description": pick(content, "description", locale),
        "image_url": content.image_url or None,
    }


def render_richtext(content: RichTextContent, locale: str) -> Dict[str, Any]:
    return {"html": pick(content, "html", locale) or ""}


def render_biography(content: BiographyContent, locale: str) -> Dict[str, Any]:
    return {
        "title": pick(content, "title", locale),
        "content": pick(content, "content", locale) or "",
        "image_url": content.image_url or None,
        "stats": [_stat(s, locale) for s in content.stats],
    }


def render_stats(content: StatsContent, locale: str) -> Dict[str, Any]:
    return {
        "title": pick(content, "title", locale),
        "columns": content.columns,
        "stats": [_stat(s, locale) for s in content.stats],
    }


def render_feed(feed: str):
    """Sections backed by other site records only describe what to list."""
    def render(content: FeedContent, locale: str) -> Dict[str, Any]:
        return {
            "title": pick(content, "title", locale),
            "subtitle": pick(content, "subtitle", locale),
            "feed": feed,
            "limit": content.count,
        }
    render.__name__ = f"render_{feed}"
    return render


def render_newsletter(content: NewsletterContent, locale: str) -> Dict[str, Any]:
    return {
        "title": pick(content, "title", locale),
        "description": pick(content, "description", locale),
        "placeholder": pick(content, "placeholder", locale),
        "button_text": pick(content, "button_text", locale),
    }


def render_faq(content: FAQContent, locale: str) -> Dict[str, Any]:
    return {
        "title": pick(content, "title", locale),
        "items": [
            {
                "question": pick(item, "question", locale),
                "answer": pick(item, "answer", locale),
            }
            for item in content.items
        ],
    }
