from .section import normalize_section

def normalize_page(page, sections=None):
    data = {
        "id": page.id,
        "title_hi": page.title_hi,
        "title_en": page.title_en,
        "slug": page.slug,
        "seo_title": page.seo_title,
        "seo_desc": page.seo_desc,
        "is_published": page.is_published,
        "typography": page.typography or {},
        "template": page.template,
        "created_at": page.created_at.isoformat() if page.created_at else None,
        "updated_at": page.updated_at.isoformat() if page.updated_at else None,
    }

    if sections is not None:
        data["sections"] = [normalize_section(s, admin=True) for s in sections]

    return data
