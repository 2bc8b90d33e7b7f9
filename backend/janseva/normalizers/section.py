def normalize_section(section, admin=False):
    data = {
        "id": section.id,
        "page_id": section.page_id,
        "type": section.type,
        "order": section.order,
        "is_visible": section.is_visible,
        "content": section.content or {},
    }

    if admin:
        data["created_at"] = section.created_at.isoformat() if section.created_at else None
        data["updated_at"] = section.updated_at.isoformat() if section.updated_at else None

    return data
