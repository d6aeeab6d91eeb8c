from .content import normalize_content


def normalize_section(section, admin=False, fields=None):
    data = {
        "id": section.id,
        "section_name": section.section_name,
        "page": section.page,
        "layout_type": section.layout_type,
        "display_order": section.display_order,
        "is_visible": section.is_visible,
        "background_color": section.background_color,
        "background_image": section.background_image,
    }

    if admin:
        data["created_at"] = section.created_at.isoformat() if section.created_at else None
        data["updated_at"] = section.updated_at.isoformat() if section.updated_at else None

    if fields is not None:
        data["fields"] = [normalize_content(f, admin=admin) for f in fields]

    return data
