def normalize_navigation_item(item, admin=False):
    data = {
        "id": item.id,
        "label": item.label,
        "target_section": item.target_section,
        "display_order": item.display_order,
        "is_visible": item.is_visible,
        "button_type": item.button_type,
    }

    if admin:
        data["created_at"] = item.created_at.isoformat() if item.created_at else None
        data["updated_at"] = item.updated_at.isoformat() if item.updated_at else None

    return data
