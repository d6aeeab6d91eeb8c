from portfolio.domain.content import get_field_input_type, get_input_type_label


def normalize_content(field, admin=False):
    data = {
        "id": field.id,
        "section": field.section,
        "content_type": field.content_type,
        "content": field.content,
        "field_type": field.field_type,
        "display_order": field.display_order,
        "is_visible": field.is_visible,
        "include_in_global_search": field.include_in_global_search,
    }

    if admin:
        field_type = field.field_type or field.content_type
        data["input_type"] = get_field_input_type(field_type)
        data["input_type_label"] = get_input_type_label(field_type)
        data["created_at"] = field.created_at.isoformat() if field.created_at else None
        data["updated_at"] = field.updated_at.isoformat() if field.updated_at else None

    return data
