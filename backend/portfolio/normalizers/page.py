from .section import normalize_section


def _ts(value):
    return value.isoformat() if value else None


def normalize_page(page, admin=False, sections=None):
    data = {
        "id": page.id,
        "page_name": page.page_name,
        "page_link": page.page_link,
        "display_order": page.display_order,
        "is_visible": page.is_visible,
        "include_in_navigation": page.include_in_navigation,
        "is_system_page": page.is_system_page,
    }

    if admin:
        data["created_at"] = _ts(page.created_at)
        data["updated_at"] = _ts(page.updated_at)

    if sections is not None:
        data["sections"] = [normalize_section(s, admin=admin) for s in sections]

    return data
