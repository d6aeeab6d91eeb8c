def normalize_project(project, admin=False):
    data = {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "image_url": project.image_url,
        "tags": list(project.tags or []),
        "link": project.link,
        "created_at": project.created_at.isoformat() if project.created_at else None,
    }

    if admin:
        data["updated_at"] = project.updated_at.isoformat() if project.updated_at else None

    return data
