from typing import Any, Dict, Optional
from portfolio.extensions import db
from portfolio.models.project import Project
from portfolio.normalizers.project import normalize_project
from portfolio.schemas.project import ProjectForm
from portfolio.utils.cache import PROJECTS_KEY, invalidate
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def save_project(*, data: Dict[str, Any], project_id: Optional[str] = None) -> Project:
    """Create or update a project; tags may arrive comma-separated."""
    project = get_or_404(Project, project_id, "Project") if project_id else None
    base = normalize_project(project) if project else {}

    form = ProjectForm.model_validate({**base, **data})

    with mutation("project.save"):
        if project is None:
            project = Project()
            db.session.add(project)
        for field, value in form.to_row().items():
            setattr(project, field, value)
        db.session.flush()

    invalidate(PROJECTS_KEY)
    return project


def delete_project(*, project_id: str) -> None:
    project = get_or_404(Project, project_id, "Project")

    with mutation("project.delete"):
        db.session.delete(project)

    invalidate(PROJECTS_KEY)
