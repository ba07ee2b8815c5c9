# services/project_service.py
import logging
import math
from typing import List, Optional, Tuple

from sqlmodel import Session, select, func, or_, col
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from core.exceptions import ProjectNotFoundError
from models.models import Project, Task
from schemas.project_schema import ProjectCreate, ProjectUpdate, ProjectStats

logger = logging.getLogger(__name__)


def list_projects(
    session: Session,
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = None,
) -> Tuple[List[Project], int]:
    """
    One page of projects, newest first, plus the total number of matches.
    `search` is matched against name and description.
    """
    filters = []
    if search:
        filters.append(
            or_(
                col(Project.name).contains(search, autoescape=True),
                col(Project.description).contains(search, autoescape=True),
            )
        )

    total = session.exec(select(func.count()).select_from(Project).where(*filters)).one()
    projects = session.exec(
        select(Project)
        .options(selectinload(Project.tasks))
        .where(*filters)
        .order_by(col(Project.created_at).desc(), col(Project.id).desc())
        .offset((page - 1) * limit)
        .limit(limit)
    ).all()
    return projects, total


def get_project(session: Session, project_id: int) -> Project:
    project = session.get(Project, project_id)
    if not project:
        raise ProjectNotFoundError()
    return project


def create_project(session: Session, data: ProjectCreate) -> Project:
    """
    Insert the project and any initial tasks in a single transaction, so a
    failing task never leaves an orphaned project behind.
    """
    project = Project(
        name=data.name,
        description=data.description,
        start_date=data.start_date,
        tasks=[
            Task(
                title=task.title,
                description=task.description,
                due_date=task.due_date,
                is_completed=task.is_completed,
            )
            for task in data.tasks
        ],
    )
    try:
        session.add(project)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"❌ Database error while creating project: {e}")
        raise

    session.refresh(project)
    logger.info(f"✅ Project {project.id} created with {len(data.tasks)} task(s)")
    return project


def update_project(session: Session, project_id: int, data: ProjectUpdate) -> Project:
    project = get_project(session, project_id)

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(project, key, value)

    try:
        session.add(project)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"❌ Database error while updating project {project_id}: {e}")
        raise

    session.refresh(project)
    return project


def delete_project(session: Session, project_id: int) -> None:
    """Delete a project; its tasks are removed with it."""
    project = get_project(session, project_id)

    try:
        session.delete(project)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"❌ Database error while deleting project {project_id}: {e}")
        raise

    logger.info(f"🗑️ Project {project_id} deleted")


def get_project_stats(session: Session, project_id: int) -> ProjectStats:
    get_project(session, project_id)

    rows = session.exec(
        select(Task.is_completed, func.count(Task.id))
        .where(Task.project_id == project_id)
        .group_by(Task.is_completed)
    ).all()
    counts = {bool(is_completed): count for is_completed, count in rows}

    completed = counts.get(True, 0)
    pending = counts.get(False, 0)
    total = completed + pending
    # round half up
    percentage = math.floor(completed * 100 / total + 0.5) if total else 0

    return ProjectStats(
        total_tasks=total,
        completed_tasks=completed,
        pending_tasks=pending,
        completion_percentage=percentage,
    )
