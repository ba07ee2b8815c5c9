# services/task_service.py
import logging
from datetime import datetime
from typing import List

from sqlmodel import Session, select, col
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import ProjectNotFoundError, TaskNotFoundError, TaskNotInProjectError
from models.models import Project, Task
from schemas.task_schema import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


# ================================================================
#  ✅ Validation chain: project exists → task exists → task in project
# ================================================================
def _require_project(session: Session, project_id: int) -> Project:
    project = session.get(Project, project_id)
    if not project:
        raise ProjectNotFoundError()
    return project


def validate_task_in_project(session: Session, project_id: int, task_id: int) -> Task:
    """
    Run the checks every task-scoped operation needs, in order, stopping at the
    first failure:

    1. the project exists, else ProjectNotFoundError
    2. the task exists, else TaskNotFoundError
    3. the task's project_id matches, else TaskNotInProjectError

    Returns the task when all three pass.
    """
    _require_project(session, project_id)

    task = session.get(Task, task_id)
    if not task:
        raise TaskNotFoundError()

    if task.project_id != project_id:
        raise TaskNotInProjectError()

    return task


def _commit(session: Session, action: str) -> None:
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"❌ Database error while {action}: {e}")
        raise


# ================================================================
#  ✅ Queries
# ================================================================
def list_tasks(session: Session, project_id: int) -> List[Task]:
    _require_project(session, project_id)
    return session.exec(
        select(Task)
        .where(Task.project_id == project_id)
        .order_by(col(Task.created_at).desc(), col(Task.id).desc())
    ).all()


def get_task(session: Session, project_id: int, task_id: int) -> Task:
    return validate_task_in_project(session, project_id, task_id)


def list_overdue_tasks(session: Session, project_id: int) -> List[Task]:
    """Incomplete tasks whose due date has passed, most overdue first."""
    _require_project(session, project_id)
    return session.exec(
        select(Task)
        .where(
            Task.project_id == project_id,
            Task.is_completed == False,  # noqa: E712
            Task.due_date < datetime.utcnow(),
        )
        .order_by(col(Task.due_date).asc())
    ).all()


# ================================================================
#  ✅ Mutations
# ================================================================
def create_task(session: Session, project_id: int, data: TaskCreate) -> Task:
    _require_project(session, project_id)

    task = Task(
        project_id=project_id,
        title=data.title,
        description=data.description,
        due_date=data.due_date,
        is_completed=False,
    )
    session.add(task)
    _commit(session, "creating task")
    session.refresh(task)
    logger.info(f"✅ Task {task.id} created in project {project_id}")
    return task


def update_task(session: Session, project_id: int, task_id: int, data: TaskUpdate) -> Task:
    task = validate_task_in_project(session, project_id, task_id)

    # Only fields the caller sent; explicit nulls leave the stored value alone
    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(task, key, value)

    session.add(task)
    _commit(session, "updating task")
    session.refresh(task)
    return task


def toggle_task_completion(session: Session, project_id: int, task_id: int) -> Task:
    task = validate_task_in_project(session, project_id, task_id)

    task.is_completed = not task.is_completed
    session.add(task)
    _commit(session, "toggling task completion")
    session.refresh(task)
    logger.info(f"✅ Task {task_id} marked as {'completed' if task.is_completed else 'pending'}")
    return task


def delete_task(session: Session, project_id: int, task_id: int) -> None:
    task = validate_task_in_project(session, project_id, task_id)

    session.delete(task)
    _commit(session, "deleting task")
    logger.info(f"🗑️ Task {task_id} deleted from project {project_id}")


def complete_tasks(session: Session, project_id: int, task_ids: List[int]) -> int:
    """Mark several tasks as completed; ids outside the project are ignored."""
    _require_project(session, project_id)

    tasks = session.exec(
        select(Task).where(col(Task.id).in_(task_ids), Task.project_id == project_id)
    ).all()
    for task in tasks:
        task.is_completed = True
        session.add(task)

    _commit(session, "completing tasks")
    logger.info(f"✅ {len(tasks)} task(s) completed in project {project_id}")
    return len(tasks)
