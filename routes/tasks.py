# routes/tasks.py
# Mounted under /api/projects/{project_id}/tasks
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from core.database import get_session
from schemas.task_schema import (
    TaskCreate,
    TaskUpdate,
    TaskRead,
    BulkCompleteRequest,
    BulkCompleteResult,
)
from schemas.response_schema import ApiResponse
from services import task_service

router = APIRouter(tags=["Tasks"])


# ================================================================
#  ✅ Get All Tasks of a Project
# ================================================================
@router.get("", response_model=ApiResponse[List[TaskRead]], response_model_exclude_none=True)
def get_tasks(project_id: int, session: Session = Depends(get_session)):
    tasks = task_service.list_tasks(session, project_id)
    return ApiResponse(data=[TaskRead.model_validate(task) for task in tasks])


# ================================================================
#  ✅ Get Overdue Tasks of a Project
# ================================================================
@router.get("/overdue", response_model=ApiResponse[List[TaskRead]], response_model_exclude_none=True)
def get_overdue_tasks(project_id: int, session: Session = Depends(get_session)):
    tasks = task_service.list_overdue_tasks(session, project_id)
    return ApiResponse(data=[TaskRead.model_validate(task) for task in tasks])


# ================================================================
#  ✅ Create New Task
# ================================================================
@router.post(
    "",
    response_model=ApiResponse[TaskRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_task(project_id: int, payload: TaskCreate, session: Session = Depends(get_session)):
    task = task_service.create_task(session, project_id, payload)
    return ApiResponse(data=TaskRead.model_validate(task), message="Task created successfully")


# ================================================================
#  ✅ Bulk Complete Tasks
# ================================================================
# Declared before /{task_id} so "complete" is never read as a task id
@router.patch("/complete", response_model=ApiResponse[BulkCompleteResult], response_model_exclude_none=True)
def complete_tasks(project_id: int, payload: BulkCompleteRequest, session: Session = Depends(get_session)):
    count = task_service.complete_tasks(session, project_id, payload.task_ids)
    return ApiResponse(
        data=BulkCompleteResult(count=count),
        message=f"{count} task(s) marked as completed",
    )


# ================================================================
#  ✅ Get Single Task
# ================================================================
@router.get("/{task_id}", response_model=ApiResponse[TaskRead], response_model_exclude_none=True)
def get_task(project_id: int, task_id: int, session: Session = Depends(get_session)):
    task = task_service.get_task(session, project_id, task_id)
    return ApiResponse(data=TaskRead.model_validate(task))


# ================================================================
#   ✅ Update Task (partial, PATCH or PUT)
# ================================================================
@router.api_route(
    "/{task_id}",
    methods=["PATCH", "PUT"],
    response_model=ApiResponse[TaskRead],
    response_model_exclude_none=True,
)
def update_task(
    project_id: int,
    task_id: int,
    payload: TaskUpdate,
    session: Session = Depends(get_session),
):
    task = task_service.update_task(session, project_id, task_id, payload)
    return ApiResponse(data=TaskRead.model_validate(task), message="Task updated successfully")


# ================================================================
#   ✅ Toggle Task Completion
# ================================================================
@router.patch("/{task_id}/complete", response_model=ApiResponse[TaskRead], response_model_exclude_none=True)
def toggle_task_completion(project_id: int, task_id: int, session: Session = Depends(get_session)):
    task = task_service.toggle_task_completion(session, project_id, task_id)
    return ApiResponse(
        data=TaskRead.model_validate(task),
        message=f"Task marked as {'completed' if task.is_completed else 'pending'}",
    )


# ================================================================
#   ✅ Delete Task
# ================================================================
@router.delete("/{task_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_task(project_id: int, task_id: int, session: Session = Depends(get_session)):
    task_service.delete_task(session, project_id, task_id)
    return ApiResponse(message="Task deleted successfully")
