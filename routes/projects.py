# routes/projects.py
import math
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import List, Optional

from core.config import settings
from core.database import get_session
from schemas.project_schema import ProjectCreate, ProjectRead, ProjectUpdate, ProjectStats
from schemas.response_schema import ApiResponse, Pagination
from services import project_service

router = APIRouter(tags=["Projects"])


# ==================================================================
#  ✅ Get All Projects (paginated, optional search)
# ==================================================================
@router.get("", response_model=ApiResponse[List[ProjectRead]], response_model_exclude_none=True)
def get_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = None,
    session: Session = Depends(get_session),
):
    projects, total = project_service.list_projects(session, page=page, limit=limit, search=search)
    return ApiResponse(
        data=[ProjectRead.model_validate(project) for project in projects],
        pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
    )


# ==================================================================
#  ✅ Get Single Project (with its tasks)
# ==================================================================
@router.get("/{project_id}", response_model=ApiResponse[ProjectRead], response_model_exclude_none=True)
def get_project(project_id: int, session: Session = Depends(get_session)):
    project = project_service.get_project(session, project_id)
    return ApiResponse(data=ProjectRead.model_validate(project))


# ==================================================================
#  ✅ Project Completion Stats
# ==================================================================
@router.get("/{project_id}/stats", response_model=ApiResponse[ProjectStats], response_model_exclude_none=True)
def get_project_stats(project_id: int, session: Session = Depends(get_session)):
    return ApiResponse(data=project_service.get_project_stats(session, project_id))


# ==================================================================
#  ✅ Create New Project (optionally with initial tasks)
# ==================================================================
@router.post(
    "",
    response_model=ApiResponse[ProjectRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_project(data: ProjectCreate, session: Session = Depends(get_session)):
    project = project_service.create_project(session, data)
    return ApiResponse(data=ProjectRead.model_validate(project), message="Project created successfully")


# ==================================================================
#  ✅ Update Project (partial)
# ==================================================================
@router.put("/{project_id}", response_model=ApiResponse[ProjectRead], response_model_exclude_none=True)
def update_project(project_id: int, data: ProjectUpdate, session: Session = Depends(get_session)):
    project = project_service.update_project(session, project_id, data)
    return ApiResponse(data=ProjectRead.model_validate(project), message="Project updated successfully")


# ==================================================================
#  ✅ Delete Project (tasks are deleted with it)
# ==================================================================
@router.delete("/{project_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_project(project_id: int, session: Session = Depends(get_session)):
    project_service.delete_project(session, project_id)
    return ApiResponse(message="Project deleted successfully")
