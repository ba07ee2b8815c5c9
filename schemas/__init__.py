from .project_schema import ProjectCreate, ProjectRead, ProjectUpdate, ProjectStats
from .task_schema import (
    TaskCreate, InitialTaskCreate, TaskRead, TaskUpdate,
    BulkCompleteRequest, BulkCompleteResult,
)
from .response_schema import ApiResponse, Pagination

__all__ = [
    # Project
    "ProjectCreate", "ProjectRead", "ProjectUpdate", "ProjectStats",

    # Task
    "TaskCreate", "InitialTaskCreate", "TaskRead", "TaskUpdate",
    "BulkCompleteRequest", "BulkCompleteResult",

    # Envelope
    "ApiResponse", "Pagination",
]
