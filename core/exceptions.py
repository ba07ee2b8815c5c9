# core/exceptions.py
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP status and an envelope message."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ProjectNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Project not found"


class TaskNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Task not found"


class TaskNotInProjectError(AppError):
    # The task exists, just under another project.
    status_code = status.HTTP_403_FORBIDDEN
    message = "Task does not belong to this project"
