# response_schema.py
from pydantic import BaseModel
from typing import Any, Generic, Optional, TypeVar

DataT = TypeVar("DataT")


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope every endpoint answers with: { success, data?, message?, error?, pagination? }"""
    success: bool = True
    data: Optional[DataT] = None
    message: Optional[str] = None
    error: Optional[Any] = None  # message string, or the list of field errors on validation failures
    pagination: Optional[Pagination] = None
