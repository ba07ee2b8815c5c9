# task_schema.py
from pydantic import BaseModel, Field, ConfigDict, computed_field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from core.date_utils import to_naive_utc, to_utc_iso, days_until, due_priority

# camelCase on the wire, snake_case in Python
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=191)
    description: str = Field(..., min_length=1, max_length=1000)
    due_date: datetime
    # project_id comes from the path

    model_config = camel_config

    @field_validator("due_date")
    @classmethod
    def normalise_due_date(cls, value):
        return to_naive_utc(value)


class InitialTaskCreate(TaskCreate):
    """Task supplied inline when a project is created."""
    is_completed: bool = False


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=191)
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    due_date: Optional[datetime] = None
    is_completed: Optional[bool] = None

    model_config = camel_config

    @field_validator("due_date")
    @classmethod
    def normalise_due_date(cls, value):
        return to_naive_utc(value)


class TaskRead(BaseModel):
    id: int
    project_id: int
    title: str
    description: str
    due_date: datetime
    is_completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def normalise_dates(cls, value):
        return to_naive_utc(value)

    @field_serializer("due_date", "created_at", "updated_at", when_used="json")
    def serialize_utc(self, value: datetime) -> str:
        return to_utc_iso(value)

    @computed_field(alias="isOverdue")
    @property
    def is_overdue(self) -> bool:
        return not self.is_completed and self.due_date < datetime.utcnow()

    @computed_field(alias="daysUntilDue")
    @property
    def days_until_due(self) -> int:
        return days_until(self.due_date)

    @computed_field
    @property
    def priority(self) -> str:
        return due_priority(self.due_date)


# Bulk completion
class BulkCompleteRequest(BaseModel):
    task_ids: List[int] = Field(..., min_length=1)

    model_config = camel_config


class BulkCompleteResult(BaseModel):
    count: int
