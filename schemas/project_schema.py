# project_schema.py
from pydantic import BaseModel, Field, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from core.date_utils import to_naive_utc, to_utc_iso
from schemas.task_schema import InitialTaskCreate, TaskRead, camel_config


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=191)
    description: str = Field(..., min_length=1, max_length=1000)
    start_date: datetime
    tasks: List[InitialTaskCreate] = Field(default_factory=list)

    model_config = camel_config

    @field_validator("start_date")
    @classmethod
    def normalise_start_date(cls, value):
        return to_naive_utc(value)

    @field_validator("tasks", mode="before")
    @classmethod
    def validate_tasks(cls, v):
        if v is None:
            return []
        return v


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=191)
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    start_date: Optional[datetime] = None

    model_config = camel_config

    @field_validator("start_date")
    @classmethod
    def normalise_start_date(cls, value):
        return to_naive_utc(value)


class ProjectRead(BaseModel):
    id: int
    name: str
    description: str
    start_date: datetime
    created_at: datetime
    updated_at: datetime
    tasks: List[TaskRead] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_validator("start_date", "created_at", "updated_at")
    @classmethod
    def normalise_dates(cls, value):
        return to_naive_utc(value)

    @field_serializer("start_date", "created_at", "updated_at", when_used="json")
    def serialize_utc(self, value: datetime) -> str:
        return to_utc_iso(value)


class ProjectStats(BaseModel):
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_percentage: int

    model_config = camel_config
