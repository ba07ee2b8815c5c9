# models/models.py
# Timestamps are naive UTC (plain DATETIME columns, as MySQL stores them)
from typing import Optional, List
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime


# ============================================================
# PROJECT
# ============================================================
class Project(SQLModel, table=True):
    __tablename__ = "project"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=191, index=True)
    description: str = Field(max_length=1000)
    start_date: datetime = Field(sa_type=DateTime)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_type=DateTime,
        sa_column_kwargs={"onupdate": datetime.utcnow},
    )

    # Tasks go with the project (ORM cascade + ON DELETE CASCADE on the FK)
    tasks: List["Task"] = Relationship(
        back_populates="project",
        cascade_delete=True,
        sa_relationship_kwargs={"order_by": lambda: [Task.created_at.desc(), Task.id.desc()]},
    )


# ============================================================
# TASK
# ============================================================
class Task(SQLModel, table=True):
    __tablename__ = "task"
    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="project.id", ondelete="CASCADE", index=True)
    title: str = Field(max_length=191)
    description: str = Field(max_length=1000)
    due_date: datetime = Field(sa_type=DateTime)
    is_completed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_type=DateTime,
        sa_column_kwargs={"onupdate": datetime.utcnow},
    )

    project: Optional["Project"] = Relationship(back_populates="tasks")
