"""
Workout template database models.

A template is a reusable named exercise sequence.  ``sets_config`` is
kept as raw JSON; older rows hold it as an encoded string, so it is
always read through :func:`coachweek.utils.parsing.parse_sets_config`.
"""

import datetime
import uuid
from typing import Any, List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, Relationship, SQLModel


class WorkoutTemplate(SQLModel, table=True):
    """A reusable workout made of ordered exercises."""

    __tablename__ = "workout_templates"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    category: str = Field(default="strength", max_length=50)
    estimated_duration_minutes: Optional[int] = Field(default=None, ge=0)

    created_by: Optional[uuid.UUID] = Field(default=None, foreign_key="profiles.id")
    is_public: bool = Field(default=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    exercises: List["TemplateExercise"] = Relationship(
        back_populates="template",
        sa_relationship_kwargs={"order_by": "TemplateExercise.order_index", "cascade": "all, delete-orphan"},
    )


class TemplateExercise(SQLModel, table=True):
    """One exercise slot inside a :class:`WorkoutTemplate`."""

    __tablename__ = "template_exercises"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    template_id: uuid.UUID = Field(foreign_key="workout_templates.id", nullable=False, index=True)
    exercise_name: str = Field(nullable=False, max_length=255)
    order_index: int = Field(default=0, nullable=False)
    section_title: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=1000)

    sets_config: Any = Field(default=None, sa_column=Column(JSON, nullable=True))

    template: Optional[WorkoutTemplate] = Relationship(back_populates="exercises")
