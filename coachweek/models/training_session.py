"""
Training session database model.

A training session is one calendar-dated workout assignment for a
client.  ``status`` follows a small lifecycle::

    scheduled ──► completed
        │
        ├──────► cancelled
        └──────► no_show     (stale-session sweep only)

Rows are never hard-deleted by the scheduling core.
"""

import datetime
import enum
import uuid
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from coachweek.models.columns import enum_column


class SessionStatus(str, enum.Enum):
    """Lifecycle status of a :class:`TrainingSession`."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    NO_SHOW = "no_show"
    CANCELLED = "cancelled"


MISSED_STATUSES = (SessionStatus.NO_SHOW, SessionStatus.CANCELLED)


class TrainingSession(SQLModel, table=True):
    """A single training session assigned to a client."""

    __tablename__ = "training_sessions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    client_id: uuid.UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    trainer_id: uuid.UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    template_id: Optional[uuid.UUID] = Field(default=None, foreign_key="workout_templates.id")
    plan_id: Optional[uuid.UUID] = Field(default=None, foreign_key="workout_plans.id")

    scheduled_date: datetime.date = Field(nullable=False, index=True)
    scheduled_time: Optional[str] = Field(default=None, max_length=8)

    status: SessionStatus = Field(default=SessionStatus.SCHEDULED, sa_column=enum_column(SessionStatus, "session_status", index=True))

    # Descriptive, not used by the day classification
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    session_type: str = Field(default="personal_training", max_length=50)
    location: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Filled in by the completion flow
    trainer_notes: Optional[str] = Field(default=None, max_length=1000)
    session_rating: Optional[int] = Field(default=None, ge=1, le=5)
    completion_data: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
