"""
Training session API schemas.
"""

import datetime
import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field

from coachweek.models.training_session import SessionStatus

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


class TrainingSessionCreate(BaseModel):
    """Schema for assigning a training session to a client."""

    client_id: uuid.UUID
    trainer_id: uuid.UUID
    scheduled_date: datetime.date
    scheduled_time: Optional[str] = Field(None, pattern=_TIME_PATTERN, description="HH:MM, local time")
    template_id: Optional[uuid.UUID] = Field(None, description="Workout template; omit for freeform sessions")
    plan_id: Optional[uuid.UUID] = None
    duration_minutes: Optional[int] = Field(None, ge=0, le=600)
    session_type: str = Field("personal_training", max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = Field(None, max_length=1000)


class TrainingSessionComplete(BaseModel):
    """Schema for the completion flow."""

    duration_minutes: Optional[int] = Field(None, ge=0, le=600)
    session_rating: Optional[int] = Field(None, ge=1, le=5)
    trainer_notes: Optional[str] = Field(None, max_length=1000)
    exercises_completed: list[dict[str, Any]] = Field(default_factory=list)


class TrainingSessionResponse(BaseModel):
    """Schema for training session in API responses."""

    id: uuid.UUID
    client_id: uuid.UUID
    trainer_id: uuid.UUID
    template_id: Optional[uuid.UUID]
    plan_id: Optional[uuid.UUID]
    scheduled_date: datetime.date
    scheduled_time: Optional[str]
    status: SessionStatus
    duration_minutes: Optional[int]
    session_type: str
    location: Optional[str]
    notes: Optional[str]
    trainer_notes: Optional[str]
    session_rating: Optional[int]
    completion_data: dict[str, Any]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class SweepResult(BaseModel):
    """Outcome of one stale-session sweep."""

    client_id: uuid.UUID
    today: datetime.date
    candidates: int = 0
    updated: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
