"""
Workout plan database model.

A plan is the *recurring intent* of a trainer: ``schedule_data`` maps a
weekday name (``"Monday"`` .. ``"Sunday"``) to a template id or ``None``.
It is distinct from the materialized :class:`TrainingSession` rows.
Entries are stored as written; readers must tolerate malformed values.
"""

import datetime
import enum
import uuid
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from coachweek.models.columns import enum_column


class PlanStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ScheduleType(str, enum.Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class WorkoutPlan(SQLModel, table=True):
    """A client's recurring weekly training plan."""

    __tablename__ = "workout_plans"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    client_id: uuid.UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    trainer_id: uuid.UUID = Field(foreign_key="profiles.id", nullable=False)

    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)

    # Open-ended on either side when None
    start_date: Optional[datetime.date] = Field(default=None)
    end_date: Optional[datetime.date] = Field(default=None)

    schedule_type: ScheduleType = Field(default=ScheduleType.WEEKLY, sa_column=enum_column(ScheduleType, "schedule_type"))
    status: PlanStatus = Field(default=PlanStatus.DRAFT, sa_column=enum_column(PlanStatus, "plan_status", index=True))

    schedule_data: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    def covers(self, day: datetime.date) -> bool:
        """Return True if ``day`` falls inside the plan's date range."""
        if self.start_date is not None and day < self.start_date:
            return False
        if self.end_date is not None and day > self.end_date:
            return False
        return True
