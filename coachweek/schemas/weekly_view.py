"""
Weekly view schemas.

These are projections, never persisted.  They serialize in camelCase
(``dayName``, ``sessionId``) for the presentation layer.
"""

import datetime
import enum
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from coachweek.schemas.workout_template import TemplateSummary


class DayState(str, enum.Enum):
    REST = "rest"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    MISSED = "missed"


class WeekDayView(BaseModel):
    """One day of a client's training week."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    day_name: str = Field(..., description="Single-letter weekday label, M..S")
    day_number: int = Field(..., ge=1, le=31)
    date: datetime.date
    template: Optional[TemplateSummary] = None
    completed: bool = False
    missed: bool = False
    session_id: Optional[uuid.UUID] = None
    scheduled_time: Optional[str] = None

    @model_validator(mode="after")
    def _completed_xor_missed(self) -> "WeekDayView":
        if self.completed and self.missed:
            raise ValueError("a day cannot be both completed and missed")
        return self

    @computed_field
    @property
    def state(self) -> DayState:
        if self.completed:
            return DayState.COMPLETED
        if self.missed:
            return DayState.MISSED
        if self.template is not None or self.session_id is not None:
            return DayState.SCHEDULED
        return DayState.REST


class WeeklySummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = 0
    completed: int = 0
    missed: int = 0
    scheduled: int = 0


class WeeklyViewResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_id: uuid.UUID
    week_start: datetime.date
    week_end: datetime.date
    days: list[WeekDayView]
    summary: WeeklySummary
