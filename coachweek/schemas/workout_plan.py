"""
Workout plan API schemas.
"""

import datetime
import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from coachweek.models.workout_plan import PlanStatus, ScheduleType
from coachweek.scheduling.week import WEEKDAY_NAMES
from coachweek.utils.parsing import parse_template_id

_WEEKDAYS_BY_KEY = {name.lower(): name for name in WEEKDAY_NAMES}


class WorkoutPlanCreate(BaseModel):
    """Schema for creating a recurring plan.

    ``schedule_data`` keys are weekday names in any case and are stored
    capitalized.  Values that are not template ids are stored as ``None``.
    """

    trainer_id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    schedule_type: ScheduleType = ScheduleType.WEEKLY
    status: PlanStatus = PlanStatus.ACTIVE
    schedule_data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("schedule_data")
    @classmethod
    def _normalize_schedule(cls, value: dict[str, Any]) -> dict[str, Optional[str]]:
        normalized: dict[str, Optional[str]] = {}
        for key, raw in value.items():
            day = _WEEKDAYS_BY_KEY.get(str(key).strip().lower())
            if day is None:
                raise ValueError(f"Unknown weekday: '{key}'")
            template_id = parse_template_id(raw)
            normalized[day] = str(template_id) if template_id else None
        return normalized

    @model_validator(mode="after")
    def _check_dates(self) -> "WorkoutPlanCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class WorkoutPlanResponse(BaseModel):
    id: uuid.UUID
    client_id: uuid.UUID
    trainer_id: uuid.UUID
    name: str
    description: Optional[str]
    start_date: Optional[datetime.date]
    end_date: Optional[datetime.date]
    schedule_type: ScheduleType
    status: PlanStatus
    schedule_data: dict[str, Any]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class PlanCleanupResponse(BaseModel):
    plans_checked: int
    cleared: int
