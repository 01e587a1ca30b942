"""Pydantic schemas for request/response validation."""

from coachweek.schemas.training_session import (
    SweepResult,
    TrainingSessionComplete,
    TrainingSessionCreate,
    TrainingSessionResponse,
)
from coachweek.schemas.weekly_view import DayState, WeekDayView, WeeklySummary, WeeklyViewResponse
from coachweek.schemas.workout_plan import PlanCleanupResponse, WorkoutPlanCreate, WorkoutPlanResponse
from coachweek.schemas.workout_template import TemplateSummary

__all__ = [
    "SweepResult",
    "TrainingSessionComplete",
    "TrainingSessionCreate",
    "TrainingSessionResponse",
    "DayState",
    "WeekDayView",
    "WeeklySummary",
    "WeeklyViewResponse",
    "PlanCleanupResponse",
    "WorkoutPlanCreate",
    "WorkoutPlanResponse",
    "TemplateSummary",
]
