"""Business logic services."""

from coachweek.services.template_resolver import SQLTemplateResolver
from coachweek.services.training_session_service import TrainingSessionService
from coachweek.services.weekly_view_service import WeeklyViewService
from coachweek.services.workout_plan_service import WorkoutPlanService

__all__ = [
    "SQLTemplateResolver",
    "TrainingSessionService",
    "WeeklyViewService",
    "WorkoutPlanService",
]
