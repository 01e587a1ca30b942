"""SQLModel database models."""

from coachweek.models.profile import Profile, ProfileRole
from coachweek.models.training_session import MISSED_STATUSES, SessionStatus, TrainingSession
from coachweek.models.workout_plan import PlanStatus, ScheduleType, WorkoutPlan
from coachweek.models.workout_template import TemplateExercise, WorkoutTemplate

__all__ = [
    "Profile",
    "ProfileRole",
    "TrainingSession",
    "SessionStatus",
    "MISSED_STATUSES",
    "WorkoutPlan",
    "PlanStatus",
    "ScheduleType",
    "WorkoutTemplate",
    "TemplateExercise",
]
