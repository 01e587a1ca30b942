"""Database repositories."""

from coachweek.db.repositories.profile import ProfileRepository
from coachweek.db.repositories.training_session import TrainingSessionRepository
from coachweek.db.repositories.workout_plan import WorkoutPlanRepository
from coachweek.db.repositories.workout_template import WorkoutTemplateRepository

__all__ = [
    "ProfileRepository",
    "TrainingSessionRepository",
    "WorkoutPlanRepository",
    "WorkoutTemplateRepository",
]
