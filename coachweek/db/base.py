"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

from coachweek.models.profile import Profile  # noqa: F401
from coachweek.models.training_session import TrainingSession  # noqa: F401
from coachweek.models.workout_plan import WorkoutPlan  # noqa: F401
from coachweek.models.workout_template import TemplateExercise, WorkoutTemplate  # noqa: F401
