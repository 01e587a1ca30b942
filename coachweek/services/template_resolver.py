"""
Template resolver.

Turns a template id into the :class:`TemplateSummary` shown on a
calendar day.  Set counts are read through the parse-or-default helper,
so an exercise with an unreadable ``sets_config`` counts as the default
three sets.
"""

import uuid
from typing import Optional

from sqlmodel import Session

from coachweek.core.config import settings
from coachweek.db.repositories.workout_template import WorkoutTemplateRepository
from coachweek.models.workout_template import WorkoutTemplate
from coachweek.schemas.workout_template import TemplateSummary
from coachweek.utils.parsing import parse_sets_config


def summarize_template(template: WorkoutTemplate,
                       default_duration: int = settings.DEFAULT_TEMPLATE_DURATION_MINUTES) -> TemplateSummary:
    exercises = list(template.exercises or [])
    return TemplateSummary(
        id=template.id,
        name=template.name,
        exercise_count=len(exercises),
        estimated_duration_minutes=template.estimated_duration_minutes or default_duration,
        set_count=sum(len(parse_sets_config(e.sets_config)) for e in exercises),
    )


class SQLTemplateResolver:
    """Resolves templates from the database."""

    def __init__(self, session: Session, default_duration: Optional[int] = None):
        self.repository = WorkoutTemplateRepository(session)
        self.default_duration = default_duration or settings.DEFAULT_TEMPLATE_DURATION_MINUTES

    def resolve(self, template_id: uuid.UUID) -> Optional[TemplateSummary]:
        template = self.repository.get_by_id(template_id)
        if template is None:
            return None
        return summarize_template(template, self.default_duration)
