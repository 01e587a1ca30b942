"""
Collaborator contracts consumed by the scheduling core.

The SQLModel repositories in :mod:`coachweek.db.repositories` satisfy
these structurally; tests substitute in-memory fakes.
"""

import datetime
import uuid
from typing import Optional, Protocol, Sequence

from coachweek.models.training_session import TrainingSession
from coachweek.models.workout_plan import WorkoutPlan
from coachweek.schemas.workout_template import TemplateSummary


class SessionRepository(Protocol):

    def fetch_sessions(self, client_id: uuid.UUID, start: datetime.date,
                       end: datetime.date) -> list[TrainingSession]:
        """Sessions whose ``scheduled_date`` is in ``[start, end]``."""
        ...

    def find_past_scheduled(self, client_id: uuid.UUID, before: datetime.date) -> list[TrainingSession]:
        """``scheduled`` sessions dated strictly before ``before``."""
        ...

    def mark_many_as_no_show(self, session_ids: Sequence[uuid.UUID]) -> int:
        """Move still-``scheduled`` sessions to ``no_show``; return rows changed."""
        ...


class TemplateResolver(Protocol):

    def resolve(self, template_id: uuid.UUID) -> Optional[TemplateSummary]:
        ...


class PlanRepository(Protocol):

    def get_active_for_client(self, client_id: uuid.UUID, start: datetime.date,
                              end: datetime.date) -> list[WorkoutPlan]:
        """Active plans overlapping ``[start, end]``, oldest first."""
        ...
