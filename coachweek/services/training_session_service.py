"""
Training session service.

Session lifecycle (assign, complete, cancel) and the read paths the
client calendar needs.  Status changes other than the stale-session
sweep go through here and only ever start from ``scheduled``.
"""

import datetime
import uuid
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from coachweek.core.config import settings
from coachweek.db.repositories.profile import ProfileRepository
from coachweek.db.repositories.training_session import TrainingSessionRepository
from coachweek.models.training_session import SessionStatus, TrainingSession
from coachweek.scheduling.sweeper import StaleSessionSweeper
from coachweek.scheduling.week import Clock, local_today
from coachweek.schemas.training_session import (SweepResult, TrainingSessionComplete, TrainingSessionCreate,
                                                TrainingSessionResponse, )


class TrainingSessionService:
    """Service for training session business logic."""

    def __init__(self, session: Session, clock: Optional[Clock] = None):
        self.repository = TrainingSessionRepository(session)
        self.profiles = ProfileRepository(session)
        self.clock = clock or local_today

    def create(self, data: TrainingSessionCreate) -> TrainingSessionResponse:
        for role, profile_id in (("client", data.client_id), ("trainer", data.trainer_id)):
            if not self.profiles.get_by_id(profile_id):
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                    detail=f"Unknown {role}: '{profile_id}'", )

        entry = TrainingSession(**data.model_dump(), status=SessionStatus.SCHEDULED)
        entry = self.repository.create(entry)
        return self._to_response(entry)

    def get_by_id(self, entry_id: uuid.UUID) -> TrainingSessionResponse:
        return self._to_response(self._get_entry(entry_id))

    def get_range(self, client_id: uuid.UUID, start: datetime.date,
                  end: datetime.date, ) -> list[TrainingSessionResponse]:
        entries = self.repository.fetch_sessions(client_id, start, end)
        return [self._to_response(e) for e in entries]

    def complete(self, entry_id: uuid.UUID, data: TrainingSessionComplete) -> TrainingSessionResponse:
        entry = self._get_scheduled_entry(entry_id)
        entry.status = SessionStatus.COMPLETED
        entry.completion_data = data.model_dump()
        if data.duration_minutes is not None:
            entry.duration_minutes = data.duration_minutes
        if data.session_rating is not None:
            entry.session_rating = data.session_rating
        if data.trainer_notes is not None:
            entry.trainer_notes = data.trainer_notes
        entry.updated_at = datetime.datetime.utcnow()
        return self._to_response(self.repository.update(entry))

    def cancel(self, entry_id: uuid.UUID) -> TrainingSessionResponse:
        entry = self._get_scheduled_entry(entry_id)
        entry.status = SessionStatus.CANCELLED
        entry.updated_at = datetime.datetime.utcnow()
        return self._to_response(self.repository.update(entry))

    # ------------------------------------------------------------------
    # Missed sessions
    # ------------------------------------------------------------------

    def sweep(self, client_id: uuid.UUID) -> SweepResult:
        return StaleSessionSweeper(self.repository, clock=self.clock).mark_past_scheduled_as_missed(client_id)

    def get_recent_missed(self, client_id: uuid.UUID,
                          days: int = settings.MISSED_LOOKBACK_DAYS) -> list[TrainingSessionResponse]:
        """Sweep, then list the no-show / cancelled sessions of the last ``days`` days."""
        self.sweep(client_id)
        since = self.clock() - datetime.timedelta(days=days)
        entries = self.repository.get_recent_missed(client_id, since)
        return [self._to_response(e) for e in entries]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, entry_id: uuid.UUID) -> TrainingSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training session not found", )
        return entry

    def _get_scheduled_entry(self, entry_id: uuid.UUID) -> TrainingSession:
        entry = self._get_entry(entry_id)
        if entry.status != SessionStatus.SCHEDULED:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Training session is already {SessionStatus(entry.status).value}", )
        return entry

    @staticmethod
    def _to_response(entry: TrainingSession) -> TrainingSessionResponse:
        return TrainingSessionResponse.model_validate(entry)
