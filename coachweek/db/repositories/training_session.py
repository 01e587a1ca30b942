"""
Training session repository.

Handles database operations for :class:`TrainingSession`, including the
queries and the bulk status transition used by the scheduling core.
"""

import datetime
import uuid
from typing import Optional, Sequence

from sqlalchemy import update
from sqlmodel import Session, col, select

from coachweek.models.training_session import MISSED_STATUSES, SessionStatus, TrainingSession


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: uuid.UUID) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def fetch_sessions(self, client_id: uuid.UUID, start: datetime.date,
                       end: datetime.date) -> list[TrainingSession]:
        """Sessions of a client dated within ``[start, end]`` (inclusive)."""
        statement = (select(TrainingSession).where(TrainingSession.client_id == client_id,
                                                   TrainingSession.scheduled_date >= start,
                                                   TrainingSession.scheduled_date <= end, )
                     .order_by(TrainingSession.scheduled_date, TrainingSession.scheduled_time))
        return list(self.session.exec(statement).all())

    def find_past_scheduled(self, client_id: uuid.UUID, before: datetime.date) -> list[TrainingSession]:
        """Still-``scheduled`` sessions dated strictly before ``before``."""
        statement = select(TrainingSession).where(TrainingSession.client_id == client_id,
                                                  TrainingSession.status == SessionStatus.SCHEDULED,
                                                  TrainingSession.scheduled_date < before, )
        return list(self.session.exec(statement).all())

    def get_recent_missed(self, client_id: uuid.UUID, since: datetime.date) -> list[TrainingSession]:
        """``no_show`` / ``cancelled`` sessions dated on or after ``since``, newest first."""
        statement = (select(TrainingSession).where(TrainingSession.client_id == client_id,
                                                   col(TrainingSession.status).in_(MISSED_STATUSES),
                                                   TrainingSession.scheduled_date >= since, )
                     .order_by(col(TrainingSession.scheduled_date).desc()))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def mark_many_as_no_show(self, session_ids: Sequence[uuid.UUID]) -> int:
        """Move the given sessions from ``scheduled`` to ``no_show``.

        One ``UPDATE`` whose ``WHERE`` re-checks ``status = scheduled``:
        a row completed or cancelled after the sweep read it is left alone.

        Returns:
            Number of sessions changed.
        """
        if not session_ids:
            return 0
        statement = (update(TrainingSession)
                     .where(col(TrainingSession.id).in_(list(session_ids)),
                            TrainingSession.status == SessionStatus.SCHEDULED, )
                     .values(status=SessionStatus.NO_SHOW, updated_at=datetime.datetime.utcnow()))
        result = self.session.exec(statement)
        self.session.commit()
        return result.rowcount

    def update(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
