"""
Weekly view service.

Wires the scheduling core to the database for one request and turns
its result into the HTTP response.
"""

import datetime
import uuid
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from coachweek.db.repositories.training_session import TrainingSessionRepository
from coachweek.db.repositories.workout_plan import WorkoutPlanRepository
from coachweek.scheduling.errors import SessionFetchError
from coachweek.scheduling.reconciler import WeeklyScheduleReconciler, summarize
from coachweek.scheduling.week import Clock
from coachweek.schemas.weekly_view import WeeklyViewResponse
from coachweek.services.template_resolver import SQLTemplateResolver


class WeeklyViewService:
    """Service for the client's weekly training calendar."""

    def __init__(self, session: Session, clock: Optional[Clock] = None):
        self.reconciler = WeeklyScheduleReconciler(
            sessions=TrainingSessionRepository(session),
            templates=SQLTemplateResolver(session),
            plans=WorkoutPlanRepository(session),
            clock=clock,
        )

    def get_week(self, client_id: uuid.UUID, reference_date: datetime.date) -> WeeklyViewResponse:
        try:
            days = self.reconciler.get_weekly_view(client_id, reference_date)
        except SessionFetchError as e:
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                                detail=f"Training sessions are unavailable, try again later ({e.detail})", )

        return WeeklyViewResponse(client_id=client_id, week_start=days[0].date, week_end=days[-1].date,
                                  days=days, summary=summarize(days), )
