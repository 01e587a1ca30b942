"""
Weekly view endpoint.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from coachweek.api.dependencies import get_client, get_clock
from coachweek.db.session import get_db
from coachweek.models.profile import Profile
from coachweek.scheduling.week import Clock
from coachweek.schemas.weekly_view import WeeklyViewResponse
from coachweek.services.weekly_view_service import WeeklyViewService

router = APIRouter()


@router.get("/{client_id}/week", summary="Training status of each day of a week, Monday first.",
            response_model=WeeklyViewResponse, )
def get_week(reference_date: Optional[datetime.date] = Query(None, description="Any date in the week; default today"),
             client: Profile = Depends(get_client), db: Session = Depends(get_db),
             clock: Clock = Depends(get_clock), ):
    service = WeeklyViewService(db, clock=clock)
    return service.get_week(client.id, reference_date or clock())
