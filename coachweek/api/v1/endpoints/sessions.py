"""
Training session endpoints.

Assignment, completion and cancellation, plus the client-scoped read
paths (range listing, recent missed sessions, manual sweep).
"""

import datetime
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from coachweek.api.dependencies import get_client, get_clock
from coachweek.db.session import get_db
from coachweek.models.profile import Profile
from coachweek.scheduling.week import Clock
from coachweek.schemas.training_session import (SweepResult, TrainingSessionComplete, TrainingSessionCreate,
                                                TrainingSessionResponse, )
from coachweek.services.training_session_service import TrainingSessionService

router = APIRouter()


@router.post("/sessions", summary="Assign a training session to a client.", response_model=TrainingSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: TrainingSessionCreate, db: Session = Depends(get_db), ):
    return TrainingSessionService(db).create(data)


@router.get("/sessions/{session_id}", summary="Get a training session.", response_model=TrainingSessionResponse, )
def get_session(session_id: uuid.UUID, db: Session = Depends(get_db), ):
    return TrainingSessionService(db).get_by_id(session_id)


@router.post("/sessions/{session_id}/complete", summary="Mark a scheduled session as completed.",
             response_model=TrainingSessionResponse, )
def complete_session(session_id: uuid.UUID, data: TrainingSessionComplete, db: Session = Depends(get_db), ):
    return TrainingSessionService(db).complete(session_id, data)


@router.post("/sessions/{session_id}/cancel", summary="Cancel a scheduled session.",
             response_model=TrainingSessionResponse, )
def cancel_session(session_id: uuid.UUID, db: Session = Depends(get_db), ):
    return TrainingSessionService(db).cancel(session_id)


@router.get("/clients/{client_id}/sessions",
            summary="List a client's sessions in a date range, by default the last 30 days.",
            response_model=list[TrainingSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive), default today"),
                  client: Profile = Depends(get_client), db: Session = Depends(get_db),
                  clock: Clock = Depends(get_clock), ):
    # A missing bound defaults to today (end) or 30 days before the end (start)
    end = end or clock()
    start = start or end - datetime.timedelta(days=30)
    if start > end:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                            detail="start must not be after end", )
    return TrainingSessionService(db, clock=clock).get_range(client.id, start, end)


@router.get("/clients/{client_id}/sessions/missed", summary="No-show and cancelled sessions of the last days.",
            response_model=list[TrainingSessionResponse], )
def list_missed_sessions(client: Profile = Depends(get_client), db: Session = Depends(get_db),
                         clock: Clock = Depends(get_clock), ):
    return TrainingSessionService(db, clock=clock).get_recent_missed(client.id)


@router.post("/clients/{client_id}/sessions/sweep", summary="Mark past scheduled sessions as no-show.",
             response_model=SweepResult, )
def sweep_sessions(client: Profile = Depends(get_client), db: Session = Depends(get_db),
                   clock: Clock = Depends(get_clock), ):
    return TrainingSessionService(db, clock=clock).sweep(client.id)
