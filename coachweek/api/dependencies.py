"""
Shared API dependencies.

Reusable FastAPI dependencies for database access, the calendar clock
and client lookup.
"""

import uuid

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from coachweek.db.repositories.profile import ProfileRepository
from coachweek.db.session import get_db
from coachweek.models.profile import Profile, ProfileRole
from coachweek.scheduling.week import Clock, local_today


def get_clock() -> Clock:
    """The "today" source; overridden in tests."""
    return local_today


def get_client(client_id: uuid.UUID, db: Session = Depends(get_db), ) -> Profile:
    """Resolve the ``client_id`` path parameter to a client profile."""
    profile = ProfileRepository(db).get_by_id(client_id)
    if not profile or profile.role != ProfileRole.CLIENT:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return profile
