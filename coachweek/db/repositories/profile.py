"""
Profile repository.
"""

import uuid
from typing import Optional

from sqlmodel import Session, select

from coachweek.models.profile import Profile


class ProfileRepository:
    """Repository for Profile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, profile: Profile) -> Profile:
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_by_id(self, profile_id: uuid.UUID) -> Optional[Profile]:
        return self.session.get(Profile, profile_id)

    def get_by_email(self, email: str) -> Optional[Profile]:
        statement = select(Profile).where(Profile.email == email)
        return self.session.exec(statement).first()
