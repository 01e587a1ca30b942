"""
Profile database model.

Clients, trainers and nutritionists share one table and are told
apart by ``role``.
"""

import datetime
import enum
import uuid
from typing import Optional

from sqlmodel import Field, SQLModel

from coachweek.models.columns import enum_column


class ProfileRole(str, enum.Enum):
    CLIENT = "client"
    TRAINER = "trainer"
    NUTRITIONIST = "nutritionist"


class Profile(SQLModel, table=True):
    """A person using the coaching application."""

    __tablename__ = "profiles"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    full_name: Optional[str] = Field(default=None, max_length=255)
    role: ProfileRole = Field(default=ProfileRole.CLIENT, sa_column=enum_column(ProfileRole, "profile_role"))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
