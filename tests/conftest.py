"""Shared fixtures: an in-memory SQLite database and a few seeded rows.

The calendar used throughout the suite is the week of Monday 2026-03-02;
"today" is Wednesday 2026-03-04.
"""

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import coachweek.db.base  # noqa: F401
from coachweek.models import Profile, ProfileRole, TemplateExercise, WorkoutTemplate

TODAY = datetime.date(2026, 3, 4)
MONDAY = datetime.date(2026, 3, 2)
SUNDAY = datetime.date(2026, 3, 8)


@pytest.fixture
def today() -> datetime.date:
    return TODAY


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client_profile(db) -> Profile:
    profile = Profile(email="client@example.com", full_name="Client", role=ProfileRole.CLIENT)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


@pytest.fixture
def trainer_profile(db) -> Profile:
    profile = Profile(email="trainer@example.com", full_name="Trainer", role=ProfileRole.TRAINER)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


@pytest.fixture
def upper_body(db) -> WorkoutTemplate:
    """Two exercises, 4 + 2 sets, 50 minutes."""
    template = WorkoutTemplate(name="Upper Body", estimated_duration_minutes=50, exercises=[
        TemplateExercise(exercise_name="Bench Press", order_index=0,
                         sets_config=[{"reps": 8, "weight": 60} for _ in range(4)]),
        TemplateExercise(exercise_name="Pull-up", order_index=1, sets_config='[{"reps": 6}, {"reps": 6}]'),
    ])
    db.add(template)
    db.commit()
    db.refresh(template)
    return template


@pytest.fixture
def lower_body(db) -> WorkoutTemplate:
    """One exercise with an unreadable sets config, no duration."""
    template = WorkoutTemplate(name="Lower Body", exercises=[
        TemplateExercise(exercise_name="Back Squat", order_index=0, sets_config="not json"),
    ])
    db.add(template)
    db.commit()
    db.refresh(template)
    return template
