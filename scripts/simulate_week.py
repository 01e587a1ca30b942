"""What does a client's training week look like?

Builds a small in-memory SQLite database with one client, two
templates, an active weekly plan and a few materialized sessions, then
prints the reconciled week.

Usage:
    python scripts/simulate_week.py [YYYY-MM-DD]
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from coachweek.core.logger import setup_logger
from coachweek.db.init_db import init_db
from coachweek.models import (PlanStatus, Profile, ProfileRole, SessionStatus, TemplateExercise, TrainingSession,
                              WorkoutPlan, WorkoutTemplate, )
from coachweek.services.weekly_view_service import WeeklyViewService

TODAY = datetime.date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else datetime.date.today()

SYMBOLS = {"rest": ".", "scheduled": "o", "completed": "x", "missed": "!"}


def seed(session: Session) -> Profile:
    client = Profile(email="client@example.com", full_name="Demo Client", role=ProfileRole.CLIENT)
    trainer = Profile(email="trainer@example.com", full_name="Demo Trainer", role=ProfileRole.TRAINER)
    upper = WorkoutTemplate(name="Upper Body", estimated_duration_minutes=50, exercises=[
        TemplateExercise(exercise_name="Bench Press", order_index=0,
                         sets_config=[{"reps": 8, "weight": 60}] * 4),
        TemplateExercise(exercise_name="Pull-up", order_index=1, sets_config='[{"reps": 6}, {"reps": 6}]'),
    ])
    lower = WorkoutTemplate(name="Lower Body", exercises=[
        TemplateExercise(exercise_name="Back Squat", order_index=0, sets_config="not json"),
    ])
    session.add_all([client, trainer, upper, lower])
    session.commit()

    monday = TODAY - datetime.timedelta(days=TODAY.weekday())
    session.add(WorkoutPlan(client_id=client.id, trainer_id=trainer.id, name="Demo plan",
                            status=PlanStatus.ACTIVE,
                            schedule_data={"Monday": str(upper.id), "Wednesday": str(lower.id),
                                           "Friday": str(upper.id), "Sunday": "not-a-template"}))
    session.add_all([
        TrainingSession(client_id=client.id, trainer_id=trainer.id, template_id=upper.id,
                        scheduled_date=monday, status=SessionStatus.COMPLETED),
        TrainingSession(client_id=client.id, trainer_id=trainer.id, template_id=lower.id,
                        scheduled_date=monday + datetime.timedelta(days=2), scheduled_time="18:30"),
    ])
    session.commit()
    return client


if __name__ == "__main__":
    setup_logger(level="DEBUG")
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(engine)

    with Session(engine) as db:
        client = seed(db)
        week = WeeklyViewService(db, clock=lambda: TODAY).get_week(client.id, TODAY)

    print(f"Week {week.week_start} - {week.week_end} (today {TODAY})")
    for day in week.days:
        name = day.template.name if day.template else "rest"
        time = f" {day.scheduled_time}" if day.scheduled_time else ""
        print(f"  {SYMBOLS[day.state.value]} {day.day_name} {day.day_number:02d}  {name}{time}")
    print(f"Summary: {week.summary.model_dump()}")
