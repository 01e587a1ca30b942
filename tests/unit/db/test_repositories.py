"""Repository tests against SQLite (in memory, or file-backed where two connections are needed)."""

import datetime
import uuid

import pytest
from sqlalchemy import event
from sqlmodel import Session, SQLModel, create_engine

from coachweek.db.repositories import (TrainingSessionRepository, WorkoutPlanRepository,
                                       WorkoutTemplateRepository, )
from coachweek.models import PlanStatus, Profile, ProfileRole, SessionStatus, TrainingSession, WorkoutPlan

TODAY = datetime.date(2026, 3, 4)
MONDAY = datetime.date(2026, 3, 2)
SUNDAY = datetime.date(2026, 3, 8)


@pytest.fixture
def add_session(db, client_profile, trainer_profile):

    def _add(scheduled_date, status=SessionStatus.SCHEDULED, client=None, **fields) -> TrainingSession:
        entry = TrainingSession(client_id=(client or client_profile).id, trainer_id=trainer_profile.id,
                                scheduled_date=scheduled_date, status=status, **fields)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    return _add


@pytest.fixture
def add_plan(db, client_profile, trainer_profile):

    def _add(**fields) -> WorkoutPlan:
        fields.setdefault("status", PlanStatus.ACTIVE)
        plan = WorkoutPlan(client_id=client_profile.id, trainer_id=trainer_profile.id,
                           name=fields.pop("name", "Plan"), **fields)
        db.add(plan)
        db.commit()
        db.refresh(plan)
        return plan

    return _add


class TestTrainingSessionRepository:
    def test_fetch_sessions_is_inclusive_and_client_scoped(self, db, add_session, client_profile,
                                                           trainer_profile):
        inside = [add_session(MONDAY), add_session(TODAY, scheduled_time="09:00"), add_session(SUNDAY)]
        add_session(MONDAY - datetime.timedelta(days=1))
        add_session(SUNDAY + datetime.timedelta(days=1))
        add_session(TODAY, client=trainer_profile)

        rows = TrainingSessionRepository(db).fetch_sessions(client_profile.id, MONDAY, SUNDAY)

        assert [r.id for r in rows] == [r.id for r in inside]

    def test_find_past_scheduled(self, db, add_session, client_profile):
        stale = add_session(MONDAY)
        add_session(MONDAY, status=SessionStatus.COMPLETED)
        add_session(TODAY)

        rows = TrainingSessionRepository(db).find_past_scheduled(client_profile.id, before=TODAY)

        assert [r.id for r in rows] == [stale.id]

    def test_mark_many_as_no_show_only_touches_scheduled_rows(self, db, add_session):
        stale = add_session(MONDAY)
        done = add_session(MONDAY, status=SessionStatus.COMPLETED)
        repository = TrainingSessionRepository(db)

        changed = repository.mark_many_as_no_show([stale.id, done.id])

        assert changed == 1
        db.refresh(stale)
        db.refresh(done)
        assert stale.status == SessionStatus.NO_SHOW
        assert done.status == SessionStatus.COMPLETED

    def test_mark_many_as_no_show_is_idempotent(self, db, add_session):
        stale = add_session(MONDAY)
        repository = TrainingSessionRepository(db)

        assert repository.mark_many_as_no_show([stale.id]) == 1
        assert repository.mark_many_as_no_show([stale.id]) == 0

    def test_mark_many_as_no_show_with_nothing(self, db):
        assert TrainingSessionRepository(db).mark_many_as_no_show([]) == 0

    def test_status_is_stored_by_value(self, db, add_session):
        add_session(MONDAY, status=SessionStatus.NO_SHOW)
        raw = db.connection().exec_driver_sql("SELECT status FROM training_sessions").scalar()
        assert raw == "no_show"

    def test_get_recent_missed_newest_first(self, db, add_session, client_profile):
        older = add_session(TODAY - datetime.timedelta(days=20), status=SessionStatus.CANCELLED)
        newer = add_session(TODAY - datetime.timedelta(days=2), status=SessionStatus.NO_SHOW)
        add_session(TODAY - datetime.timedelta(days=40), status=SessionStatus.NO_SHOW)
        add_session(TODAY - datetime.timedelta(days=1), status=SessionStatus.COMPLETED)

        rows = TrainingSessionRepository(db).get_recent_missed(client_profile.id,
                                                               since=TODAY - datetime.timedelta(days=30))

        assert [r.id for r in rows] == [newer.id, older.id]


class TestConcurrentCompletion:
    """The sweep and a completion committed by another connection at the same time."""

    @pytest.fixture
    def file_engine(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'coachweek.db'}")
        SQLModel.metadata.create_all(engine)
        yield engine
        engine.dispose()

    @pytest.fixture
    def entry_id(self, file_engine) -> uuid.UUID:
        client, trainer = uuid.uuid4(), uuid.uuid4()
        entry = TrainingSession(client_id=client, trainer_id=trainer, scheduled_date=MONDAY)
        with Session(file_engine) as setup:
            setup.add_all([Profile(id=client, email="client@example.com", role=ProfileRole.CLIENT),
                           Profile(id=trainer, email="trainer@example.com", role=ProfileRole.TRAINER)])
            setup.add(entry)
            setup.commit()
            return entry.id

    def test_completion_committed_mid_sweep_is_kept(self, file_engine, entry_id):
        completed = []

        def complete_elsewhere(*args):
            if completed:
                return
            completed.append(entry_id)
            with Session(file_engine) as other:
                row = other.get(TrainingSession, entry_id)
                row.status = SessionStatus.COMPLETED
                other.add(row)
                other.commit()

        with Session(file_engine) as db:
            # Fires after the candidates are chosen and before the write lands
            event.listen(db, "before_flush", complete_elsewhere)
            event.listen(db, "do_orm_execute", lambda state: complete_elsewhere() if state.is_update else None)

            changed = TrainingSessionRepository(db).mark_many_as_no_show([entry_id])

        assert completed == [entry_id]
        assert changed == 0
        with Session(file_engine) as check:
            assert check.get(TrainingSession, entry_id).status == SessionStatus.COMPLETED


class TestWorkoutPlanRepository:
    def test_active_plans_overlapping_the_week(self, db, add_plan, client_profile):
        open_ended = add_plan()
        overlapping = add_plan(start_date=SUNDAY, end_date=SUNDAY + datetime.timedelta(days=30))
        add_plan(end_date=MONDAY - datetime.timedelta(days=1))
        add_plan(start_date=SUNDAY + datetime.timedelta(days=1))
        add_plan(status=PlanStatus.DRAFT)

        plans = WorkoutPlanRepository(db).get_active_for_client(client_profile.id, MONDAY, SUNDAY)

        assert {p.id for p in plans} == {open_ended.id, overlapping.id}

    def test_get_all_by_client(self, db, add_plan, client_profile):
        add_plan(name="A")
        add_plan(name="B", status=PlanStatus.COMPLETED)

        plans = WorkoutPlanRepository(db).get_all_by_client(client_profile.id)

        assert sorted(p.name for p in plans) == ["A", "B"]
        assert WorkoutPlanRepository(db).get_all_by_client(uuid.uuid4()) == []


class TestWorkoutTemplateRepository:
    def test_get_by_id_loads_exercises_in_order(self, db, upper_body):
        template = WorkoutTemplateRepository(db).get_by_id(upper_body.id)

        assert [e.exercise_name for e in template.exercises] == ["Bench Press", "Pull-up"]

    def test_get_by_id_unknown(self, db):
        assert WorkoutTemplateRepository(db).get_by_id(uuid.uuid4()) is None

    def test_existing_ids(self, db, upper_body, lower_body):
        missing = uuid.uuid4()

        found = WorkoutTemplateRepository(db).existing_ids([upper_body.id, missing, upper_body.id])

        assert found == {upper_body.id}
        assert WorkoutTemplateRepository(db).existing_ids([]) == set()
