"""In-memory collaborators for the scheduling core."""

import datetime
import uuid
from unittest.mock import MagicMock

import pytest

from coachweek.models import PlanStatus, SessionStatus, TrainingSession, WorkoutPlan
from coachweek.schemas.workout_template import TemplateSummary


class FakeSessionRepository:
    """Keeps sessions in a list; each operation can be made to fail."""

    def __init__(self):
        self.rows: list[TrainingSession] = []
        self.calls: list[str] = []
        self.fail_fetch = False
        self.fail_find = False
        self.fail_update = False

    def fetch_sessions(self, client_id, start, end):
        self.calls.append("fetch_sessions")
        if self.fail_fetch:
            raise ConnectionError("database unreachable")
        return [r for r in self.rows if r.client_id == client_id and start <= r.scheduled_date <= end]

    def find_past_scheduled(self, client_id, before):
        self.calls.append("find_past_scheduled")
        if self.fail_find:
            raise ConnectionError("database unreachable")
        return [r for r in self.rows
                if r.client_id == client_id and r.status == SessionStatus.SCHEDULED and r.scheduled_date < before]

    def mark_many_as_no_show(self, session_ids):
        self.calls.append("mark_many_as_no_show")
        if self.fail_update:
            raise ConnectionError("database unreachable")
        changed = 0
        for row in self.rows:
            if row.id in session_ids and row.status == SessionStatus.SCHEDULED:
                row.status = SessionStatus.NO_SHOW
                row.updated_at = datetime.datetime.utcnow()
                changed += 1
        return changed


class FakeTemplateResolver:

    def __init__(self):
        self.templates: dict[uuid.UUID, TemplateSummary] = {}
        self.failing: set[uuid.UUID] = set()
        self.calls: list[uuid.UUID] = []

    def add(self, name: str) -> TemplateSummary:
        summary = TemplateSummary(id=uuid.uuid4(), name=name, exercise_count=3, estimated_duration_minutes=45,
                                  set_count=9)
        self.templates[summary.id] = summary
        return summary

    def resolve(self, template_id):
        self.calls.append(template_id)
        if template_id in self.failing:
            raise TimeoutError("template lookup timed out")
        return self.templates.get(template_id)


class FakePlanRepository:

    def __init__(self):
        self.plans: list[WorkoutPlan] = []
        self.fail = False

    def get_active_for_client(self, client_id, start, end):
        if self.fail:
            raise ConnectionError("database unreachable")
        return [p for p in self.plans if p.client_id == client_id and p.status == PlanStatus.ACTIVE]


@pytest.fixture
def client_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def sessions() -> FakeSessionRepository:
    return FakeSessionRepository()


@pytest.fixture
def templates() -> FakeTemplateResolver:
    return FakeTemplateResolver()


@pytest.fixture
def plans() -> FakePlanRepository:
    return FakePlanRepository()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def add_session(sessions, client_id):
    """Append a session for ``client_id`` to the fake repository."""

    def _add(scheduled_date, status=SessionStatus.SCHEDULED, template_id=None, **fields) -> TrainingSession:
        row = TrainingSession(client_id=client_id, trainer_id=uuid.uuid4(), scheduled_date=scheduled_date,
                              status=status, template_id=template_id, **fields)
        sessions.rows.append(row)
        return row

    return _add


@pytest.fixture
def add_plan(plans, client_id):

    def _add(schedule_data, **fields) -> WorkoutPlan:
        fields.setdefault("status", PlanStatus.ACTIVE)
        plan = WorkoutPlan(client_id=client_id, trainer_id=uuid.uuid4(), name="Weekly plan",
                           schedule_data=schedule_data, **fields)
        plans.plans.append(plan)
        return plan

    return _add
