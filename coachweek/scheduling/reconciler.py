"""
Weekly schedule reconciler.

Builds the seven-day training view of a client's week by joining two
sources:

- **materialized sessions**: ``training_sessions`` rows dated inside the
  week, classified by :func:`coachweek.scheduling.classification.classify`;
- **the recurring plan**: ``schedule_data`` of the client's active plan,
  consulted only for days with no session row.

A persisted session always wins over the plan.

Ordering
--------

The stale-session sweep runs (and is waited for) before sessions are
read, so a freshly built week does not show a ``scheduled`` status the
sweep would have corrected.  A failed sweep is logged and ignored; the
classifier still reports overdue ``scheduled`` sessions as missed.

Failure isolation
-----------------

Only a failure to read the week's sessions is raised
(:class:`SessionFetchError`).  Anything that goes wrong while building a
single day turns that day into a rest day; the result always has seven
entries, Monday first.
"""

import datetime
import uuid
from typing import Iterable, Optional

from loguru import logger as default_logger

from coachweek.models.training_session import TrainingSession
from coachweek.models.workout_plan import WorkoutPlan
from coachweek.scheduling.classification import classify
from coachweek.scheduling.errors import SessionFetchError
from coachweek.scheduling.ports import PlanRepository, SessionRepository, TemplateResolver
from coachweek.scheduling.sweeper import StaleSessionSweeper
from coachweek.scheduling.week import Clock, day_label, local_today, week_dates, weekday_name
from coachweek.schemas.weekly_view import WeekDayView, WeeklySummary
from coachweek.schemas.workout_template import TemplateSummary
from coachweek.utils.parsing import parse_iso_date, parse_template_id, schedule_template_id

_EPOCH = datetime.datetime.min


def pick_session(candidates: Iterable[TrainingSession]) -> Optional[TrainingSession]:
    """Choose the row shown when several sessions share one date.

    The most recently updated row wins; ties fall back to the latest
    ``created_at`` and then to the highest id, so the choice never depends
    on the order the repository returned the rows in.
    """
    return max(
        candidates,
        key=lambda s: (s.updated_at or _EPOCH, s.created_at or _EPOCH, str(s.id)),
        default=None,
    )


def rest_day(day: datetime.date) -> WeekDayView:
    return WeekDayView(day_name=day_label(day), day_number=day.day, date=day)


def summarize(days: Iterable[WeekDayView]) -> WeeklySummary:
    """Counts over the days that carry a template."""
    summary = WeeklySummary()
    for day in days:
        if day.template is None:
            continue
        summary.total += 1
        if day.completed:
            summary.completed += 1
        elif day.missed:
            summary.missed += 1
        else:
            summary.scheduled += 1
    return summary


class WeeklyScheduleReconciler:
    """Derives a client's :class:`WeekDayView` list.

    Collaborators are passed in; the reconciler keeps no state between
    calls apart from them.

    Args:
        sessions: Session repository (read by range, sweep transitions).
        templates: Template resolver.
        plans: Plan repository; ``None`` disables the plan fallback.
        clock: Returns "today"; defaults to the configured timezone.
        logger: loguru-compatible logger.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        templates: TemplateResolver,
        plans: Optional[PlanRepository] = None,
        clock: Optional[Clock] = None,
        logger=None,
    ):
        self.sessions = sessions
        self.templates = templates
        self.plans = plans
        self.clock = clock or local_today
        self.logger = logger or default_logger
        self.sweeper = StaleSessionSweeper(sessions, clock=self.clock, logger=self.logger)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_weekly_view(self, client_id: uuid.UUID, reference_date: datetime.date) -> list[WeekDayView]:
        dates = week_dates(reference_date)
        start, end = dates[0], dates[-1]

        self.sweeper.mark_past_scheduled_as_missed(client_id)

        try:
            rows = self.sessions.fetch_sessions(client_id, start, end)
        except Exception as e:
            self.logger.error(f"Could not fetch sessions for client {client_id} ({start} - {end}): {e}")
            raise SessionFetchError(client_id, str(e)) from e

        by_date = self._group_by_date(rows)
        plans = self._active_plans(client_id, start, end)
        today = self.clock()
        cache: dict[uuid.UUID, Optional[TemplateSummary]] = {}

        week = []
        for day in dates:
            try:
                view = self._build_day(day, by_date.get(day, []), plans, today, cache)
            except Exception as e:
                self.logger.warning(f"Showing {day} as a rest day for client {client_id}: {e}")
                view = rest_day(day)
            week.append(view)

        self.logger.debug(f"Week {start} for client {client_id} built from {len(rows)} sessions")
        return week

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _group_by_date(self, rows: Iterable[TrainingSession]) -> dict[datetime.date, list[TrainingSession]]:
        grouped: dict[datetime.date, list[TrainingSession]] = {}
        for row in rows:
            day = parse_iso_date(row.scheduled_date)
            if day is None:
                self.logger.warning(f"Ignoring session {row.id} with unreadable date {row.scheduled_date!r}")
                continue
            grouped.setdefault(day, []).append(row)
        for day, candidates in grouped.items():
            if len(candidates) > 1:
                self.logger.warning(f"{len(candidates)} sessions share {day}; showing the most recently updated")
        return grouped

    def _active_plans(self, client_id: uuid.UUID, start: datetime.date, end: datetime.date) -> list[WorkoutPlan]:
        if self.plans is None:
            return []
        try:
            return list(self.plans.get_active_for_client(client_id, start, end))
        except Exception as e:
            self.logger.warning(f"Plan fallback disabled for client {client_id}: {e}")
            return []

    def _build_day(
        self,
        day: datetime.date,
        candidates: list[TrainingSession],
        plans: list[WorkoutPlan],
        today: datetime.date,
        cache: dict[uuid.UUID, Optional[TemplateSummary]],
    ) -> WeekDayView:
        session = pick_session(candidates)

        if session is not None:
            template_id = parse_template_id(session.template_id)
            flags = classify(session, today)
            return WeekDayView(
                day_name=day_label(day),
                day_number=day.day,
                date=day,
                template=self._resolve(template_id, cache) if template_id else None,
                completed=flags.completed,
                missed=flags.missed,
                session_id=session.id,
                scheduled_time=session.scheduled_time or None,
            )

        # Not materialized: fall back to the recurring plan
        plan = next((p for p in plans if p.covers(day)), None)
        template_id = schedule_template_id(plan.schedule_data, weekday_name(day)) if plan else None
        if template_id is None:
            return rest_day(day)
        return WeekDayView(
            day_name=day_label(day),
            day_number=day.day,
            date=day,
            template=self._resolve(template_id, cache),
        )

    def _resolve(self, template_id: uuid.UUID,
                 cache: dict[uuid.UUID, Optional[TemplateSummary]]) -> Optional[TemplateSummary]:
        if template_id not in cache:
            cache[template_id] = self.templates.resolve(template_id)
        return cache[template_id]
