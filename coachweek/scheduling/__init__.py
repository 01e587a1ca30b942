"""Weekly training-session scheduling core: classification, sweep and reconciliation."""

from coachweek.scheduling.classification import DayClassification, classify
from coachweek.scheduling.errors import CoachWeekError, SessionFetchError
from coachweek.scheduling.reconciler import WeeklyScheduleReconciler, pick_session, summarize
from coachweek.scheduling.sweeper import StaleSessionSweeper
from coachweek.scheduling.week import local_today, week_dates, week_start

__all__ = [
    "DayClassification",
    "classify",
    "CoachWeekError",
    "SessionFetchError",
    "WeeklyScheduleReconciler",
    "pick_session",
    "summarize",
    "StaleSessionSweeper",
    "local_today",
    "week_dates",
    "week_start",
]
