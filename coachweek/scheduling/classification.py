"""
Day classification policy.

Maps the session persisted for a day (if any) to the two flags shown on
the weekly calendar.  Rules, first match wins:

1. no session                              -> neither flag
2. ``completed``                           -> completed
3. ``no_show`` / ``cancelled``             -> missed
4. ``scheduled`` dated before today        -> missed
5. ``scheduled`` dated today or later      -> neither flag (upcoming)

Rule 4 covers sessions the stale-session sweep has not reached yet.
Only the date is compared; ``scheduled_time`` is ignored.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from coachweek.models.training_session import MISSED_STATUSES, SessionStatus, TrainingSession
from coachweek.utils.parsing import parse_iso_date


class DayClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    completed: bool = False
    missed: bool = False


EMPTY = DayClassification()
COMPLETED = DayClassification(completed=True)
MISSED = DayClassification(missed=True)


def classify(session: Optional[TrainingSession], today: datetime.date) -> DayClassification:
    """Classify one day.  Pure; performs no I/O."""
    if session is None:
        return EMPTY

    status = SessionStatus(session.status)
    if status is SessionStatus.COMPLETED:
        return COMPLETED
    if status in MISSED_STATUSES:
        return MISSED

    # SCHEDULED; an unreadable date cannot be shown as overdue
    scheduled = parse_iso_date(session.scheduled_date)
    if scheduled is not None and scheduled < today:
        return MISSED
    return EMPTY
