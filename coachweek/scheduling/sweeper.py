"""
Stale-session sweep.

A session still ``scheduled`` after its date has passed was never acted
on.  The sweep moves every such session of a client to ``no_show`` in one
bulk, conditional update.  Running it again finds nothing to do.

Failures never propagate: they are logged and reported in the returned
:class:`SweepResult`, and the caller carries on with whatever data it
can read.
"""

import uuid
from typing import Optional

from loguru import logger as default_logger

from coachweek.scheduling.ports import SessionRepository
from coachweek.scheduling.week import Clock, local_today
from coachweek.schemas.training_session import SweepResult


class StaleSessionSweeper:

    def __init__(self, sessions: SessionRepository, clock: Optional[Clock] = None, logger=None):
        self.sessions = sessions
        self.clock = clock or local_today
        self.logger = logger or default_logger

    def mark_past_scheduled_as_missed(self, client_id: uuid.UUID) -> SweepResult:
        today = self.clock()
        result = SweepResult(client_id=client_id, today=today)

        try:
            stale = self.sessions.find_past_scheduled(client_id, before=today)
        except Exception as e:
            self.logger.warning(f"Sweep skipped for client {client_id}: could not read sessions ({e})")
            result.error = f"fetch failed: {e}"
            return result

        result.candidates = len(stale)
        if not stale:
            self.logger.debug(f"No past scheduled sessions for client {client_id}")
            return result

        try:
            result.updated = self.sessions.mark_many_as_no_show([s.id for s in stale])
        except Exception as e:
            self.logger.warning(f"Sweep failed for client {client_id}: could not update "
                                f"{len(stale)} sessions ({e})")
            result.error = f"update failed: {e}"
            return result

        self.logger.info(f"Marked {result.updated} past sessions as no_show for client {client_id}")
        return result
