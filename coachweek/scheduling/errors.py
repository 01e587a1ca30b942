"""Exceptions raised by the scheduling core."""

import uuid


class CoachWeekError(Exception):
    """Base class for scheduling errors."""


class SessionFetchError(CoachWeekError):
    """The client's sessions for the requested range could not be read.

    No meaningful week can be built without them, so this is the one
    failure the reconciler lets through to its caller.
    """

    def __init__(self, client_id: uuid.UUID, detail: str):
        self.client_id = client_id
        self.detail = detail
        super().__init__(f"Could not fetch sessions for client {client_id}: {detail}")
