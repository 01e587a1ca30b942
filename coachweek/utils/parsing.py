"""
Parse-or-default helpers.

Stored data written by older clients is not always well formed: plan
schedules hold free text where a template id is expected, set
configurations are sometimes JSON-encoded strings, dates come back as
strings.  Every reader goes through these helpers instead of inlining
its own ``try`` block.

Default policy
--------------

=====================  ==========================================
Helper                 Returned when the input is malformed
=====================  ==========================================
``parse_json``         the ``default`` argument (``None``)
``parse_template_id``  ``None``
``parse_iso_date``     ``None``
``parse_sets_config``  ``DEFAULT_SETS_CONFIG`` (a fresh copy)
``schedule_mapping``   ``{}``
=====================  ==========================================

None of these helpers raise.
"""

import copy
import datetime
import json
import re
import uuid
from typing import Any, Optional

# Canonical 8-4-4-4-12 hex form, case-insensitive.
_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)

DEFAULT_SETS_CONFIG: list[dict[str, Any]] = [
    {"reps": 10, "weight": 0, "rest_time": 60},
    {"reps": 10, "weight": 0, "rest_time": 60},
    {"reps": 10, "weight": 0, "rest_time": 60},
]


def parse_json(raw: Any, default: Any = None) -> Any:
    """Decode ``raw`` if it is a JSON string; pass through decoded values.

    ``None``, empty strings and undecodable strings yield ``default``.
    """
    if raw is None:
        return default
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        if not raw.strip():
            return default
        try:
            return json.loads(raw)
        except ValueError:
            return default
    return raw


def parse_template_id(raw: Any) -> Optional[uuid.UUID]:
    """Return ``raw`` as a UUID if it is syntactically a template id.

    Strings are trimmed and compared case-insensitively against the
    canonical hyphenated form only; braces, URNs and bare hex are rejected.
    """
    if isinstance(raw, uuid.UUID):
        return raw
    if not isinstance(raw, str):
        return None
    candidate = raw.strip().lower()
    if not _UUID_RE.match(candidate):
        return None
    return uuid.UUID(candidate)


def parse_iso_date(raw: Any) -> Optional[datetime.date]:
    """Coerce ``raw`` to a calendar date.

    Accepts ``date``, ``datetime`` (time dropped) and ISO strings, with or
    without a time part (``"2026-03-02"``, ``"2026-03-02T10:00:00Z"``).
    """
    if isinstance(raw, datetime.datetime):
        return raw.date()
    if isinstance(raw, datetime.date):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if len(text) < 10:
        return None
    try:
        return datetime.date.fromisoformat(text[:10])
    except ValueError:
        return None


def parse_sets_config(raw: Any) -> list[dict[str, Any]]:
    """Return the list of set dicts stored for a template exercise.

    Anything that does not decode to a non-empty list of dicts falls back
    to :data:`DEFAULT_SETS_CONFIG`.  Non-dict items inside an otherwise
    valid list are dropped.
    """
    value = parse_json(raw)
    if isinstance(value, list):
        sets = [item for item in value if isinstance(item, dict)]
        if sets:
            return sets
    return copy.deepcopy(DEFAULT_SETS_CONFIG)


def schedule_mapping(raw: Any) -> dict[str, Any]:
    """Return a plan's ``schedule_data`` as a dict, ``{}`` if unusable."""
    value = parse_json(raw, default={})
    return value if isinstance(value, dict) else {}


def schedule_template_id(schedule_data: Any, weekday_name: str) -> Optional[uuid.UUID]:
    """Look up the template id a plan assigns to ``weekday_name``.

    The capitalized key (``"Monday"``) is tried first, then the lowercase
    one.  Missing, null or malformed entries give ``None``.
    """
    schedule = schedule_mapping(schedule_data)
    raw = schedule.get(weekday_name) or schedule.get(weekday_name.lower())
    return parse_template_id(raw)
