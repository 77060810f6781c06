# skillswap_pro/services/scheduling.py
"""
Time windows and slot conflicts.

Every session lasts a fixed 1 h 20 min. Times are zero-padded ``HH:MM``
strings, so plain string comparison orders them the same way as minutes.
"""

from typing import Iterable, Optional

from skillswap_pro.errors import ValidationMissing
from skillswap_pro.schemas import INACTIVE_STATUSES, Session

SESSION_HOURS = 1
SESSION_MINUTES = 20


def _parse_hhmm(value: str):
    try:
        hours, minutes = (int(part) for part in value.split(":")[:2])
    except ValueError:
        raise ValidationMissing(f"Invalid time '{value}'. Use HH:MM")
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValidationMissing(f"Invalid time '{value}'. Use HH:MM")
    return hours, minutes


def compute_end_time(start: Optional[str]) -> str:
    """
    Return the end of a session starting at ``start``.

    The hour wraps modulo 24 but the caller's date label is left alone, so a
    23:50 start ends at "01:10" on the same ``date``.
    """
    if not start:
        return "00:00"
    hours, minutes = _parse_hhmm(start)

    end_minutes = minutes + SESSION_MINUTES
    end_hours = hours + SESSION_HOURS
    if end_minutes >= 60:
        end_minutes -= 60
        end_hours += 1

    return f"{end_hours % 24:02d}:{end_minutes:02d}"


def has_conflict(
    sessions: Iterable[Session],
    user_id: str,
    date: str,
    start: str,
    end: str,
) -> bool:
    """
    True when [start, end) overlaps an active session of ``user_id`` on ``date``.

    Only that user's own calendar is checked; two different users may hold
    the same slot with different partners.
    """
    for s in sessions:
        if s.date != date:
            continue
        if s.status in INACTIVE_STATUSES:
            continue
        if not s.involves(user_id):
            continue
        if start < s.end_time and end > s.time:
            return True
    return False
