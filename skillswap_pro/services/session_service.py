# skillswap_pro/services/session_service.py
"""
Session lifecycle: request, status transitions, queries.

Pending -> Approved | Cancelled, Approved -> Completed | Cancelled. The
transition call itself is permissive and overwrites any status with any
other; which buttons to offer is left to the caller.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from pydantic import ValidationError

from skillswap_pro.errors import SchedulingConflict, SessionNotFound, ValidationMissing
from skillswap_pro.schemas import NotificationType, Session, SessionStatus
from skillswap_pro.services import notification_service, sync
from skillswap_pro.services.scheduling import compute_end_time, has_conflict
from skillswap_pro.services.state import AppContext

logger = logging.getLogger(__name__)


def _coerce_status(status: Union[str, SessionStatus]) -> SessionStatus:
    try:
        return SessionStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in SessionStatus)
        raise ValidationMissing(f"Unknown session status '{status}'. Use one of: {allowed}")


# ======================
# QUERIES
# ======================

def get_session(ctx: AppContext, session_id: str) -> Session:
    session = ctx.state.find_session(session_id)
    if session is None:
        raise SessionNotFound(f"Session {session_id} not found")
    return session


def sessions_for_user(
    ctx: AppContext,
    user_id: str,
    status: Optional[Union[str, SessionStatus]] = None,
) -> List[Session]:
    """Get all sessions a user takes part in, optionally filtered by status"""
    wanted = _coerce_status(status) if status is not None else None
    return [
        s for s in ctx.state.sessions
        if s.involves(user_id) and (wanted is None or s.status == wanted)
    ]


# ======================
# CREATE SESSION REQUEST
# ======================

def request_swap(
    ctx: AppContext,
    provider_id: Optional[str],
    skill_id: Optional[str],
    date: Optional[str],
    time: Optional[str],
) -> Session:
    """
    Ask ``provider_id`` for a session teaching ``skill_id``.

    Only the requester's calendar is checked for overlaps. On conflict
    nothing is stored and ``SchedulingConflict`` is raised.
    """
    requester = ctx.require_user()

    missing = [
        name for name, value in (
            ("provider", provider_id),
            ("skill", skill_id),
            ("date", date),
            ("time", time),
        )
        if not value
    ]
    if missing:
        raise ValidationMissing(f"Missing required field(s): {', '.join(missing)}")

    end_time = compute_end_time(time)
    if has_conflict(ctx.state.sessions, requester.id, date, time, end_time):
        raise SchedulingConflict(
            "Scheduling conflict! You already have a session during this time."
        )

    try:
        new_session = Session(
            id=ctx.new_id("sess"),
            requester_id=requester.id,
            provider_id=provider_id,
            skill_id=skill_id,
            date=date,
            time=time,
            end_time=end_time,
            status=SessionStatus.PENDING,
        )
    except ValidationError as exc:
        raise ValidationMissing(f"Invalid session request: {exc.errors()[0]['msg']}")

    ctx.state.sessions.append(new_session)

    skill = ctx.state.find_skill(skill_id)
    skill_name = skill.name if skill else skill_id
    notification_service.notify(
        ctx,
        provider_id,
        "New Session Request",
        f"{requester.name} wants to learn {skill_name}.",
        NotificationType.SESSION,
    )

    ctx.sync.mirror(sync.SAVE_SESSION, new_session.to_wire())
    logger.info(
        "Session %s requested by %s with %s on %s %s-%s",
        new_session.id, requester.id, provider_id, date, time, end_time,
    )
    return new_session


# ======================
# STATUS TRANSITIONS
# ======================

def transition_status(
    ctx: AppContext,
    session_id: str,
    new_status: Union[str, SessionStatus],
) -> Session:
    """
    Overwrite the session status and tell the other participant.

    The notification goes to whichever participant is not the signed-in
    user; when an outsider (e.g. an admin) acts, the requester is told.
    """
    status = _coerce_status(new_status)
    session = get_session(ctx, session_id)

    previous = session.status
    session.status = status

    notification_service.notify(
        ctx,
        session.counterparty_of(ctx.current_user_id),
        f"Session {status.value}",
        f"Your session on {session.date} is now {status.value}.",
        NotificationType.SESSION,
    )

    ctx.sync.mirror(
        sync.UPDATE_SESSION_STATUS,
        {"id": session.id, "status": status.value},
    )
    logger.info("Session %s: %s -> %s", session.id, previous.value, status.value)
    return session


def approve(ctx: AppContext, session_id: str) -> Session:
    return transition_status(ctx, session_id, SessionStatus.APPROVED)


def complete(ctx: AppContext, session_id: str) -> Session:
    return transition_status(ctx, session_id, SessionStatus.COMPLETED)


def cancel(ctx: AppContext, session_id: str) -> Session:
    return transition_status(ctx, session_id, SessionStatus.CANCELLED)
