# skillswap_pro/services/admin_service.py
"""Platform statistics and moderation for admins."""

from __future__ import annotations

from typing import Any, Dict, List

from skillswap_pro.schemas import Session, SessionStatus, Skill
from skillswap_pro.services import session_service
from skillswap_pro.services.state import AppContext


def _count(sessions: List[Session], status: SessionStatus) -> int:
    return sum(1 for s in sessions if s.status == status)


def platform_stats(ctx: AppContext) -> Dict[str, int]:
    ctx.require_admin()
    sessions = ctx.state.sessions
    return {
        "total_users": len(ctx.state.users),
        "active_sessions": _count(sessions, SessionStatus.APPROVED),
        "completed_swaps": _count(sessions, SessionStatus.COMPLETED),
        "cancelled": _count(sessions, SessionStatus.CANCELLED),
    }


def status_breakdown(ctx: AppContext) -> List[Dict[str, Any]]:
    """Session counts per status, in lifecycle order."""
    ctx.require_admin()
    return [
        {"name": status.value, "count": _count(ctx.state.sessions, status)}
        for status in SessionStatus
    ]


def monitor_sessions(ctx: AppContext) -> List[Dict[str, Any]]:
    ctx.require_admin()
    state = ctx.state
    rows = []
    for s in state.sessions:
        requester = state.find_user(s.requester_id)
        provider = state.find_user(s.provider_id)
        skill = state.find_skill(s.skill_id)
        rows.append({
            "id": s.id,
            "requester_name": requester.name if requester else None,
            "provider_name": provider.name if provider else None,
            "skill_name": skill.name if skill else None,
            "date": s.date,
            "time": s.time,
            "end_time": s.end_time,
            "status": s.status.value,
        })
    return rows


def cancel_session(ctx: AppContext, session_id: str) -> Session:
    ctx.require_admin()
    return session_service.cancel(ctx, session_id)


def search_skills(ctx: AppContext, term: str = "") -> List[Skill]:
    ctx.require_admin()
    needle = (term or "").strip().lower()
    return [
        s for s in ctx.state.skills
        if needle in s.name.lower() or needle in s.category.value.lower()
    ]
