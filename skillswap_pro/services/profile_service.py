# skillswap_pro/services/profile_service.py
"""Profile edits and the shared skill catalog."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from skillswap_pro.errors import ValidationMissing
from skillswap_pro.schemas import Skill, SkillCategory, User
from skillswap_pro.services import sync
from skillswap_pro.services.state import AppContext

logger = logging.getLogger(__name__)


# ======================
# PROFILE
# ======================

def update_profile(
    ctx: AppContext,
    *,
    name: Optional[str] = None,
    bio: Optional[str] = None,
    location: Optional[str] = None,
    avatar: Optional[str] = None,
) -> User:
    user = ctx.require_user()
    if name is not None:
        if not name.strip():
            raise ValidationMissing("Name cannot be empty")
        user.name = name.strip()
    if bio is not None:
        user.bio = bio
    if location is not None:
        user.location = location
    if avatar is not None:
        user.avatar = avatar

    ctx.sync.mirror(
        sync.UPDATE_PROFILE,
        {"id": user.id, "name": user.name, "bio": user.bio, "location": user.location},
    )
    return user


def set_user_skills(
    ctx: AppContext,
    *,
    offered_ids: Optional[Iterable[str]] = None,
    requested_ids: Optional[Iterable[str]] = None,
) -> User:
    """Replace the signed-in user's skill lists (local only; the store has no action for it)."""
    user = ctx.require_user()
    if offered_ids is not None:
        user.skills_offered = _resolve_skills(ctx, offered_ids)
    if requested_ids is not None:
        user.skills_requested = _resolve_skills(ctx, requested_ids)
    return user


def _resolve_skills(ctx: AppContext, skill_ids: Iterable[str]) -> List[Skill]:
    resolved = []
    for skill_id in skill_ids:
        skill = ctx.state.find_skill(skill_id)
        if skill is None:
            raise ValidationMissing(f"Unknown skill '{skill_id}'")
        if skill not in resolved:
            resolved.append(skill)
    return resolved


# ======================
# SKILL CATALOG
# ======================

def add_global_skill(ctx: AppContext, name: str, category: str) -> Skill:
    if not name or not name.strip():
        raise ValidationMissing("Skill name is required")
    try:
        skill = Skill(id=ctx.new_id("s"), name=name.strip(), category=SkillCategory(category))
    except (ValueError, ValidationError):
        allowed = ", ".join(c.value for c in SkillCategory)
        raise ValidationMissing(f"Unknown category '{category}'. Use one of: {allowed}")

    ctx.state.skills.append(skill)
    ctx.sync.mirror(sync.ADD_SKILL, skill.to_wire())
    return skill


def delete_skill(ctx: AppContext, skill_id: str) -> bool:
    """
    Hide a skill from the catalog (admin only).

    Users and sessions keep their references; nothing is mirrored because
    the remote store has no delete action. Returns False for unknown ids.
    """
    ctx.require_admin()
    if ctx.state.find_skill(skill_id) is None:
        return False
    ctx.state.hidden_skill_ids.add(skill_id)
    logger.info("Skill %s hidden from catalog", skill_id)
    return True


def visible_skills(ctx: AppContext) -> List[Skill]:
    hidden = ctx.state.hidden_skill_ids
    return [s for s in ctx.state.skills if s.id not in hidden]
