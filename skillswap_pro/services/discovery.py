# skillswap_pro/services/discovery.py
"""Member search by name, skill, location and category."""

from __future__ import annotations

from typing import List

from skillswap_pro.errors import ValidationMissing
from skillswap_pro.schemas import SkillCategory, User
from skillswap_pro.services.state import AppContext

DISCOVERY_MODES = ("offering", "seeking")


def discover_users(
    ctx: AppContext,
    *,
    search: str = "",
    location: str = "",
    category: str = "All",
    mode: str = "offering",
) -> List[User]:
    """
    Browse other members.

    ``mode="offering"`` matches against what people teach, ``"seeking"``
    against what they want to learn. Admins and the signed-in user are
    never listed. Hidden skills do not count as matches.
    """
    if mode not in DISCOVERY_MODES:
        raise ValidationMissing(f"Unknown discovery mode '{mode}'")
    if category != "All":
        try:
            category = SkillCategory(category)
        except ValueError:
            raise ValidationMissing(f"Unknown category '{category}'")

    term = (search or "").strip().lower()
    place = (location or "").strip().lower()
    hidden = ctx.state.hidden_skill_ids
    results = []

    for user in ctx.state.users:
        if user.id == ctx.current_user_id or user.is_admin:
            continue

        pool = user.skills_offered if mode == "offering" else user.skills_requested
        relevant = [s for s in pool if s.id not in hidden]

        matches_search = not term or term in user.name.lower() or any(
            term in s.name.lower() for s in relevant
        )
        matches_location = place in (user.location or "").lower()
        matches_category = category == "All" or any(s.category == category for s in relevant)

        if matches_search and matches_location and matches_category:
            results.append(user)
    return results
