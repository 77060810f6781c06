# skillswap_pro/services/recommendation.py
"""
Smart Match
Partner recommendations from an LLM ranking oracle, with a skill-overlap
heuristic when no API key is configured.
"""

from __future__ import annotations

import json
import logging
import re
from typing import List, Optional, Protocol

import anthropic

from skillswap_pro.config import settings
from skillswap_pro.schemas import User
from skillswap_pro.services.state import AppContext

logger = logging.getLogger(__name__)

# Heuristic weights
WEIGHT_THEY_TEACH_WHAT_I_WANT = 10
WEIGHT_THEY_WANT_WHAT_I_TEACH = 5


class RankingOracle(Protocol):
    def rank(self, current: User, candidates: List[User], limit: int) -> List[str]:
        """Return up to ``limit`` candidate ids, best first."""
        ...


def candidate_pool(current: User, users: List[User]) -> List[User]:
    return [u for u in users if u.id != current.id and not u.is_admin]


def score_candidate(current: User, candidate: User) -> int:
    wanted = {s.id for s in current.skills_requested}
    offered = {s.id for s in current.skills_offered}
    teaches = sum(1 for s in candidate.skills_offered if s.id in wanted)
    learns = sum(1 for s in candidate.skills_requested if s.id in offered)
    return teaches * WEIGHT_THEY_TEACH_WHAT_I_WANT + learns * WEIGHT_THEY_WANT_WHAT_I_TEACH


def heuristic_recommendations(
    current: User,
    users: List[User],
    limit: int = settings.RECOMMENDATION_LIMIT,
) -> List[str]:
    """
    Rank by skill overlap. Ties keep pool order (stable sort); with no
    positive score at all, the first ``limit`` candidates are returned.
    """
    others = candidate_pool(current, users)
    scored = [(u.id, score_candidate(current, u)) for u in others]
    matches = sorted(
        [(uid, score) for uid, score in scored if score > 0],
        key=lambda item: item[1],
        reverse=True,
    )
    if not matches:
        return [u.id for u in others[:limit]]
    return [uid for uid, _ in matches[:limit]]


# ======================
# LLM ORACLE
# ======================

PROMPT_TEMPLATE = """Act as a talent scout for a skill exchange platform. Match the current user with the {limit} best potential partners from the list.

Current User Profile:
- Name: {name}
- Bio: {bio}
- Teaches: {teaches}
- Wants: {wants}

Potential Partners List:
{partners}

Evaluate based on:
1. Direct skill overlaps (they teach what I want).
2. Mutual benefit (I teach what they want).
3. Personality/Bio compatibility.

Return ONLY a JSON object with a key "recommendedIds" containing an array of ID strings."""


def _skill_names(skills) -> str:
    return ", ".join(s.name for s in skills)


def build_prompt(current: User, candidates: List[User], limit: int) -> str:
    partners = "\n".join(
        f"ID: {u.id}\nName: {u.name}\nBio: {u.bio}\n"
        f"Teaches: {_skill_names(u.skills_offered)}\nWants: {_skill_names(u.skills_requested)}\n"
        for u in candidates
    )
    return PROMPT_TEMPLATE.format(
        limit=limit,
        name=current.name,
        bio=current.bio,
        teaches=_skill_names(current.skills_offered),
        wants=_skill_names(current.skills_requested),
        partners=partners,
    )


def parse_recommended_ids(text: str) -> List[str]:
    match = re.search(r"\{.*\}", text or "", re.DOTALL)
    if not match:
        return []
    parsed = json.loads(match.group(0))
    ids = parsed.get("recommendedIds") or []
    return [str(i) for i in ids]


class ClaudeRankingOracle:
    """RankingOracle backed by the Anthropic Messages API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = settings.RECOMMENDATION_MODEL,
        max_tokens: int = 512,
        client: Optional[anthropic.Anthropic] = None,
    ):
        self._client = client or anthropic.Anthropic(api_key=api_key)
        self._model = model
        self._max_tokens = max_tokens

    def rank(self, current: User, candidates: List[User], limit: int) -> List[str]:
        response = self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            messages=[{"role": "user", "content": build_prompt(current, candidates, limit)}],
        )
        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return parse_recommended_ids(text)


def default_oracle() -> Optional[RankingOracle]:
    if not settings.ANTHROPIC_API_KEY:
        return None
    return ClaudeRankingOracle(api_key=settings.ANTHROPIC_API_KEY)


# ======================
# ENTRY POINT
# ======================

def recommend_partners(
    ctx: AppContext,
    oracle: Optional[RankingOracle] = None,
    limit: int = settings.RECOMMENDATION_LIMIT,
) -> List[User]:
    current = ctx.require_user()
    others = candidate_pool(current, ctx.state.users)
    if not others:
        return []

    oracle = oracle or default_oracle()
    if oracle is None:
        logger.info("Smart Match: no API key configured, using heuristic matching")
        ids = heuristic_recommendations(current, ctx.state.users, limit)
    else:
        try:
            known = {u.id for u in others}
            ranked = dict.fromkeys(i for i in oracle.rank(current, others, limit) if i in known)
            ids = list(ranked)[:limit]
        except Exception as exc:
            logger.warning("Smart Match oracle failed, falling back: %s", exc)
            ids = [u.id for u in others[:limit]]

    by_id = {u.id: u for u in others}
    return [by_id[i] for i in ids]
