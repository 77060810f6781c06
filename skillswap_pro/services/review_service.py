# skillswap_pro/services/review_service.py
"""
Review Ledger
One review per side of a session, with a running average on the reviewed user.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from skillswap_pro.errors import DuplicateReview, PermissionDenied, ValidationMissing
from skillswap_pro.schemas import NotificationType, Review, Session, SessionStatus
from skillswap_pro.services import notification_service, sync
from skillswap_pro.services.session_service import get_session
from skillswap_pro.services.state import AppContext
from skillswap_pro.utils.ratings import running_average

logger = logging.getLogger(__name__)


# ======================
# ELIGIBILITY
# ======================

def has_reviewed(session: Session, user_id: str) -> bool:
    if session.requester_id == user_id:
        return session.requester_reviewed
    if session.provider_id == user_id:
        return session.provider_reviewed
    return False


def can_review(session: Session, user_id: str) -> bool:
    """
    Gate used before offering the review form: the session must be
    completed and the user's own side must not have reviewed it yet.
    ``submit_review`` itself does not re-check the status.
    """
    return (
        session.status == SessionStatus.COMPLETED
        and session.involves(user_id)
        and not has_reviewed(session, user_id)
    )


# ======================
# REVIEW SUBMISSION
# ======================

def submit_review(
    ctx: AppContext,
    session_id: str,
    rating: int,
    comment: str = "",
) -> Optional[Review]:
    """
    Submit a review of the signed-in user's counterparty in a session.

    Returns None (and changes nothing) when the counterparty is not a
    known user.

    Raises:
        ValidationMissing: no signed-in user, or rating outside 1..5
        DuplicateReview: the reviewer's side is already flagged as reviewed
        PermissionDenied: the reviewer did not take part in the session
        SessionNotFound: unknown session id
    """
    reviewer = ctx.require_user()
    if not isinstance(rating, int) or not (1 <= rating <= 5):
        raise ValidationMissing("Rating must be between 1 and 5")

    session = get_session(ctx, session_id)
    if not session.involves(reviewer.id):
        raise PermissionDenied("Only session participants can leave a review")
    if has_reviewed(session, reviewer.id):
        raise DuplicateReview("You have already reviewed this session")

    is_requester = session.requester_id == reviewer.id
    partner_id = session.provider_id if is_requester else session.requester_id
    partner = ctx.state.find_user(partner_id)
    if partner is None:
        logger.info("Review skipped: counterparty %s of session %s is unknown", partner_id, session.id)
        return None

    review = Review(
        id=ctx.new_id("rev"),
        session_id=session.id,
        from_user_id=reviewer.id,
        to_user_id=partner_id,
        rating=rating,
        comment=comment or "",
        timestamp=ctx.now(),
    )

    old_rating = partner.rating or 0.0
    old_count = partner.review_count or 0
    partner.rating = running_average(old_rating, old_count, rating)
    partner.review_count = old_count + 1

    ctx.state.reviews.append(review)
    if is_requester:
        session.requester_reviewed = True
    else:
        session.provider_reviewed = True

    ctx.sync.mirror(sync.SAVE_REVIEW, review.to_wire())

    notification_service.notify(
        ctx,
        partner_id,
        "New Review Received!",
        f"{reviewer.name} gave you {rating} stars.",
        NotificationType.SYSTEM,
    )
    logger.info(
        "Review %s: %s -> %s (%d), new average %.1f over %d",
        review.id, reviewer.id, partner_id, rating, partner.rating, partner.review_count,
    )
    return review


# ======================
# REVIEW RETRIEVAL
# ======================

def reviews_for_user(ctx: AppContext, user_id: str) -> List[Review]:
    """Reviews received by ``user_id``, newest first."""
    received = [r for r in ctx.state.reviews if r.to_user_id == user_id]
    return sorted(received, key=lambda r: r.timestamp, reverse=True)


def reviews_by_user(ctx: AppContext, user_id: str) -> List[Review]:
    given = [r for r in ctx.state.reviews if r.from_user_id == user_id]
    return sorted(given, key=lambda r: r.timestamp, reverse=True)
