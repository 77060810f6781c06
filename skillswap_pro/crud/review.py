# skillswap_pro/crud/review.py
"""
Review CRUD Operations
Stores a review and folds it into the reviewed user's running average.
"""

from typing import List

from sqlalchemy.orm import Session

from skillswap_pro import models, schemas
from skillswap_pro.utils.ratings import running_average


def to_schema(review: models.Review) -> schemas.Review:
    return schemas.Review(
        id=review.id,
        session_id=review.session_id,
        from_user_id=review.from_user_id,
        to_user_id=review.to_user_id,
        rating=review.rating,
        comment=review.comment or "",
        timestamp=review.timestamp,
    )


def list_reviews(db: Session) -> List[models.Review]:
    return db.query(models.Review).order_by(models.Review.timestamp.desc()).all()


def get_reviews_for_user(db: Session, user_id: str) -> List[models.Review]:
    return (
        db.query(models.Review)
        .filter(models.Review.to_user_id == user_id)
        .order_by(models.Review.timestamp.desc())
        .all()
    )


def create_review(db: Session, review: schemas.Review) -> models.Review:
    """
    Insert a review, update the reviewee's rating summary and flag the
    reviewer's side of the session.

    Raises:
        ValueError: unknown session/reviewee, reviewer outside the session,
            or this side already reviewed
    """
    session = db.query(models.Session).filter(models.Session.id == review.session_id).first()
    if not session:
        raise ValueError("Session not found")

    reviewee = db.query(models.User).filter(models.User.id == review.to_user_id).first()
    if not reviewee:
        raise ValueError("Reviewed user not found")

    if review.from_user_id not in (session.requester_id, session.provider_id):
        raise ValueError("Reviewer did not take part in this session")

    is_requester = session.requester_id == review.from_user_id
    already = session.requester_reviewed if is_requester else session.provider_reviewed
    if already:
        raise ValueError("This side of the session has already been reviewed")

    db_review = models.Review(
        id=review.id,
        session_id=review.session_id,
        from_user_id=review.from_user_id,
        to_user_id=review.to_user_id,
        rating=review.rating,
        comment=review.comment,
        timestamp=review.timestamp,
    )
    db.add(db_review)

    reviewee.rating = running_average(reviewee.rating, reviewee.review_count, review.rating)
    reviewee.review_count = (reviewee.review_count or 0) + 1
    if is_requester:
        session.requester_reviewed = True
    else:
        session.provider_reviewed = True

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_review)
    return db_review
