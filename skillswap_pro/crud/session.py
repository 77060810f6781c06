from typing import List, Optional

from sqlalchemy.orm import Session

from skillswap_pro import models, schemas
from skillswap_pro.errors import SchedulingConflict
from skillswap_pro.services.scheduling import has_conflict


def to_schema(session: models.Session) -> schemas.Session:
    return schemas.Session(
        id=session.id,
        requester_id=session.requester_id,
        provider_id=session.provider_id,
        skill_id=session.skill_id,
        date=session.date,
        time=session.time,
        end_time=session.end_time,
        status=session.status,
        notes=session.notes,
        requester_reviewed=bool(session.requester_reviewed),
        provider_reviewed=bool(session.provider_reviewed),
    )


def get_session(db: Session, session_id: str) -> Optional[models.Session]:
    return db.query(models.Session).filter(models.Session.id == session_id).first()


def list_sessions(db: Session) -> List[models.Session]:
    return db.query(models.Session).order_by(models.Session.date, models.Session.time).all()


def sessions_on_date(db: Session, user_id: str, date: str) -> List[models.Session]:
    return db.query(models.Session).filter(
        models.Session.date == date,
        (models.Session.requester_id == user_id) | (models.Session.provider_id == user_id),
    ).all()


def create_session(db: Session, session: schemas.Session) -> models.Session:
    """
    Store a new session request.

    The requester's calendar is re-checked here so two clients cannot both
    book overlapping slots for the same requester.
    """
    if get_session(db, session.id):
        raise ValueError(f"Session {session.id} already exists")

    existing = [to_schema(s) for s in sessions_on_date(db, session.requester_id, session.date)]
    if has_conflict(existing, session.requester_id, session.date, session.time, session.end_time):
        raise SchedulingConflict("Scheduling conflict! Requester already has a session during this time.")

    db_session = models.Session(
        id=session.id,
        requester_id=session.requester_id,
        provider_id=session.provider_id,
        skill_id=session.skill_id,
        date=session.date,
        time=session.time,
        end_time=session.end_time,
        status=session.status.value,
        notes=session.notes,
        requester_reviewed=session.requester_reviewed,
        provider_reviewed=session.provider_reviewed,
    )
    db.add(db_session)
    db.commit()
    db.refresh(db_session)
    return db_session


def update_status(db: Session, update: schemas.SessionStatusUpdate) -> bool:
    """Overwrite the status column only; no transition checks."""
    db_session = get_session(db, update.id)
    if not db_session:
        return False
    db_session.status = update.status.value
    db.commit()
    return True
