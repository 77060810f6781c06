from typing import List, Optional

from sqlalchemy.orm import Session

from skillswap_pro import models, schemas
from skillswap_pro.crud import skill as skill_crud
from skillswap_pro.utils.security import CredentialVerifier


def to_schema(user: models.User) -> schemas.User:
    """Public user record; the stored credential never leaves the store."""
    return schemas.User(
        id=user.id,
        name=user.name,
        email=user.email,
        location=user.location or "",
        bio=user.bio or "",
        role=user.role or "user",
        avatar=user.avatar or "",
        skills_offered=[skill_crud.to_schema(s) for s in user.skills_offered],
        skills_requested=[skill_crud.to_schema(s) for s in user.skills_requested],
        rating=user.rating or 0.0,
        review_count=user.review_count or 0,
    )


def get_user(db: Session, user_id: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == (email or "").strip().lower()).first()


def list_users(db: Session) -> List[models.User]:
    return db.query(models.User).all()


def create_user(
    db: Session,
    user: schemas.RegisterRequest,
    verifier: CredentialVerifier,
    *,
    rating: float = 5.0,
) -> models.User:
    email = str(user.email).strip().lower()
    if get_user_by_email(db, email):
        raise ValueError("Email already registered")
    if get_user(db, user.id):
        raise ValueError("User id already taken")

    db_user = models.User(
        id=user.id,
        name=user.name,
        email=email,
        password=verifier.prepare(user.password),
        bio=user.bio,
        location=user.location,
        avatar=user.avatar,
        role="user",
        rating=rating,
        review_count=0,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def authenticate_user(
    db: Session,
    email: str,
    password: str,
    verifier: CredentialVerifier,
) -> Optional[models.User]:
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verifier.verify(user.password, password):
        return None
    return user


def update_profile(db: Session, profile: schemas.ProfileUpdate) -> bool:
    db_user = get_user(db, profile.id)
    if not db_user:
        return False
    db_user.name = profile.name
    db_user.bio = profile.bio
    db_user.location = profile.location
    db.commit()
    return True


def import_user(db: Session, user: schemas.User, verifier: CredentialVerifier) -> models.User:
    """Insert a full user record with its skill links (used for seeding)."""
    db_user = models.User(
        id=user.id,
        name=user.name,
        email=user.email.lower(),
        password=verifier.prepare(user.password or ""),
        location=user.location,
        bio=user.bio,
        role=user.role.value,
        avatar=user.avatar,
        rating=user.rating,
        review_count=user.review_count,
    )
    db_user.skills_offered = [skill_crud.get_skill(db, s.id) for s in user.skills_offered]
    db_user.skills_requested = [skill_crud.get_skill(db, s.id) for s in user.skills_requested]
    db.add(db_user)
    db.flush()
    return db_user
