"""
Load the demo community (skills, users, sessions) into an empty store.

    ENABLE_DEMO_SEED=true python -m skillswap_pro.scripts.seed_demo
"""

import logging
import os
import sys
from typing import Optional

from skillswap_pro import crud, models
from skillswap_pro.config import settings
from skillswap_pro.database import Base, SessionLocal, engine
from skillswap_pro.fixtures import demo_snapshot
from skillswap_pro.logging_config import configure_logging
from skillswap_pro.utils.security import get_verifier

logger = logging.getLogger(__name__)


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def seed_demo(db) -> int:
    """Insert the fixtures; returns the number of users created."""
    if db.query(models.User).count() > 0:
        raise ValueError("Seed blocked: the store already has users.")

    snapshot = demo_snapshot()
    verifier = get_verifier()

    for skill in snapshot.skills:
        db.add(models.Skill(id=skill.id, name=skill.name, category=skill.category.value))
    db.flush()

    for user in snapshot.users:
        crud.user.import_user(db, user, verifier)

    for session in snapshot.sessions:
        db.add(models.Session(
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
        ))

    db.commit()
    return len(snapshot.users)


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    try:
        if not _is_truthy(os.getenv("ENABLE_DEMO_SEED")):
            raise ValueError("Seeding disabled. Set ENABLE_DEMO_SEED=true to run.")

        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            created = seed_demo(db)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
        logger.info("Seeded %d demo users", created)
        return 0
    except Exception as exc:
        print(f"Demo seed failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
