from typing import List, Optional

from sqlalchemy.orm import Session

from skillswap_pro import models, schemas


def to_schema(skill: models.Skill) -> schemas.Skill:
    return schemas.Skill(id=skill.id, name=skill.name, category=skill.category or "Programming")


def get_skill(db: Session, skill_id: str) -> Optional[models.Skill]:
    return db.query(models.Skill).filter(models.Skill.id == skill_id).first()


def list_skills(db: Session) -> List[models.Skill]:
    return db.query(models.Skill).order_by(models.Skill.name).all()


def add_skill(db: Session, skill: schemas.Skill) -> models.Skill:
    if get_skill(db, skill.id):
        raise ValueError(f"Skill {skill.id} already exists")
    db_skill = models.Skill(id=skill.id, name=skill.name, category=skill.category.value)
    db.add(db_skill)
    db.commit()
    db.refresh(db_skill)
    return db_skill
