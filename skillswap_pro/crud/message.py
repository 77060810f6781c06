from typing import List

from sqlalchemy.orm import Session

from skillswap_pro import models, schemas


def to_schema(message: models.Message) -> schemas.Message:
    return schemas.Message(
        id=message.id,
        session_id=message.session_id,
        sender_id=message.sender_id,
        text=message.text,
        timestamp=message.timestamp,
    )


def list_messages(db: Session) -> List[models.Message]:
    return db.query(models.Message).order_by(models.Message.timestamp).all()


def create_message(db: Session, message: schemas.Message) -> models.Message:
    db_message = models.Message(
        id=message.id,
        session_id=message.session_id,
        sender_id=message.sender_id,
        text=message.text,
        timestamp=message.timestamp,
    )
    db.add(db_message)
    db.commit()
    return db_message
