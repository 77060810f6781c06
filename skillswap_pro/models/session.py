# skillswap_pro/models/session.py
from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from skillswap_pro.database import Base


class Session(Base):
    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True, index=True)
    requester_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    provider_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    skill_id = Column(String(64), ForeignKey("skills.id"))
    date = Column(String(10), nullable=False, index=True)   # YYYY-MM-DD
    time = Column(String(5), nullable=False)                # HH:MM
    end_time = Column(String(5), nullable=False)            # HH:MM
    status = Column(String(20), nullable=False, default="Pending")
    notes = Column(String, nullable=True)
    requester_reviewed = Column(Boolean, nullable=False, default=False)
    provider_reviewed = Column(Boolean, nullable=False, default=False)

    # Relationships
    requester = relationship("User", foreign_keys=[requester_id], back_populates="requested_sessions")
    provider = relationship("User", foreign_keys=[provider_id], back_populates="provided_sessions")
    skill = relationship("Skill", back_populates="sessions")
    reviews = relationship("Review", back_populates="session")
