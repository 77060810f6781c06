# skillswap_pro/models/user.py
from sqlalchemy import Column, Integer, String, Float, Text, Table, ForeignKey
from sqlalchemy.orm import relationship
from skillswap_pro.database import Base


# ---------------- SKILL LINK TABLES ----------------
user_skills_offered = Table(
    "user_skills_offered",
    Base.metadata,
    Column("user_id", String(64), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String(64), ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)

user_skills_requested = Table(
    "user_skills_requested",
    Base.metadata,
    Column("user_id", String(64), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String(64), ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


# ---------------- USER ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    location = Column(String(150), default="")
    bio = Column(Text, default="")
    role = Column(String(20), nullable=False, default="user")
    avatar = Column(String(255), default="")
    rating = Column(Float, nullable=False, default=0.0)
    review_count = Column(Integer, nullable=False, default=0)

    skills_offered = relationship("Skill", secondary=user_skills_offered, lazy="selectin")
    skills_requested = relationship("Skill", secondary=user_skills_requested, lazy="selectin")
    requested_sessions = relationship("Session", foreign_keys="Session.requester_id", back_populates="requester")
    provided_sessions = relationship("Session", foreign_keys="Session.provider_id", back_populates="provider")
