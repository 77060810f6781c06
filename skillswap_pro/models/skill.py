from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from skillswap_pro.database import Base


# skillswap_pro/models/skill.py
class Skill(Base):
    __tablename__ = "skills"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    category = Column(String(50), default="Programming")

    sessions = relationship("Session", back_populates="skill")
