# skillswap_pro/models/review.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, BigInteger, CheckConstraint
from sqlalchemy.orm import relationship
from skillswap_pro.database import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(String(64), primary_key=True, index=True)
    session_id = Column(String(64), ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    from_user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    to_user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, default="")
    timestamp = Column(BigInteger, nullable=False)

    # Constraints
    __table_args__ = (
        CheckConstraint('rating >= 1 AND rating <= 5', name='check_rating_range'),
    )

    session = relationship("Session", back_populates="reviews")
