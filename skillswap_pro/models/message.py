from sqlalchemy import Column, String, Text, BigInteger, ForeignKey
from skillswap_pro.database import Base


class Message(Base):
    __tablename__ = "messages"

    id = Column(String(64), primary_key=True, index=True)
    # Thread key ("<idA>-<idB>", sorted), not a sessions FK
    session_id = Column(String(140), nullable=False, index=True)
    sender_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    text = Column(Text, nullable=False)
    timestamp = Column(BigInteger, nullable=False)
