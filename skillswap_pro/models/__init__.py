# skillswap_pro/models/__init__.py
# Import models in dependency order
from .skill import Skill
from .user import User, user_skills_offered, user_skills_requested
from .session import Session
from .message import Message
from .review import Review

__all__ = [
    "Skill",
    "User",
    "user_skills_offered",
    "user_skills_requested",
    "Session",
    "Message",
    "Review",
]
