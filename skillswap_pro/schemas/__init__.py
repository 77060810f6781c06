# skillswap_pro/schemas/__init__.py

from .common import (
    INACTIVE_STATUSES,
    NotificationType,
    SessionStatus,
    SkillCategory,
    UserRole,
    WireModel,
)
from .message import Message
from .notification import Notification, NotificationMetadata
from .review import Review
from .session import Session, SessionStatusUpdate
from .skill import Skill
from .snapshot import ActionResult, Snapshot
from .user import LoginRequest, ProfileUpdate, RegisterRequest, User

__all__ = [
    "INACTIVE_STATUSES",
    "NotificationType",
    "SessionStatus",
    "SkillCategory",
    "UserRole",
    "WireModel",
    "Message",
    "Notification",
    "NotificationMetadata",
    "Review",
    "Session",
    "SessionStatusUpdate",
    "Skill",
    "ActionResult",
    "Snapshot",
    "LoginRequest",
    "ProfileUpdate",
    "RegisterRequest",
    "User",
]
