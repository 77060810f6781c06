# skillswap_pro/schemas/common.py
import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class SkillCategory(str, enum.Enum):
    PROGRAMMING = "Programming"
    MUSIC = "Music"
    DESIGN = "Design"
    MARKETING = "Marketing"
    LANGUAGES = "Languages"
    COOKING = "Cooking"
    BUSINESS = "Business"
    GAME = "Game"
    ART = "Art"


class SessionStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# Statuses that no longer occupy a time slot
INACTIVE_STATUSES = (SessionStatus.CANCELLED, SessionStatus.COMPLETED)


class NotificationType(str, enum.Enum):
    MESSAGE = "message"
    SESSION = "session"
    SYSTEM = "system"


class WireModel(BaseModel):
    """Base for records exchanged with the remote store (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
