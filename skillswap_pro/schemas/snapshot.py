from typing import List

from pydantic import Field

from .common import WireModel
from .message import Message
from .review import Review
from .session import Session
from .skill import Skill
from .user import User


class Snapshot(WireModel):
    """Bulk payload answered by the ``init`` action."""
    users: List[User] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    sessions: List[Session] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    reviews: List[Review] = Field(default_factory=list)


class ActionResult(WireModel):
    success: bool = True
