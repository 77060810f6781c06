from typing import Optional

from pydantic import Field

from .common import SessionStatus, WireModel

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"


class Session(WireModel):
    id: str
    requester_id: str
    provider_id: str
    skill_id: str
    date: str = Field(..., pattern=DATE_PATTERN)
    time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    status: SessionStatus = SessionStatus.PENDING
    notes: Optional[str] = None
    requester_reviewed: bool = False
    provider_reviewed: bool = False

    def involves(self, user_id: str) -> bool:
        return user_id in (self.requester_id, self.provider_id)

    def counterparty_of(self, user_id: str) -> str:
        """Get the other party in a session"""
        return self.provider_id if self.requester_id == user_id else self.requester_id


class SessionStatusUpdate(WireModel):
    id: str
    status: SessionStatus
