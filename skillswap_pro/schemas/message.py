from pydantic import Field

from .common import WireModel


class Message(WireModel):
    id: str
    # Thread key of the two participants, not a Session reference.
    session_id: str
    sender_id: str
    text: str = Field(..., min_length=1)
    timestamp: int
