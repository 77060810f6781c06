from pydantic import Field

from .common import WireModel


class Review(WireModel):
    id: str
    session_id: str
    from_user_id: str
    to_user_id: str
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5 stars")
    comment: str = ""
    timestamp: int
