from typing import List, Optional

from pydantic import EmailStr, Field

from .common import UserRole, WireModel
from .skill import Skill


# ======================
# USER RECORD
# ======================

class User(WireModel):
    id: str
    name: str
    email: str
    # Opaque credential; only the credential verifier interprets it.
    password: Optional[str] = None
    location: str = ""
    bio: str = ""
    role: UserRole = UserRole.USER
    avatar: str = ""
    skills_offered: List[Skill] = Field(default_factory=list)
    skills_requested: List[Skill] = Field(default_factory=list)
    rating: float = 0.0
    review_count: int = Field(0, ge=0)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def public(self) -> "User":
        """Copy without the credential, as sent back by the remote store."""
        return self.model_copy(update={"password": None})


# ======================
# AUTH / PROFILE PAYLOADS
# ======================

class LoginRequest(WireModel):
    email: str
    password: str


class RegisterRequest(WireModel):
    id: str
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    bio: str = ""
    location: str = "New Member"
    avatar: str = ""


class ProfileUpdate(WireModel):
    id: str
    name: str
    bio: str = ""
    location: str = ""
