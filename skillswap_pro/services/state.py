# skillswap_pro/services/state.py
"""
Session-scoped application state.

``AppState`` holds every entity the signed-in client knows about.
``AppContext`` owns one ``AppState`` together with the signed-in user, the
sync adapter and the online/offline flag; every service function takes the
context explicitly.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from skillswap_pro import fixtures
from skillswap_pro.errors import PermissionDenied, RemoteUnavailable, SkillSwapError, ValidationMissing
from skillswap_pro.schemas import (
    Message,
    Notification,
    Review,
    Session,
    Skill,
    Snapshot,
    User,
)
from skillswap_pro.services.sync import RemoteStoreClient, SyncAdapter
from skillswap_pro.utils.security import CredentialVerifier, get_verifier

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class AppState:
    users: List[User] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    sessions: List[Session] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)
    # Newest first
    notifications: List[Notification] = field(default_factory=list)
    hidden_skill_ids: Set[str] = field(default_factory=set)

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "AppState":
        return cls(
            users=list(snapshot.users),
            skills=list(snapshot.skills),
            sessions=list(snapshot.sessions),
            messages=list(snapshot.messages),
            reviews=list(snapshot.reviews),
        )

    def find_user(self, user_id: Optional[str]) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[User]:
        key = (email or "").strip().lower()
        return next((u for u in self.users if u.email.lower() == key), None)

    def find_skill(self, skill_id: Optional[str]) -> Optional[Skill]:
        return next((s for s in self.skills if s.id == skill_id), None)

    def find_session(self, session_id: Optional[str]) -> Optional[Session]:
        return next((s for s in self.sessions if s.id == session_id), None)

    def upsert_user(self, user: User) -> User:
        for index, existing in enumerate(self.users):
            if existing.id == user.id:
                self.users[index] = user
                return user
        self.users.append(user)
        return user


class AppContext:
    def __init__(
        self,
        state: Optional[AppState] = None,
        sync: Optional[SyncAdapter] = None,
        offline: bool = False,
        verifier: Optional[CredentialVerifier] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.state = state if state is not None else AppState()
        self.sync = sync if sync is not None else SyncAdapter(remote=None, enabled=False)
        self.offline = offline
        self.verifier = verifier or get_verifier()
        self.clock = clock
        self.current_user_id: Optional[str] = None
        self._issued_ids: Set[str] = set()

        if self.offline:
            self.sync.disable()

    @classmethod
    def bootstrap(
        cls,
        remote: RemoteStoreClient,
        *,
        background: Optional[bool] = None,
        verifier: Optional[CredentialVerifier] = None,
        clock: Callable[[], int] = now_ms,
    ) -> "AppContext":
        """
        Load the initial snapshot once and pick the operating mode.

        A failed bulk fetch switches the whole context to offline/demo mode:
        state comes from the demo fixtures and mirroring is disabled for the
        lifetime of the context.
        """
        sync_kwargs = {} if background is None else {"background": background}
        try:
            snapshot = remote.fetch_snapshot()
        except SkillSwapError as exc:
            unavailable = exc if isinstance(exc, RemoteUnavailable) else RemoteUnavailable(str(exc))
            logger.warning("Backend connection failed, demo mode active: %s", unavailable)
            return cls(
                state=AppState.from_snapshot(fixtures.demo_snapshot()),
                sync=SyncAdapter(remote=None, enabled=False, **sync_kwargs),
                offline=True,
                verifier=verifier,
                clock=clock,
            )

        logger.info(
            "Loaded remote snapshot: %d users, %d skills, %d sessions",
            len(snapshot.users),
            len(snapshot.skills),
            len(snapshot.sessions),
        )
        return cls(
            state=AppState.from_snapshot(snapshot),
            sync=SyncAdapter(remote=remote, enabled=True, **sync_kwargs),
            offline=False,
            verifier=verifier,
            clock=clock,
        )

    # ----------------------
    # signed-in user
    # ----------------------

    @property
    def current_user(self) -> Optional[User]:
        return self.state.find_user(self.current_user_id)

    def require_user(self) -> User:
        user = self.current_user
        if user is None:
            raise ValidationMissing("No signed-in user")
        return user

    def require_admin(self) -> User:
        user = self.require_user()
        if not user.is_admin:
            raise PermissionDenied("Admin role required")
        return user

    # ----------------------
    # ids and time
    # ----------------------

    def now(self) -> int:
        return self.clock()

    def new_id(self, prefix: str) -> str:
        """``<prefix>-<epoch ms>``, suffixed when the same millisecond repeats."""
        base = f"{prefix}-{self.now()}"
        candidate = base
        suffix = 1
        while candidate in self._issued_ids:
            candidate = f"{base}-{suffix}"
            suffix += 1
        self._issued_ids.add(candidate)
        return candidate
