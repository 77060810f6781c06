# skillswap_pro/services/sync.py
"""
Remote store access and best-effort mirroring.

Local state always changes first; the remote copy is updated afterwards, in order, by a
single worker thread. Failed mirror calls are logged and dropped (no retry), so
the remote store may lag behind or diverge from local state.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from skillswap_pro.config import settings
from skillswap_pro.errors import RemoteRejected, RemoteSyncFailure, RemoteUnavailable
from skillswap_pro.schemas import Snapshot, User

logger = logging.getLogger(__name__)


# Actions accepted by the remote store
INIT = "init"
LOGIN = "login"
REGISTER = "register"
SAVE_SESSION = "save_session"
UPDATE_SESSION_STATUS = "update_session_status"
SAVE_REVIEW = "save_review"
UPDATE_PROFILE = "update_profile"
ADD_SKILL = "add_skill"
SEND_MESSAGE = "send_message"


class RemoteStoreClient:
    """Thin client for the action-keyed remote store endpoint."""

    def __init__(
        self,
        base_url: str = settings.REMOTE_STORE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = settings.SYNC_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    def _request(self, method: str, action: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._client.request(
                method,
                self.base_url,
                params={"action": action},
                json=payload,
            )
        except httpx.HTTPError as exc:
            raise RemoteUnavailable(f"Remote store unreachable ({action}): {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if response.is_error or error:
            raise RemoteRejected(
                error or f"HTTP {response.status_code} for action '{action}'",
                status_code=response.status_code,
            )
        return body

    def fetch_snapshot(self) -> Snapshot:
        body = self._request("GET", INIT)
        try:
            return Snapshot.model_validate(body or {})
        except ValidationError as exc:
            raise RemoteUnavailable(f"Malformed init snapshot: {exc}") from exc

    def call(self, action: str, payload: Dict[str, Any]) -> Any:
        return self._request("POST", action, payload)

    def login(self, email: str, password: str) -> User:
        return User.model_validate(self.call(LOGIN, {"email": email, "password": password}))

    def register(self, record: Dict[str, Any]) -> User:
        return User.model_validate(self.call(REGISTER, record))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


# Queue marker that stops the worker
_STOP = object()


class SyncAdapter:
    """
    Fire-and-forget mirror of local mutations.

    Background adapters hand writes to one worker thread through a FIFO
    queue, so the remote store sees them in the order they were made.
    Disabled adapters (offline/demo mode, or no remote configured) never
    touch the network.
    """

    def __init__(
        self,
        remote: Optional[RemoteStoreClient] = None,
        enabled: bool = True,
        background: bool = settings.SYNC_IN_BACKGROUND,
    ):
        self.remote = remote
        self.background = background
        self._enabled = enabled
        self._lock = threading.Lock()
        self._outbox: "queue.Queue" = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self.failure_count = 0

    @property
    def enabled(self) -> bool:
        return self._enabled and self.remote is not None

    def disable(self) -> None:
        self._enabled = False

    def mirror(self, action: str, payload: Dict[str, Any]) -> None:
        """Send ``payload`` under ``action`` without blocking the caller."""
        if not self.enabled:
            logger.debug("Sync disabled; skipping %s", action)
            return

        if not self.background:
            self._deliver(action, payload)
            return

        self._ensure_worker()
        self._outbox.put((action, payload))

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until every queued write has been attempted.

        Returns False if ``timeout`` seconds pass first.
        """
        if self._worker is None:
            return True
        if timeout is None:
            self._outbox.join()
            return True

        done = threading.Event()

        def _wait():
            self._outbox.join()
            done.set()

        threading.Thread(target=_wait, name="mirror-flush", daemon=True).start()
        return done.wait(timeout)

    def close(self, timeout: Optional[float] = None) -> None:
        """Deliver pending writes, then stop the worker."""
        with self._lock:
            worker, self._worker = self._worker, None
        if worker is None:
            return
        self._outbox.put(_STOP)
        worker.join(timeout)

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is not None and self._worker.is_alive():
                return
            self._worker = threading.Thread(
                target=self._drain,
                name="mirror-worker",
                daemon=True,
            )
            self._worker.start()

    def _drain(self) -> None:
        while True:
            item = self._outbox.get()
            try:
                if item is _STOP:
                    return
                self._deliver(*item)
            finally:
                self._outbox.task_done()

    def _deliver(self, action: str, payload: Dict[str, Any]) -> bool:
        try:
            self.remote.call(action, payload)
            return True
        except Exception as exc:
            failure = exc if isinstance(exc, RemoteSyncFailure) else RemoteSyncFailure(str(exc))
            with self._lock:
                self.failure_count += 1
            logger.warning("Remote sync failed (action=%s): %s", action, failure)
            return False
