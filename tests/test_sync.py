import json
import threading
import time

import httpx
import pytest

from skillswap_pro.errors import RemoteRejected, RemoteUnavailable
from skillswap_pro.fixtures import demo_snapshot
from skillswap_pro.services import session_service, sync
from skillswap_pro.services.state import AppContext
from skillswap_pro.services.sync import RemoteStoreClient, SyncAdapter


class RecordingTransport:
    """Answers every request with ``handler`` and keeps the requests seen."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def actions(self):
        return [r.url.params.get("action") for r in self.requests]


def _client(handler):
    recorder = RecordingTransport(handler)
    http = httpx.Client(transport=httpx.MockTransport(recorder))
    return RemoteStoreClient(base_url="http://store.test/api", http_client=http), recorder


def _refuse(request):
    raise httpx.ConnectError("connection refused", request=request)


def test_fetch_snapshot_parses_camel_case_payload():
    payload = demo_snapshot().to_wire()

    remote, recorder = _client(lambda request: httpx.Response(200, json=payload))
    snapshot = remote.fetch_snapshot()

    assert recorder.actions() == ["init"]
    assert recorder.requests[0].method == "GET"
    assert [u.id for u in snapshot.users] == ["u1", "u2", "u3", "admin1"]
    assert snapshot.users[0].skills_offered[0].name == "React Development"
    assert snapshot.sessions[0].end_time == "15:20"


def test_unreachable_store_raises_remote_unavailable():
    remote, _ = _client(_refuse)
    with pytest.raises(RemoteUnavailable):
        remote.fetch_snapshot()


def test_error_body_raises_remote_rejected():
    remote, _ = _client(lambda request: httpx.Response(401, json={"error": "Invalid credentials"}))
    with pytest.raises(RemoteRejected) as excinfo:
        remote.login("alex@example.com", "wrong")
    assert excinfo.value.status_code == 401
    assert "Invalid credentials" in str(excinfo.value)


def test_bootstrap_falls_back_to_demo_mode_and_stays_offline():
    remote, recorder = _client(_refuse)

    ctx = AppContext.bootstrap(remote, background=False)

    assert ctx.offline is True
    assert ctx.sync.enabled is False
    assert {u.id for u in ctx.state.users} == {"u1", "u2", "u3", "admin1"}

    ctx.current_user_id = "u1"
    session = session_service.request_swap(ctx, "u2", "s3", "2024-06-01", "09:00")
    session_service.approve(ctx, session.id)

    # Only the failed init ever reached the transport
    assert recorder.actions() == ["init"]


def test_mirror_failures_are_logged_and_swallowed(caplog):
    remote, recorder = _client(lambda request: httpx.Response(500, json={"error": "boom"}))
    adapter = SyncAdapter(remote=remote, enabled=True, background=False)

    with caplog.at_level("WARNING", logger="skillswap_pro.services.sync"):
        assert adapter.mirror(sync.SAVE_SESSION, {"id": "x"}) is None

    assert adapter.failure_count == 1
    assert recorder.actions() == ["save_session"]
    assert "Remote sync failed" in caplog.text


def test_mirror_runs_on_a_background_thread():
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"success": True})

    remote, _ = _client(handler)
    adapter = SyncAdapter(remote=remote, enabled=True, background=True)

    adapter.mirror(sync.UPDATE_SESSION_STATUS, {"id": "sess2", "status": "Completed"})
    assert adapter.flush(timeout=5) is True
    adapter.close(timeout=5)

    assert seen == [{"id": "sess2", "status": "Completed"}]
    assert adapter.failure_count == 0


def test_local_state_survives_rejected_mirror():
    snapshot = demo_snapshot().to_wire()

    def handler(request):
        if request.url.params.get("action") == "init":
            return httpx.Response(200, json=snapshot)
        return httpx.Response(503, json={"error": "maintenance"})

    remote, recorder = _client(handler)
    ctx = AppContext.bootstrap(remote, background=False)
    ctx.current_user_id = "u1"

    session = session_service.request_swap(ctx, "u2", "s3", "2024-06-01", "09:00")

    assert ctx.offline is False
    assert ctx.state.find_session(session.id) is session
    assert recorder.actions() == ["init", "save_session"]
    assert ctx.sync.failure_count == 1


def test_background_writes_reach_the_store_in_call_order():
    snapshot = demo_snapshot().to_wire()
    arrived = []

    def handler(request):
        action = request.url.params.get("action")
        if action == "init":
            return httpx.Response(200, json=snapshot)
        if action == "save_session":
            time.sleep(0.3)
        arrived.append(action)
        return httpx.Response(200, json={"success": True})

    remote, _ = _client(handler)
    ctx = AppContext.bootstrap(remote, background=True)
    ctx.current_user_id = "u1"

    session = session_service.request_swap(ctx, "u2", "s3", "2024-06-01", "09:00")
    session_service.approve(ctx, session.id)

    assert ctx.sync.flush(timeout=5) is True
    assert arrived == ["save_session", "update_session_status"]
    assert ctx.sync.failure_count == 0
    ctx.sync.close(timeout=5)


def test_close_delivers_pending_writes_and_stops_worker():
    release = threading.Event()
    arrived = []

    def handler(request):
        release.wait(timeout=5)
        arrived.append(json.loads(request.content)["id"])
        return httpx.Response(200, json={"success": True})

    remote, _ = _client(handler)
    adapter = SyncAdapter(remote=remote, enabled=True, background=True)
    for message_id in ("msg-1", "msg-2", "msg-3"):
        adapter.mirror(sync.SEND_MESSAGE, {"id": message_id})

    assert adapter.flush(timeout=0.05) is False
    release.set()
    adapter.close(timeout=5)

    assert arrived == ["msg-1", "msg-2", "msg-3"]
    assert adapter.flush(timeout=1) is True
