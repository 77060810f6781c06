"""Client engine talking to the in-process remote store."""

import pytest

from skillswap_pro import models
from skillswap_pro.errors import AuthFailure
from skillswap_pro.services import (
    auth_service,
    message_service,
    profile_service,
    review_service,
    session_service,
)


def test_bootstrap_loads_remote_snapshot(online_ctx):
    assert online_ctx.offline is False
    assert online_ctx.sync.enabled is True
    assert {u.id for u in online_ctx.state.users} == {"u1", "u2", "u3", "admin1"}
    # The store never hands out credentials
    assert all(u.password is None for u in online_ctx.state.users)


def test_online_login_goes_through_store(online_ctx):
    user = auth_service.login(online_ctx, "marc@example.com", "password123")
    assert user.id == "u3"

    with pytest.raises(AuthFailure):
        auth_service.login(online_ctx, "marc@example.com", "wrong")


def test_online_register_adds_member(online_ctx, seeded_db):
    user = auth_service.register(online_ctx, "Dana Lee", "dana@example.com", "secret")

    assert online_ctx.current_user_id == user.id
    assert online_ctx.state.find_user(user.id) is not None
    assert seeded_db.get(models.User, user.id).email == "dana@example.com"

    with pytest.raises(AuthFailure):
        auth_service.register(online_ctx, "Dana Again", "dana@example.com", "secret")


def test_mutations_are_mirrored_to_store(online_ctx, seeded_db):
    ctx = online_ctx
    auth_service.login(ctx, "alex@example.com", "password123")

    session = session_service.request_swap(ctx, "u2", "s3", "2024-06-01", "09:00")
    session_service.approve(ctx, session.id)
    session_service.complete(ctx, session.id)
    review_service.submit_review(ctx, session.id, 5, "Lovely")
    message_service.send_message(ctx, "u2", "Thanks!")
    profile_service.update_profile(ctx, location="Oakland, CA")

    stored = seeded_db.get(models.Session, session.id)
    assert stored.status == "Completed"
    assert stored.end_time == "10:20"
    assert stored.requester_reviewed is True
    assert seeded_db.get(models.User, "u2").review_count == 9
    assert seeded_db.query(models.Message).count() == 1
    assert seeded_db.get(models.User, "u1").location == "Oakland, CA"
    assert ctx.sync.failure_count == 0
