# skillswap_pro/services/auth_service.py
"""
Sign-in, registration and sign-out for an application context.

Offline, credentials are checked locally with the context's credential
verifier. Online, the remote store decides.
"""

from __future__ import annotations

import logging

from skillswap_pro.errors import AuthFailure, RemoteRejected, ValidationMissing
from skillswap_pro.fixtures import avatar_for
from skillswap_pro.schemas import User, UserRole
from skillswap_pro.services.state import AppContext

logger = logging.getLogger(__name__)

NEW_MEMBER_LOCATION = "New Member"
NEW_MEMBER_RATING = 5.0


def login(ctx: AppContext, email: str, password: str) -> User:
    if not email or not password:
        raise ValidationMissing("Email and password are required")

    if ctx.offline or not ctx.sync.remote:
        user = ctx.state.find_user_by_email(email)
        if not user or not ctx.verifier.verify(user.password, password):
            raise AuthFailure("DEMO MODE: Invalid credentials.")
        ctx.current_user_id = user.id
        logger.info("Signed in %s (offline)", user.id)
        return user

    try:
        user = ctx.sync.remote.login(email, password)
    except RemoteRejected as exc:
        raise AuthFailure("Login failed. Check your credentials.") from exc

    ctx.state.upsert_user(user)
    ctx.current_user_id = user.id
    logger.info("Signed in %s", user.id)
    return user


def register(
    ctx: AppContext,
    name: str,
    email: str,
    password: str,
    bio: str = "",
) -> User:
    missing = [k for k, v in (("name", name), ("email", email), ("password", password)) if not v]
    if missing:
        raise ValidationMissing(f"Missing required field(s): {', '.join(missing)}")

    new_user = User(
        id=ctx.new_id("u"),
        name=name,
        email=email.strip().lower(),
        password=password,
        location=NEW_MEMBER_LOCATION,
        bio=bio or "",
        role=UserRole.USER,
        avatar=avatar_for(name),
        rating=NEW_MEMBER_RATING,
        review_count=0,
    )

    if ctx.offline or not ctx.sync.remote:
        if ctx.state.find_user_by_email(new_user.email):
            raise AuthFailure("Email already registered")
        new_user.password = ctx.verifier.prepare(password)
        ctx.state.users.append(new_user)
        ctx.current_user_id = new_user.id
        logger.info("Registered %s (offline)", new_user.id)
        return new_user

    try:
        created = ctx.sync.remote.register(new_user.to_wire())
    except RemoteRejected as exc:
        raise AuthFailure(str(exc) or "Registration failed.") from exc

    ctx.state.upsert_user(created)
    ctx.current_user_id = created.id
    logger.info("Registered %s", created.id)
    return created


def logout(ctx: AppContext) -> None:
    ctx.current_user_id = None
