# skillswap_pro/api/store.py
"""
Remote store endpoint.

A single route, ``/api?action=<name>``, backs every client call: ``init``
answers a full snapshot over GET, every other action takes a JSON body over
POST. Failures are reported as ``{"error": "..."}`` with a matching status.
"""

import logging
from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillswap_pro import crud, schemas
from skillswap_pro.database import get_db
from skillswap_pro.errors import AuthFailure, SchedulingConflict
from skillswap_pro.services import sync
from skillswap_pro.utils.security import CredentialVerifier, get_verifier

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Remote Store"])


def get_credential_verifier() -> CredentialVerifier:
    return get_verifier()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _success() -> Dict[str, Any]:
    return schemas.ActionResult().to_wire()


# ===== ACTION HANDLERS =====

def _init(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    snapshot = schemas.Snapshot(
        users=[crud.user.to_schema(u) for u in crud.user.list_users(db)],
        skills=[crud.skill.to_schema(s) for s in crud.skill.list_skills(db)],
        sessions=[crud.session.to_schema(s) for s in crud.session.list_sessions(db)],
        messages=[crud.message.to_schema(m) for m in crud.message.list_messages(db)],
        reviews=[crud.review.to_schema(r) for r in crud.review.list_reviews(db)],
    )
    return snapshot.to_wire()


def _login(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    credentials = schemas.LoginRequest.model_validate(payload)
    user = crud.user.authenticate_user(db, credentials.email, credentials.password, verifier)
    if not user:
        raise AuthFailure("Invalid credentials")
    logger.info("Login for %s", user.id)
    return crud.user.to_schema(user).to_wire()


def _register(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    request = schemas.RegisterRequest.model_validate(payload)
    user = crud.user.create_user(db, request, verifier)
    logger.info("Registered %s", user.id)
    return crud.user.to_schema(user).to_wire()


def _save_session(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    crud.session.create_session(db, schemas.Session.model_validate(payload))
    return _success()


def _update_session_status(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    if not crud.session.update_status(db, schemas.SessionStatusUpdate.model_validate(payload)):
        raise ValueError("Session not found")
    return _success()


def _save_review(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    crud.review.create_review(db, schemas.Review.model_validate(payload))
    return _success()


def _update_profile(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    if not crud.user.update_profile(db, schemas.ProfileUpdate.model_validate(payload)):
        raise ValueError("User not found")
    return _success()


def _add_skill(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    crud.skill.add_skill(db, schemas.Skill.model_validate(payload))
    return _success()


def _send_message(db: Session, payload: dict, verifier: CredentialVerifier) -> Dict[str, Any]:
    crud.message.create_message(db, schemas.Message.model_validate(payload))
    return _success()


Handler = Callable[[Session, dict, CredentialVerifier], Dict[str, Any]]

ACTIONS: Dict[str, Handler] = {
    sync.INIT: _init,
    sync.LOGIN: _login,
    sync.REGISTER: _register,
    sync.SAVE_SESSION: _save_session,
    sync.UPDATE_SESSION_STATUS: _update_session_status,
    sync.SAVE_REVIEW: _save_review,
    sync.UPDATE_PROFILE: _update_profile,
    sync.ADD_SKILL: _add_skill,
    sync.SEND_MESSAGE: _send_message,
}

READ_ACTIONS = {sync.INIT}


# ===== ROUTE =====

@router.api_route("/api", methods=["GET", "POST"])
async def handle_action(
    request: Request,
    action: str = Query(""),
    db: Session = Depends(get_db),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """Dispatch ``action`` to its handler."""
    handler = ACTIONS.get(action)
    if handler is None:
        return _error(400, "Invalid action")

    expected = "GET" if action in READ_ACTIONS else "POST"
    if request.method != expected:
        return _error(405, f"Action '{action}' requires {expected}")

    payload: dict = {}
    if expected == "POST":
        try:
            payload = await request.json()
        except ValueError:
            return _error(400, "Request body must be JSON")
        if not isinstance(payload, dict):
            return _error(400, "Request body must be a JSON object")

    try:
        return handler(db, payload, verifier)
    except ValidationError as exc:
        return _error(422, f"Invalid payload: {exc.error_count()} error(s)")
    except AuthFailure as exc:
        return _error(401, str(exc))
    except SchedulingConflict as exc:
        return _error(409, str(exc))
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Store rejected %s: %s", action, exc.orig)
        return _error(409, "Record conflicts with stored data")
    except ValueError as exc:
        db.rollback()
        return _error(400, str(exc))
