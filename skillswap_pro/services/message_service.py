# skillswap_pro/services/message_service.py
"""
Direct messages between two members.

Messages are grouped into threads by an order-independent key built from
both user ids; the key is stored in the ``session_id`` field.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from skillswap_pro.errors import ValidationMissing
from skillswap_pro.schemas import Message, NotificationType, User
from skillswap_pro.services import notification_service, sync
from skillswap_pro.services.state import AppContext

logger = logging.getLogger(__name__)


def thread_key(user_a: str, user_b: str) -> str:
    """Order-independent conversation key for two users."""
    return "-".join(sorted((user_a, user_b)))


def send_message(ctx: AppContext, partner_id: str, text: str) -> Message:
    sender = ctx.require_user()
    if not partner_id:
        raise ValidationMissing("Missing message recipient")
    if not text or not text.strip():
        raise ValidationMissing("Message text cannot be empty")

    message = Message(
        id=ctx.new_id("msg"),
        session_id=thread_key(sender.id, partner_id),
        sender_id=sender.id,
        text=text,
        timestamp=ctx.now(),
    )
    ctx.state.messages.append(message)

    notification_service.notify(
        ctx,
        partner_id,
        f"New message from {sender.name}",
        text,
        NotificationType.MESSAGE,
        partner_id=sender.id,
    )
    ctx.sync.mirror(sync.SEND_MESSAGE, message.to_wire())
    return message


def message_store(ctx: AppContext) -> Dict[str, List[Message]]:
    """Group every known message by thread key, in arrival order."""
    store: Dict[str, List[Message]] = defaultdict(list)
    for message in ctx.state.messages:
        store[message.session_id].append(message)
    return dict(store)


def thread_messages(ctx: AppContext, user_a: str, user_b: str) -> List[Message]:
    key = thread_key(user_a, user_b)
    thread = [m for m in ctx.state.messages if m.session_id == key]
    return sorted(thread, key=lambda m: m.timestamp)


def chat_partners(ctx: AppContext, user_id: str) -> List[Tuple[User, Optional[Message]]]:
    """
    Everyone the user can chat with (admins included, as platform support),
    paired with the last message of their thread if any.
    """
    store = message_store(ctx)
    partners = []
    for partner in ctx.state.users:
        if partner.id == user_id:
            continue
        thread = store.get(thread_key(user_id, partner.id), [])
        partners.append((partner, thread[-1] if thread else None))
    return partners
