# skillswap_pro/services/notification_service.py
"""
Notification Feed
In-memory, newest-first feed per user with read tracking. No dedup or expiry.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from skillswap_pro.schemas import Notification, NotificationMetadata, NotificationType
from skillswap_pro.services.state import AppContext

logger = logging.getLogger(__name__)


def notify(
    ctx: AppContext,
    user_id: str,
    title: str,
    message: str,
    type: NotificationType,
    *,
    partner_id: Optional[str] = None,
) -> Notification:
    """Create an unread notification and put it at the head of the feed."""
    notification = Notification(
        id=ctx.new_id("notif"),
        user_id=user_id,
        title=title,
        message=message,
        type=NotificationType(type),
        read=False,
        timestamp=ctx.now(),
        metadata=NotificationMetadata(partner_id=partner_id) if partner_id else None,
    )
    ctx.state.notifications.insert(0, notification)
    logger.debug("Notification %s -> %s (%s)", notification.id, user_id, notification.type.value)
    return notification


def list_for_user(
    ctx: AppContext,
    user_id: str,
    *,
    unread_only: bool = False,
    limit: Optional[int] = None,
) -> List[Notification]:
    items = [n for n in ctx.state.notifications if n.user_id == user_id]
    if unread_only:
        items = [n for n in items if not n.read]
    return items[:limit] if limit is not None else items


def mark_read(ctx: AppContext, notification_id: str) -> Optional[Notification]:
    notification = next(
        (n for n in ctx.state.notifications if n.id == notification_id),
        None,
    )
    if not notification:
        return None
    notification.read = True
    return notification


def mark_all_read(ctx: AppContext, user_id: str) -> int:
    updated = 0
    for notification in ctx.state.notifications:
        if notification.user_id == user_id and not notification.read:
            notification.read = True
            updated += 1
    return updated


def unread_count(ctx: AppContext, user_id: str) -> int:
    return len(list_for_user(ctx, user_id, unread_only=True))
