from typing import Optional

from .common import NotificationType, WireModel


class NotificationMetadata(WireModel):
    partner_id: Optional[str] = None


class Notification(WireModel):
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    read: bool = False
    timestamp: int
    metadata: Optional[NotificationMetadata] = None
