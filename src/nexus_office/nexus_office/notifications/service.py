from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.latency import SimulatedLatency
from ..core.constants import LATENCY_MARK_ALL_READ_MS, LATENCY_MARK_READ_MS
from ..core.enums import NotificationTarget, NotificationType, Role
from .model import Notification
from .repository import NotificationRepository


def _role_matches(n: Notification, role: Role) -> bool:
    if n.target_role == NotificationTarget.ALL:
        return True
    if n.target_role == NotificationTarget.ADMIN and role == Role.ADMIN:
        return True
    if n.target_role == NotificationTarget.EMPLOYEE and role == Role.EMPLOYEE:
        return True
    return False


def is_visible_to(n: Notification, user_id: str, role: Role) -> bool:
    """Listing rule: addressed to someone else => hidden, else match by role."""

    if n.target_user_id and n.target_user_id != user_id:
        return False
    return _role_matches(n, role)


def applies_to(n: Notification, user_id: str, role: Role) -> bool:
    """Mark-all rule: addressed to this user, or to everyone, or to their role.

    Note: unlike is_visible_to, a role match wins even when the notification
    is addressed to another user.
    """

    return n.target_user_id == user_id or _role_matches(n, role)


class NotificationService:
    def __init__(
        self,
        notifications: NotificationRepository,
        *,
        latency: Optional[SimulatedLatency] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._notifications = notifications
        self._latency = latency or SimulatedLatency()
        self._clock = clock

    def notify(
        self,
        *,
        target_role: NotificationTarget,
        message: str,
        notification_type: NotificationType,
        target_user_id: Optional[str] = None,
    ) -> Notification:
        n = Notification(
            notification_id=new_id(),
            target_role=target_role,
            target_user_id=target_user_id,
            message=message,
            read=False,
            created_at=self._clock(),
            notification_type=notification_type,
        )
        self._notifications.prepend(n)
        return n

    def list_for(self, user_id: str, role: Role) -> List[Notification]:
        items = [n for n in self._notifications.list_all() if is_visible_to(n, user_id, role)]
        items.sort(key=lambda n: n.created_at, reverse=True)
        return items

    def mark_read(self, notification_id: str) -> None:
        """Unknown ids are ignored."""

        self._latency.pause(LATENCY_MARK_READ_MS)
        self._notifications.mark_read(notification_id)

    def mark_all_read(self, user_id: str, role: Role) -> List[str]:
        self._latency.pause(LATENCY_MARK_ALL_READ_MS)
        return self._notifications.mark_read_where(lambda n: applies_to(n, user_id, role))
