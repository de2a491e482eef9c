from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from ..assist.client import AnnouncementDraftClient
from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.latency import SimulatedLatency
from ..common.validators import require_non_empty
from ..core.constants import LATENCY_ANNOUNCEMENT_MS
from ..core.enums import NotificationTarget, NotificationType
from ..notifications.service import NotificationService
from .model import Announcement
from .repository import AnnouncementRepository


class AnnouncementService:
    def __init__(
        self,
        announcements: AnnouncementRepository,
        notifications: NotificationService,
        *,
        assist: Optional[AnnouncementDraftClient] = None,
        latency: Optional[SimulatedLatency] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._announcements = announcements
        self._notifications = notifications
        self._assist = assist or AnnouncementDraftClient(api_key=None)
        self._latency = latency or SimulatedLatency()
        self._clock = clock

    def list_announcements(self) -> List[Announcement]:
        items = list(self._announcements.list_all())
        items.sort(key=lambda a: a.created_at, reverse=True)
        return items

    def latest(self, limit: int = 3) -> List[Announcement]:
        return self.list_announcements()[:limit]

    def create(self, *, title: str, content: str, author_id: str, is_ai_generated: bool = False) -> Announcement:
        self._latency.pause(LATENCY_ANNOUNCEMENT_MS)

        announcement = Announcement(
            announcement_id=new_id(),
            title=require_non_empty(title, "Title"),
            content=require_non_empty(content, "Content"),
            author_id=author_id,
            created_at=self._clock(),
            is_ai_generated=bool(is_ai_generated),
        )
        self._announcements.prepend(announcement)

        self._notifications.notify(
            target_role=NotificationTarget.ALL,
            message=f"New Announcement: {announcement.title}",
            notification_type=NotificationType.INFO,
        )
        return announcement

    def draft(self, *, topic: str, tone: str) -> str:
        """AI-assisted draft text. Never raises; see AnnouncementDraftClient."""

        return self._assist.generate_draft(topic, tone)
