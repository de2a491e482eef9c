from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import ANNOUNCEMENTS_KEY
from ..database.store import LocalStore
from ..database.store_base import Record, StoreCollection
from .model import Announcement
from .repository import AnnouncementRepository


class StoreAnnouncementRepository(AnnouncementRepository):
    def __init__(self, store: LocalStore, *, defaults: Optional[Callable[[], List[Record]]] = None):
        self._items = StoreCollection(
            store,
            ANNOUNCEMENTS_KEY,
            from_dict=Announcement.from_dict,
            to_dict=Announcement.to_dict,
            defaults=defaults,
        )

    def list_all(self) -> Sequence[Announcement]:
        return self._items.load()

    def prepend(self, announcement: Announcement) -> None:
        items = self._items.load()
        items.insert(0, announcement)
        self._items.save(items)
