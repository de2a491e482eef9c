from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Sequence

from ..core.constants import NOTIFICATIONS_KEY
from ..database.store import LocalStore
from ..database.store_base import StoreCollection, find_index
from .model import Notification
from .repository import NotificationRepository


class StoreNotificationRepository(NotificationRepository):
    def __init__(self, store: LocalStore):
        self._items = StoreCollection(
            store,
            NOTIFICATIONS_KEY,
            from_dict=Notification.from_dict,
            to_dict=Notification.to_dict,
        )

    def list_all(self) -> Sequence[Notification]:
        return self._items.load()

    def prepend(self, notification: Notification) -> None:
        items = self._items.load()
        items.insert(0, notification)
        self._items.save(items)

    def mark_read(self, notification_id: str) -> bool:
        items = self._items.load()
        idx = find_index(items, lambda n: n.notification_id == notification_id)
        if idx == -1:
            return False
        items[idx] = replace(items[idx], read=True)
        self._items.save(items)
        return True

    def mark_read_where(self, predicate: Callable[[Notification], bool]) -> List[str]:
        items = self._items.load()
        matched: List[str] = []
        for idx, n in enumerate(items):
            if predicate(n):
                items[idx] = replace(n, read=True)
                matched.append(n.notification_id)
        # Always written back, even with no match.
        self._items.save(items)
        return matched
