from __future__ import annotations

from typing import Callable, List, Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def list_all(self) -> Sequence[Notification]:
        raise NotImplementedError

    def prepend(self, notification: Notification) -> None:
        raise NotImplementedError

    def mark_read(self, notification_id: str) -> bool:
        """False when no notification has that id."""

        raise NotImplementedError

    def mark_read_where(self, predicate: Callable[[Notification], bool]) -> List[str]:
        """Flip `read` on every match; returns the ids that matched."""

        raise NotImplementedError
