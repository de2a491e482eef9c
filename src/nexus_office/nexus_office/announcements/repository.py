from __future__ import annotations

from typing import Protocol, Sequence

from .model import Announcement


class AnnouncementRepository(Protocol):
    def list_all(self) -> Sequence[Announcement]:
        raise NotImplementedError

    def prepend(self, announcement: Announcement) -> None:
        raise NotImplementedError
