from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def add(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def add_many(self, records: Sequence[AttendanceRecord]) -> None:
        raise NotImplementedError

    def replace(self, record: AttendanceRecord) -> bool:
        """Overwrite the stored record with the same id. False if not found."""

        raise NotImplementedError
