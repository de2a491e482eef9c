from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import ATTENDANCE_KEY
from ..database.store import LocalStore
from ..database.store_base import StoreCollection, find_index
from .model import AttendanceRecord
from .repository import AttendanceRepository


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: LocalStore):
        self._records = StoreCollection(
            store,
            ATTENDANCE_KEY,
            from_dict=AttendanceRecord.from_dict,
            to_dict=AttendanceRecord.to_dict,
        )

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._records.load()

    def list_for_user(self, user_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records.load() if r.user_id == user_id]

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._records.load() if r.work_date == work_date]

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._records.load():
            if r.user_id == user_id and r.work_date == work_date:
                return r
        return None

    def add(self, record: AttendanceRecord) -> None:
        self.add_many([record])

    def add_many(self, records: Sequence[AttendanceRecord]) -> None:
        items = self._records.load()
        items.extend(records)
        self._records.save(items)

    def replace(self, record: AttendanceRecord) -> bool:
        items = self._records.load()
        idx = find_index(items, lambda r: r.attendance_id == record.attendance_id)
        if idx == -1:
            return False
        items[idx] = record
        self._records.save(items)
        return True
