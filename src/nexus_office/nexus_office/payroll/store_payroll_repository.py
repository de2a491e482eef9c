from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import PAYROLL_KEY
from ..database.store import LocalStore
from ..database.store_base import Record, StoreCollection
from .model import PayrollRecord
from .repository import PayrollRepository


class StorePayrollRepository(PayrollRepository):
    def __init__(self, store: LocalStore, *, defaults: Optional[Callable[[], List[Record]]] = None):
        self._records = StoreCollection(
            store,
            PAYROLL_KEY,
            from_dict=PayrollRecord.from_dict,
            to_dict=PayrollRecord.to_dict,
            defaults=defaults,
        )

    def list_all(self) -> Sequence[PayrollRecord]:
        return self._records.load()

    def list_for_user(self, user_id: str) -> Sequence[PayrollRecord]:
        return [p for p in self._records.load() if p.user_id == user_id]
