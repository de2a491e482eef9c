from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import LEAVES_KEY
from ..core.enums import RequestStatus
from ..database.store import LocalStore
from ..database.store_base import StoreCollection, find_index
from .model import LeaveRequest
from .repository import LeaveRepository


class StoreLeaveRepository(LeaveRepository):
    def __init__(self, store: LocalStore):
        self._requests = StoreCollection(
            store,
            LEAVES_KEY,
            from_dict=LeaveRequest.from_dict,
            to_dict=LeaveRequest.to_dict,
        )

    def list_all(self) -> Sequence[LeaveRequest]:
        return self._requests.load()

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        for r in self._requests.load():
            if r.request_id == request_id:
                return r
        return None

    def prepend(self, request: LeaveRequest) -> None:
        items = self._requests.load()
        items.insert(0, request)
        self._requests.save(items)

    def set_status(self, request_id: str, status: RequestStatus) -> Optional[LeaveRequest]:
        items = self._requests.load()
        idx = find_index(items, lambda r: r.request_id == request_id)
        if idx == -1:
            return None
        items[idx] = replace(items[idx], status=status)
        self._requests.save(items)
        return items[idx]
