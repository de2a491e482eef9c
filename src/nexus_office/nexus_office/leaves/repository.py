from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def prepend(self, request: LeaveRequest) -> None:
        raise NotImplementedError

    def set_status(self, request_id: str, status: RequestStatus) -> Optional[LeaveRequest]:
        """Returns the updated request, or None when the id is unknown."""

        raise NotImplementedError
