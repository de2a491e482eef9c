from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict

from ..common.datetime_utils import parse_iso_date
from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    user_id: str
    user_name: str
    start_date: date
    end_date: date
    reason: str
    leave_type: LeaveType
    status: RequestStatus
    created_at: datetime

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.request_id,
            "user_id": self.user_id,
            "user_name": self.user_name,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "reason": self.reason,
            "type": self.leave_type.value,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "LeaveRequest":
        return cls(
            request_id=str(row["id"]),
            user_id=str(row["user_id"]),
            user_name=row.get("user_name") or "",
            start_date=parse_iso_date(row["start_date"]),
            end_date=parse_iso_date(row["end_date"]),
            reason=row.get("reason") or "",
            leave_type=LeaveType(row["type"]),
            status=RequestStatus(row["status"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )
