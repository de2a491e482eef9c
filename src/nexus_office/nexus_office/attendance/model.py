from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_optional, parse_iso_date, parse_optional_datetime
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one user's attendance for one calendar day."""

    attendance_id: str
    user_id: str
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    is_remote: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attendance_id,
            "user_id": self.user_id,
            "date": self.work_date.isoformat(),
            "check_in_time": format_optional(self.check_in_time),
            "check_out_time": format_optional(self.check_out_time),
            "status": self.status.value,
            "is_remote": self.is_remote,
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "AttendanceRecord":
        return cls(
            attendance_id=str(row["id"]),
            user_id=str(row["user_id"]),
            work_date=parse_iso_date(row["date"]),
            check_in_time=parse_optional_datetime(row.get("check_in_time")),
            check_out_time=parse_optional_datetime(row.get("check_out_time")),
            status=AttendanceStatus(row["status"]),
            is_remote=bool(row.get("is_remote", False)),
        )


@dataclass(frozen=True)
class ActivityItem:
    """Read-model for the admin dashboard feed."""

    attendance_id: str
    user_name: str
    kind: str
    time: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attendance_id,
            "user": self.user_name,
            "type": self.kind,
            "time": format_optional(self.time),
        }
