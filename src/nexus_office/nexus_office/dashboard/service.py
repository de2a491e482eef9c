from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Callable

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, Role
from ..leaves.service import LeaveService
from ..users.repository import UserRepository


@dataclass(frozen=True)
class TodayStats:
    total_employees: int
    present: int
    late: int
    absent: int
    on_leave: int
    remote: int

    def to_dict(self) -> dict:
        return asdict(self)


def infer_absent(total_employees: int, present: int, on_leave: int) -> int:
    """Employees neither checked in nor on leave.

    A user both checked in and on approved leave is counted twice; the formula
    is kept as is.
    """

    return max(0, total_employees - present - on_leave)


class StatsService:
    """Derived head-counts, recomputed on every call."""

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        leaves: LeaveService,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._users = users
        self._attendance = attendance
        self._leaves = leaves
        self._clock = clock

    def today_stats(self, today: date | None = None) -> TodayStats:
        today = today or self._clock().date()
        records = self._attendance.list_for_date(today)

        total_employees = sum(1 for u in self._users.list_all() if u.role == Role.EMPLOYEE)
        present = len(records)
        late = sum(1 for r in records if r.status == AttendanceStatus.LATE)
        remote = sum(1 for r in records if r.status == AttendanceStatus.WORK_FROM_HOME or r.is_remote)
        on_leave = len(self._leaves.active_on(today))

        return TodayStats(
            total_employees=total_employees,
            present=present,
            late=late,
            absent=infer_absent(total_employees, present, on_leave),
            on_leave=on_leave,
            remote=remote,
        )
