from __future__ import annotations

from datetime import date, datetime
from typing import Callable, List, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.latency import SimulatedLatency
from ..core.constants import DEFAULT_ACTIVITY_LIMIT, LATENCY_CHECK_IN_MS, LATENCY_CHECK_OUT_MS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..users.service import UserService
from .factory import AttendanceStrategyFactory
from .model import ActivityItem, AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserService,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        latency: SimulatedLatency | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._users = users
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._latency = latency or SimulatedLatency()
        self._clock = clock

    def check_in(self, user_id: str, *, is_remote: bool = False, now: datetime | None = None) -> AttendanceRecord:
        """Record today's check-in.

        Idempotent per (user, day): a second call returns the first record unchanged.
        """

        self._latency.pause(LATENCY_CHECK_IN_MS)
        now = now or self._clock()
        today = now.date()

        existing = self._attendance.get_for_user_and_date(user_id, today)
        if existing:
            return existing

        strategy = self._factory.for_checkin(now=now, is_remote=is_remote)
        decision = strategy.decide_checkin(now=now, is_remote=is_remote)

        record = AttendanceRecord(
            attendance_id=new_id(),
            user_id=user_id,
            work_date=today,
            check_in_time=now,
            check_out_time=None,
            status=decision.status,
            is_remote=bool(is_remote),
        )
        self._attendance.add(record)
        return record

    def check_out(self, user_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        self._latency.pause(LATENCY_CHECK_OUT_MS)
        now = now or self._clock()
        today = now.date()

        record = self._attendance.get_for_user_and_date(user_id, today)
        if not record:
            raise ValidationError("No check-in record found for today.")
        if record.check_out_time is not None:
            raise ValidationError("Already checked out today.")

        strategy = self._factory.for_checkout(now=now)
        decision = strategy.decide_checkout(now=now, current=record.status)

        updated = AttendanceRecord(
            attendance_id=record.attendance_id,
            user_id=record.user_id,
            work_date=record.work_date,
            check_in_time=record.check_in_time,
            check_out_time=now,
            status=decision.status,
            is_remote=record.is_remote,
        )
        self._attendance.replace(updated)
        return updated

    def list_records(self, *, user_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        if user_id:
            return self._attendance.list_for_user(user_id)
        return self._attendance.list_all()

    def get_today_record(self, user_id: str, today: date | None = None) -> Optional[AttendanceRecord]:
        """Get today's attendance record for a user"""
        today = today or self._clock().date()
        return self._attendance.get_for_user_and_date(user_id, today)

    def records_for_day(self, today: date | None = None) -> Sequence[AttendanceRecord]:
        today = today or self._clock().date()
        return self._attendance.list_for_date(today)

    def recent_activity(self, *, today: date | None = None, limit: int = DEFAULT_ACTIVITY_LIMIT) -> List[ActivityItem]:
        """Latest check-ins of the day with user names, newest first, untimed last."""

        items: List[ActivityItem] = []
        for record, user in self._users.attach_users(self.records_for_day(today)):
            if record.status == AttendanceStatus.WORK_FROM_HOME or record.is_remote:
                kind = "REMOTE"
            elif record.status == AttendanceStatus.LATE:
                kind = "LATE"
            else:
                kind = "CHECKIN"
            items.append(
                ActivityItem(
                    attendance_id=record.attendance_id,
                    user_name=user.name if user else "Unknown",
                    kind=kind,
                    time=record.check_in_time,
                )
            )

        dated = sorted((a for a in items if a.time is not None), key=lambda a: a.time, reverse=True)
        undated = [a for a in items if a.time is None]
        return (dated + undated)[:limit]
