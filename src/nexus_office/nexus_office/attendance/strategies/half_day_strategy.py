from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Checkout before the half-day cutoff."""

    def decide_checkin(self, *, now: datetime, is_remote: bool) -> StatusDecision:
        raise NotImplementedError("HalfDayStrategy only decides check-outs")

    def decide_checkout(self, *, now: datetime, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY)
