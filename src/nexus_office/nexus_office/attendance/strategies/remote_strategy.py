from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class RemoteStrategy(AttendanceStrategy):
    """Remote check-in: never late, whatever the time."""

    def decide_checkin(self, *, now: datetime, is_remote: bool) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.WORK_FROM_HOME)

    def decide_checkout(self, *, now: datetime, current: AttendanceStatus) -> StatusDecision:
        raise NotImplementedError("RemoteStrategy only decides check-ins")
