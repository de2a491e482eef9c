from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from ..core.constants import HALF_DAY_CUTOFF, LATE_CUTOFF
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.remote_strategy import RemoteStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    late_cutoff: time = LATE_CUTOFF
    half_day_cutoff: time = HALF_DAY_CUTOFF

    def for_checkin(self, *, now: datetime, is_remote: bool) -> AttendanceStrategy:
        if is_remote:
            return RemoteStrategy()
        if now >= datetime.combine(now.date(), self.late_cutoff, tzinfo=now.tzinfo):
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, now: datetime) -> AttendanceStrategy:
        if now < datetime.combine(now.date(), self.half_day_cutoff, tzinfo=now.tzinfo):
            return HalfDayStrategy()
        return NormalStrategy()
