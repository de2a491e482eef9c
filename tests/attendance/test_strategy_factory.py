from datetime import datetime

import pytest

from src.nexus_office.nexus_office.attendance.factory import AttendanceStrategyFactory
from src.nexus_office.nexus_office.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.nexus_office.nexus_office.attendance.strategies.late_strategy import LateStrategy
from src.nexus_office.nexus_office.attendance.strategies.normal_strategy import NormalStrategy
from src.nexus_office.nexus_office.attendance.strategies.remote_strategy import RemoteStrategy
from src.nexus_office.nexus_office.core.enums import AttendanceStatus


def test_factory_checkin_before_cutoff_is_normal():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 8, 59, 59), is_remote=False)

    assert isinstance(strategy, NormalStrategy)


def test_factory_checkin_at_cutoff_is_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 9, 0, 0), is_remote=False)

    assert isinstance(strategy, LateStrategy)


def test_factory_remote_wins_over_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 11, 30), is_remote=True)

    assert isinstance(strategy, RemoteStrategy)


def test_factory_checkout_before_cutoff_is_half_day():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkout(now=datetime(2025, 1, 1, 15, 59))

    assert isinstance(strategy, HalfDayStrategy)
    assert strategy.decide_checkout(now=datetime(2025, 1, 1, 15, 59), current=AttendanceStatus.LATE).status == AttendanceStatus.HALF_DAY


def test_factory_checkout_at_cutoff_keeps_status():
    factory = AttendanceStrategyFactory()
    now = datetime(2025, 1, 1, 16, 0)
    strategy = factory.for_checkout(now=now)

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide_checkout(now=now, current=AttendanceStatus.LATE).status == AttendanceStatus.LATE


def test_checkout_only_strategy_refuses_checkin():
    with pytest.raises(NotImplementedError):
        HalfDayStrategy().decide_checkin(now=datetime(2025, 1, 1, 8, 0), is_remote=False)


def test_checkin_only_strategy_refuses_checkout():
    with pytest.raises(NotImplementedError):
        RemoteStrategy().decide_checkout(now=datetime(2025, 1, 1, 17, 0), current=AttendanceStatus.WORK_FROM_HOME)
