from __future__ import annotations

import random
from datetime import datetime

from src.nexus_office.nexus_office.attendance.model import AttendanceRecord
from src.nexus_office.nexus_office.attendance.store_attendance_repository import StoreAttendanceRepository
from src.nexus_office.nexus_office.core.enums import AttendanceStatus
from src.nexus_office.nexus_office.database.bootstrap import seed_today_attendance
from src.nexus_office.nexus_office.database.seed_data import default_users
from src.nexus_office.nexus_office.users.store_user_repository import StoreUserRepository

NOW = datetime(2026, 2, 2, 7, 45)


class ScriptedRandom:
    """Returns queued values from random(); randrange and choice stay seeded."""

    def __init__(self, values):
        self._values = list(values)
        self._inner = random.Random(0)

    def random(self):
        return self._values.pop(0)

    def randrange(self, *args):
        return self._inner.randrange(*args)

    def choice(self, seq):
        return self._inner.choice(seq)


def _repos(store):
    return StoreAttendanceRepository(store), StoreUserRepository(store, defaults=default_users)


def test_seed_skips_admin_and_excluded_user(store):
    attendance, users = _repos(store)

    created = seed_today_attendance(attendance, users, now=NOW, rng=random.Random(7))

    records = attendance.list_for_date(NOW.date())
    assert created == len(records)
    assert {r.user_id for r in records} <= {"u3", "u4", "u5", "u6", "u7"}


def test_seed_record_shape(store):
    attendance, users = _repos(store)

    seed_today_attendance(attendance, users, now=NOW, rng=random.Random(3))

    for r in attendance.list_for_date(NOW.date()):
        assert r.check_in_time.date() == NOW.date()
        assert r.check_in_time.hour in (8, 9)
        assert r.check_out_time is None
        if r.is_remote:
            assert r.status == AttendanceStatus.WORK_FROM_HOME
        elif r.check_in_time.hour == 9:
            assert r.status == AttendanceStatus.LATE
        else:
            assert r.status == AttendanceStatus.PRESENT


def test_seed_is_deterministic_with_scripted_draws(store):
    attendance, users = _repos(store)
    # per user: present?, remote?, late hour?
    draws = [
        0.10, 0.50, 0.90,  # u3 present, office, 9 o'clock
        0.90,              # u4 absent
        0.20, 0.10, 0.20,  # u5 present, remote, 8 o'clock
        0.84, 0.99, 0.10,  # u6 present, office, 8 o'clock
        0.85,              # u7 absent
    ]

    created = seed_today_attendance(attendance, users, now=NOW, rng=ScriptedRandom(draws))

    assert created == 3
    by_user = {r.user_id: r for r in attendance.list_for_date(NOW.date())}
    assert set(by_user) == {"u3", "u5", "u6"}
    assert by_user["u3"].status == AttendanceStatus.LATE
    assert by_user["u5"].status == AttendanceStatus.WORK_FROM_HOME
    assert by_user["u5"].is_remote is True
    assert by_user["u6"].status == AttendanceStatus.PRESENT


def test_seed_does_nothing_when_today_has_records(store):
    attendance, users = _repos(store)
    attendance.add(
        AttendanceRecord(
            attendance_id="x",
            user_id="u2",
            work_date=NOW.date(),
            check_in_time=NOW,
            check_out_time=None,
            status=AttendanceStatus.PRESENT,
        )
    )

    assert seed_today_attendance(attendance, users, now=NOW, rng=random.Random(1)) == 0
    assert len(attendance.list_for_date(NOW.date())) == 1


def test_seed_notifies_once(store):
    attendance, users = _repos(store)
    users.list_all()
    calls = []
    store.subscribe(lambda: calls.append(1))

    created = seed_today_attendance(attendance, users, now=NOW, rng=ScriptedRandom([0.1, 0.5, 0.1] * 5))

    assert created == 5
    assert calls == [1]
