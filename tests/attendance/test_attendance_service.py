from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.nexus_office.nexus_office.attendance.model import AttendanceRecord
from src.nexus_office.nexus_office.attendance.service import AttendanceService
from src.nexus_office.nexus_office.attendance.store_attendance_repository import StoreAttendanceRepository
from src.nexus_office.nexus_office.core.enums import AttendanceStatus
from src.nexus_office.nexus_office.core.exceptions import ValidationError
from src.nexus_office.nexus_office.users.service import UserService
from src.nexus_office.nexus_office.users.store_user_repository import StoreUserRepository

USERS = [
    {"id": "u1", "name": "Admin User", "email": "admin@company.com", "role": "ADMIN", "password_hash": ""},
    {"id": "u2", "name": "John Doe", "email": "john@company.com", "role": "EMPLOYEE", "password_hash": ""},
    {"id": "u3", "name": "Jane Smith", "email": "jane@company.com", "role": "EMPLOYEE", "password_hash": ""},
]


@pytest.fixture
def repo(store):
    return StoreAttendanceRepository(store)


@pytest.fixture
def svc(store, repo, clock):
    users = UserService(StoreUserRepository(store, defaults=lambda: [dict(u) for u in USERS]))
    return AttendanceService(repo, users, clock=clock)


@pytest.mark.parametrize(
    "now, is_remote, expected",
    [
        (datetime(2026, 2, 2, 8, 0), False, AttendanceStatus.PRESENT),
        (datetime(2026, 2, 2, 8, 59, 59), False, AttendanceStatus.PRESENT),
        (datetime(2026, 2, 2, 9, 0), False, AttendanceStatus.LATE),
        (datetime(2026, 2, 2, 10, 15), False, AttendanceStatus.LATE),
        (datetime(2026, 2, 2, 7, 30), True, AttendanceStatus.WORK_FROM_HOME),
        (datetime(2026, 2, 2, 11, 0), True, AttendanceStatus.WORK_FROM_HOME),
    ],
)
def test_check_in_status(svc, now, is_remote, expected):
    record = svc.check_in("u2", is_remote=is_remote, now=now)

    assert record.status == expected
    assert record.is_remote is is_remote
    assert record.work_date == now.date()
    assert record.check_in_time == now
    assert record.check_out_time is None


def test_second_check_in_same_day_returns_first_record(svc, repo):
    first = svc.check_in("u2", now=datetime(2026, 2, 2, 8, 0))
    second = svc.check_in("u2", is_remote=True, now=datetime(2026, 2, 2, 10, 0))

    assert second == first
    assert second.status == AttendanceStatus.PRESENT
    assert second.is_remote is False
    assert len(repo.list_for_user("u2")) == 1


def test_check_in_next_day_creates_new_record(svc, repo):
    svc.check_in("u2", now=datetime(2026, 2, 2, 8, 0))
    svc.check_in("u2", now=datetime(2026, 2, 3, 8, 0))

    assert len(repo.list_for_user("u2")) == 2


def test_check_in_uses_clock_when_now_missing(svc, clock):
    clock.now = datetime(2026, 2, 2, 9, 30)

    record = svc.check_in("u3")

    assert record.status == AttendanceStatus.LATE
    assert record.work_date == date(2026, 2, 2)


def test_check_out_before_cutoff_is_half_day(svc):
    svc.check_in("u2", now=datetime(2026, 2, 2, 8, 0))
    record = svc.check_out("u2", now=datetime(2026, 2, 2, 15, 59))

    assert record.status == AttendanceStatus.HALF_DAY
    assert record.check_out_time == datetime(2026, 2, 2, 15, 59)


@pytest.mark.parametrize("checkin_hour, expected", [(8, AttendanceStatus.PRESENT), (10, AttendanceStatus.LATE)])
def test_check_out_at_or_after_cutoff_keeps_status(svc, checkin_hour, expected):
    svc.check_in("u2", now=datetime(2026, 2, 2, checkin_hour, 0))
    record = svc.check_out("u2", now=datetime(2026, 2, 2, 16, 0))

    assert record.status == expected


def test_check_out_is_persisted(svc, repo):
    svc.check_in("u2", now=datetime(2026, 2, 2, 8, 0))
    svc.check_out("u2", now=datetime(2026, 2, 2, 17, 0))

    stored = repo.get_for_user_and_date("u2", date(2026, 2, 2))
    assert stored.check_out_time == datetime(2026, 2, 2, 17, 0)


def test_check_out_without_check_in_fails(svc):
    with pytest.raises(ValidationError):
        svc.check_out("u2", now=datetime(2026, 2, 2, 17, 0))


def test_check_out_with_only_yesterdays_check_in_fails(svc):
    svc.check_in("u2", now=datetime(2026, 2, 1, 8, 0))

    with pytest.raises(ValidationError):
        svc.check_out("u2", now=datetime(2026, 2, 2, 17, 0))


def test_second_check_out_fails(svc):
    svc.check_in("u2", now=datetime(2026, 2, 2, 8, 0))
    svc.check_out("u2", now=datetime(2026, 2, 2, 17, 0))

    with pytest.raises(ValidationError):
        svc.check_out("u2", now=datetime(2026, 2, 2, 18, 0))


def test_recent_activity_joins_names_and_orders_newest_first(svc):
    svc.check_in("u2", now=datetime(2026, 2, 2, 8, 0))
    svc.check_in("u3", is_remote=True, now=datetime(2026, 2, 2, 8, 30))
    svc.check_in("ghost", now=datetime(2026, 2, 2, 9, 15))

    items = svc.recent_activity(today=date(2026, 2, 2))

    assert [(a.user_name, a.kind) for a in items] == [
        ("Unknown", "LATE"),
        ("Jane Smith", "REMOTE"),
        ("John Doe", "CHECKIN"),
    ]


def test_end_to_end_scenario(store, clock):
    users = UserService(
        StoreUserRepository(store, defaults=lambda: [dict(USERS[0]), dict(USERS[1])])
    )
    svc = AttendanceService(StoreAttendanceRepository(store), users, clock=clock)

    clock.now = datetime(2026, 2, 2, 8, 0)
    first = svc.check_in("u2", is_remote=False)
    assert first.status == AttendanceStatus.PRESENT
    assert first.is_remote is False

    clock.now = datetime(2026, 2, 2, 10, 0)
    again = svc.check_in("u2")
    assert again == first
    assert again.check_in_time == datetime(2026, 2, 2, 8, 0)


def test_recent_activity_puts_untimed_records_last_with_aware_times(svc, repo):
    tz = timezone(timedelta(hours=2))
    day = date(2026, 2, 2)

    def _record(record_id, user_id, check_in):
        return AttendanceRecord(
            attendance_id=record_id,
            user_id=user_id,
            work_date=day,
            check_in_time=check_in,
            check_out_time=None,
            status=AttendanceStatus.PRESENT,
        )

    repo.add_many(
        [
            _record("a", "u2", datetime(2026, 2, 2, 8, 0, tzinfo=tz)),
            _record("b", "u3", None),
            _record("c", "u1", datetime(2026, 2, 2, 8, 45, tzinfo=tz)),
        ]
    )

    assert [a.attendance_id for a in svc.recent_activity(today=day)] == ["c", "a", "b"]
