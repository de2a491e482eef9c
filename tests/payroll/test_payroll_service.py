from __future__ import annotations

import pytest

from src.nexus_office.nexus_office.core.enums import PayrollStatus
from src.nexus_office.nexus_office.database.seed_data import default_payroll, default_users
from src.nexus_office.nexus_office.payroll.service import PayrollService
from src.nexus_office.nexus_office.payroll.store_payroll_repository import StorePayrollRepository
from src.nexus_office.nexus_office.users.service import UserService
from src.nexus_office.nexus_office.users.store_user_repository import StoreUserRepository


@pytest.fixture
def svc(store):
    users = UserService(StoreUserRepository(store, defaults=default_users))
    return PayrollService(StorePayrollRepository(store, defaults=default_payroll), users)


def test_list_records_for_user(svc):
    assert [p.payroll_id for p in svc.list_records(user_id="u2")] == ["p1", "p2", "p3"]
    assert len(svc.list_records()) == 6


def test_summary_without_filter(svc):
    summary = svc.build_summary()

    assert len(summary.rows) == 6
    assert summary.total_amount == 5400 + 5400 + 5600 + 6200 + 4800 + 5100
    assert summary.paid_count == 2
    assert summary.processing_count == 4


def test_summary_rows_carry_employee_details(svc):
    row = svc.build_summary().rows[0]

    assert row["employee"] == "John Doe"
    assert row["job_title"] == "Software Engineer"
    assert row["date_paid"] == "2024-10-28"


def test_summary_filtered_by_status_keeps_global_processing_count(svc):
    summary = svc.build_summary(status=PayrollStatus.PAID)

    assert [r["id"] for r in summary.rows] == ["p1", "p2"]
    assert summary.total_amount == 10800
    assert summary.paid_count == 2
    assert summary.processing_count == 4


def test_unpaid_rows_show_a_dash(svc):
    rows = svc.build_summary(status=PayrollStatus.PROCESSING).rows

    assert {r["date_paid"] for r in rows} == {"-"}
