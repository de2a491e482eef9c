from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.enums import PayrollStatus
from ..users.service import UserService
from .model import PayrollRecord
from .repository import PayrollRepository


@dataclass(frozen=True)
class PayrollSummary:
    rows: list[dict]
    total_amount: float
    paid_count: int
    processing_count: int


class PayrollService:
    def __init__(self, payroll: PayrollRepository, users: UserService):
        self._payroll = payroll
        self._users = users

    def list_records(self, *, user_id: Optional[str] = None) -> Sequence[PayrollRecord]:
        if user_id:
            return self._payroll.list_for_user(user_id)
        return self._payroll.list_all()

    def build_summary(self, *, status: Optional[PayrollStatus] = None) -> PayrollSummary:
        """Admin payroll table: optional status filter, totals, employee names.

        The processing count always covers every record, filter or not.
        """

        records = list(self._payroll.list_all())
        filtered = [p for p in records if status is None or p.status == status]

        rows: list[dict] = []
        for p, user in self._users.attach_users(filtered):
            rows.append(
                {
                    "id": p.payroll_id,
                    "user_id": p.user_id,
                    "employee": user.name if user else "?",
                    "job_title": (user.job_title if user else None) or "",
                    "month": p.month,
                    "amount": p.amount,
                    "status": p.status.value,
                    "date_paid": p.date_paid.isoformat() if p.date_paid else "-",
                }
            )

        return PayrollSummary(
            rows=rows,
            total_amount=sum(p.amount for p in filtered),
            paid_count=sum(1 for p in filtered if p.status == PayrollStatus.PAID),
            processing_count=sum(1 for p in records if p.status == PayrollStatus.PROCESSING),
        )
