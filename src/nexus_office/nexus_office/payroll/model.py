from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_optional, parse_optional_date
from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: one payslip. Read-only, there is no payroll run."""

    payroll_id: str
    user_id: str
    month: str
    amount: float
    status: PayrollStatus
    date_paid: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.payroll_id,
            "user_id": self.user_id,
            "month": self.month,
            "amount": self.amount,
            "status": self.status.value,
            "date_paid": format_optional(self.date_paid),
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "PayrollRecord":
        return cls(
            payroll_id=str(row["id"]),
            user_id=str(row["user_id"]),
            month=row["month"],
            amount=float(row["amount"]),
            status=PayrollStatus(row["status"]),
            date_paid=parse_optional_date(row.get("date_paid")),
        )
