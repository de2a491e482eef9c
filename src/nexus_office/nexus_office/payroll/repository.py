from __future__ import annotations

from typing import Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError
