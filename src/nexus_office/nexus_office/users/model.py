from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a person who can sign in.

    Note: plain data object, it knows nothing about storage.
    """

    user_id: str
    name: str
    email: str
    role: Role
    password_hash: str
    department: Optional[str] = None
    job_title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "password_hash": self.password_hash,
            "department": self.department,
            "job_title": self.job_title,
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "User":
        return cls(
            user_id=str(row["id"]),
            name=row["name"],
            email=row["email"],
            role=Role(row["role"]),
            password_hash=row.get("password_hash") or "",
            department=row.get("department"),
            job_title=row.get("job_title"),
        )

    def public_dict(self) -> Dict[str, Any]:
        """What is safe to hand to a client."""

        data = self.to_dict()
        data.pop("password_hash", None)
        return data
