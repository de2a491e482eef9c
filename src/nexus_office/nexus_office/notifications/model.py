from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..core.enums import NotificationTarget, NotificationType


@dataclass(frozen=True)
class Notification:
    notification_id: str
    target_role: NotificationTarget
    message: str
    created_at: datetime
    notification_type: NotificationType
    read: bool = False
    target_user_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.notification_id,
            "target_role": self.target_role.value,
            "target_user_id": self.target_user_id,
            "message": self.message,
            "read": self.read,
            "created_at": self.created_at.isoformat(),
            "type": self.notification_type.value,
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Notification":
        return cls(
            notification_id=str(row["id"]),
            target_role=NotificationTarget(row["target_role"]),
            target_user_id=row.get("target_user_id"),
            message=row["message"],
            read=bool(row.get("read", False)),
            created_at=datetime.fromisoformat(row["created_at"]),
            notification_type=NotificationType(row["type"]),
        )
