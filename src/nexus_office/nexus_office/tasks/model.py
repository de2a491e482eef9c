from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_optional, parse_optional_date
from ..core.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    task_id: str
    user_id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    description: Optional[str] = None
    due_date: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.task_id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "due_date": format_optional(self.due_date),
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Task":
        return cls(
            task_id=str(row["id"]),
            user_id=str(row["user_id"]),
            title=row["title"],
            description=row.get("description"),
            status=TaskStatus(row["status"]),
            priority=TaskPriority(row["priority"]),
            due_date=parse_optional_date(row.get("due_date")),
        )
