from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class Announcement:
    """Company-wide post shown on the "buzz" feed."""

    announcement_id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    is_ai_generated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.announcement_id,
            "title": self.title,
            "content": self.content,
            "author_id": self.author_id,
            "created_at": self.created_at.isoformat(),
            "is_ai_generated": self.is_ai_generated,
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Announcement":
        return cls(
            announcement_id=str(row["id"]),
            title=row["title"],
            content=row.get("content") or "",
            author_id=str(row.get("author_id") or ""),
            created_at=datetime.fromisoformat(row["created_at"]),
            is_ai_generated=bool(row.get("is_ai_generated", False)),
        )
