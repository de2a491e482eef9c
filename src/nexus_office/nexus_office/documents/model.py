from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from ..common.datetime_utils import parse_iso_date
from ..core.enums import DocumentCategory, DocumentType


@dataclass(frozen=True)
class DocumentItem:
    document_id: str
    title: str
    doc_type: DocumentType
    issued_on: date
    category: DocumentCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.document_id,
            "title": self.title,
            "type": self.doc_type.value,
            "date": self.issued_on.isoformat(),
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "DocumentItem":
        return cls(
            document_id=str(row["id"]),
            title=row["title"],
            doc_type=DocumentType(row["type"]),
            issued_on=parse_iso_date(row["date"]),
            category=DocumentCategory(row["category"]),
        )
