from __future__ import annotations

from typing import Protocol, Sequence

from .model import DocumentItem


class DocumentRepository(Protocol):
    """Read-only: documents have no create path."""

    def list_all(self) -> Sequence[DocumentItem]:
        raise NotImplementedError
