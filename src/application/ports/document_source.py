"""Ports for reading and writing monthly input documents."""

from typing import Protocol

from src.domain.models.documents import MonthlyDocument


class MonthlyDocumentSourcePort(Protocol):
    """Port exposing read access to the monthly documents of a run."""

    def load_documents(self) -> list[MonthlyDocument]:
        """Return every monthly document, in any order."""


class MonthlyDocumentSinkPort(Protocol):
    """Port exposing write access for a single monthly document."""

    def write_document(self, document: MonthlyDocument) -> str:
        """Persist a document and return where it was written."""


__all__ = ["MonthlyDocumentSourcePort", "MonthlyDocumentSinkPort"]
