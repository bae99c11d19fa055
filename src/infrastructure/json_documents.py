"""JSON file adapters for monthly documents."""

import json
from pathlib import Path

from src.domain.errors import DocumentParseError, NoDocumentsError
from src.domain.models.documents import MonthlyDocument
from src.domain.services.months import month_file_name
from src.infrastructure.document_mapper import (
    document_from_dict,
    document_to_dict,
)
from src.infrastructure.logging.logger import get_app_logger

TEMPLATE_FILE_NAME = "template.json"


def read_document(path: Path | str) -> MonthlyDocument:
    """Load one monthly document from a JSON file.

    Args:
        path: Path of the JSON document.

    Returns:
        MonthlyDocument: Parsed document labelled with the file name.

    Raises:
        DocumentParseError: If the file cannot be read or decoded.
    """
    resolved = Path(path)
    try:
        payload = json.loads(resolved.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocumentParseError(f"Reading {resolved}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DocumentParseError(f"Parsing JSON {resolved}: {exc}") from exc
    return document_from_dict(payload, source=resolved.name)


class JsonDirectoryDocumentSource:
    """Read every ``*.json`` document of a directory."""

    def __init__(self, directory: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            directory: Directory holding one JSON file per month.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._directory = Path(directory)
        self._logger = logger or get_app_logger()

    @property
    def directory(self) -> Path:
        return self._directory

    def load_documents(self) -> list[MonthlyDocument]:
        """Return the parsed documents, skipping ``template.json``.

        Raises:
            NoDocumentsError: If the directory does not exist.
            DocumentParseError: If a file cannot be read or decoded.
            InvalidMonthError: If a file carries an unparseable month.
        """
        if not self._directory.is_dir():
            raise NoDocumentsError(
                f"Input directory not found: {self._directory}"
            )
        documents: list[MonthlyDocument] = []
        for path in sorted(self._directory.glob("*.json")):
            if path.name.lower() == TEMPLATE_FILE_NAME:
                self._logger.debug(f"Skipping template file {path}")
                continue
            documents.append(read_document(path))
        self._logger.info(
            f"Read {len(documents)} documents from {self._directory}"
        )
        return documents


class JsonDocumentWriter:
    """Write monthly documents as pretty JSON files."""

    def __init__(
        self,
        directory: Path | str,
        output_path: Path | str | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            directory: Directory receiving ``YYYY_MM.json`` files.
            output_path: Optional explicit path overriding the default name.
        """
        self._directory = Path(directory)
        self._output_path = Path(output_path) if output_path else None

    def target_path(self, document: MonthlyDocument) -> Path:
        """Return where ``document`` would be written."""
        if self._output_path is not None:
            return self._output_path
        return self._directory / month_file_name(document.month)

    def write_document(self, document: MonthlyDocument) -> str:
        """Write ``document`` and return the path as a string.

        Raises:
            DocumentParseError: If the file cannot be written.
        """
        path = self.target_path(document)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                json.dumps(document_to_dict(document), indent=2) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise DocumentParseError(f"Writing {path}: {exc}") from exc
        return str(path)


__all__ = [
    "JsonDirectoryDocumentSource",
    "JsonDocumentWriter",
    "read_document",
    "TEMPLATE_FILE_NAME",
]
