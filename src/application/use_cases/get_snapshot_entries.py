"""Use case to list a month's net-worth entries in base currency."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.document_source import MonthlyDocumentSourcePort
from src.domain.errors import InvalidMonthError
from src.domain.models.settings import PipelineSettings
from src.domain.services.categories import CategoryResolver
from src.domain.services.fx import resolve_fx_rate
from src.domain.services.months import parse_month_key
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SnapshotEntry:
    """Net-worth entry enriched with its conversion and bucket.

    Attributes:
        name: Entry label.
        kind: Raw type string of the entry.
        bucket: Resolved bucket, ``"unmapped"`` for unknown kinds.
        currency: Currency of the raw balance.
        balance: Raw balance.
        fx_rate: Rate applied to reach the base currency.
        balance_in_base: Balance expressed in the base currency.
        comment: Free-text comment.
    """

    name: str
    kind: str
    bucket: str
    currency: str
    balance: Decimal
    fx_rate: Decimal
    balance_in_base: Decimal
    comment: str = ""


@dataclass(frozen=True)
class SnapshotEntriesView:
    """Entries of one month along with conversion warnings."""

    month: str
    base_currency: str
    entries: list[SnapshotEntry]
    warnings: list[str]


class GetSnapshotEntriesUseCase:
    """Return the enriched net-worth entries of one month."""

    def __init__(
        self,
        document_source: MonthlyDocumentSourcePort,
        settings: PipelineSettings | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            document_source: Port returning the monthly documents.
            settings: Pipeline settings; defaults apply when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._document_source = document_source
        self._settings = settings or PipelineSettings()
        self._logger = logger or get_app_logger()

    def execute(self, month: str) -> SnapshotEntriesView:
        """Return the entries of ``month``.

        Args:
            month: Month key of the document to inspect.

        Returns:
            SnapshotEntriesView: Entries with FX rate and base balance.

        Raises:
            InvalidMonthError: When no document exists for the month.
        """
        key = parse_month_key(month)
        document = next(
            (
                document
                for document in self._document_source.load_documents()
                if document.month == key
            ),
            None,
        )
        if document is None:
            raise InvalidMonthError(f"No document found for month {key}")

        resolver = CategoryResolver(self._settings.categories)
        base_currency = document.base_currency or self._settings.base_currency
        warnings: list[str] = []
        entries: list[SnapshotEntry] = []
        for entry in document.net_worth_entries:
            rate = resolve_fx_rate(
                entry.currency,
                base_currency,
                document.fx_rates,
                warnings,
                entry.name,
            )
            entries.append(
                SnapshotEntry(
                    name=entry.name,
                    kind=entry.kind,
                    bucket=resolver.resolve(entry.kind),
                    currency=entry.currency,
                    balance=entry.balance,
                    fx_rate=rate,
                    balance_in_base=entry.balance * rate,
                    comment=entry.comment,
                )
            )
        self._logger.info(f"Listed {len(entries)} entries for {key}")
        return SnapshotEntriesView(
            month=key,
            base_currency=base_currency,
            entries=entries,
            warnings=warnings,
        )


__all__ = [
    "GetSnapshotEntriesUseCase",
    "SnapshotEntriesView",
    "SnapshotEntry",
]
