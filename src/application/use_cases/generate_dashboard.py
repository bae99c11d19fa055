"""Use case to assemble the net-worth dashboard from monthly documents."""

from datetime import datetime, timezone
from typing import Callable, Iterable

from src.application.ports.document_source import MonthlyDocumentSourcePort
from src.domain.errors import DuplicateMonthError, NoDocumentsError
from src.domain.models.documents import MonthlyDocument
from src.domain.models.settings import PipelineSettings
from src.domain.models.snapshot import Dashboard, Snapshot
from src.domain.services.categories import CategoryResolver
from src.domain.services.performance import PerformanceTracker
from src.domain.services.rounding import finalize_snapshot
from src.domain.services.snapshots import compute_snapshot
from src.domain.services.yearly import compute_yearly_stats
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenerateDashboardUseCase:
    """Fold the monthly documents into a chronological dashboard."""

    def __init__(
        self,
        document_source: MonthlyDocumentSourcePort,
        settings: PipelineSettings | None = None,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            document_source: Port returning the monthly documents of the run.
            settings: Pipeline settings; defaults apply when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the generation timestamp.
        """
        self._document_source = document_source
        self._settings = settings or PipelineSettings()
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def execute(self, latest_only: bool = False) -> Dashboard:
        """Return the dashboard for every loaded month.

        Args:
            latest_only: When True, only the most recent snapshot is emitted.
                Earlier months are still folded so performance figures of the
                latest month stay correct.

        Returns:
            Dashboard: Finalized snapshots, yearly stats and latest snapshot.

        Raises:
            NoDocumentsError: When the source returned no document.
            DuplicateMonthError: When two documents share a month key.
        """
        documents = self._sorted_documents(
            self._document_source.load_documents()
        )
        self._logger.info(f"Loaded {len(documents)} monthly documents")

        snapshots = self.compute_snapshots(documents)
        yearly_stats = compute_yearly_stats(snapshots)
        latest = snapshots[-1]
        if latest_only:
            snapshots = [latest]

        warnings_count = sum(len(snapshot.warnings) for snapshot in snapshots)
        if warnings_count:
            self._logger.warning(
                f"Dashboard built with {warnings_count} warnings"
            )
        self._logger.info(
            f"Dashboard computed: months={len(snapshots)}, "
            f"latest={latest.month}, net_worth={latest.totals.net_worth}"
        )
        return Dashboard(
            generated_at=self._clock().isoformat(),
            base_currency=latest.base_currency or self._settings.base_currency,
            snapshots=tuple(snapshots),
            yearly_stats=tuple(yearly_stats),
            latest=latest,
            settings_version=self._settings.settings_version,
        )

    def compute_snapshots(
        self,
        documents: Iterable[MonthlyDocument],
    ) -> list[Snapshot]:
        """Return finalized snapshots for documents in ascending month order.

        Args:
            documents: Documents already sorted by month.

        Returns:
            list[Snapshot]: One rounded snapshot per document.
        """
        resolver = CategoryResolver(self._settings.categories)
        tracker = PerformanceTracker(self._settings.portfolio_buckets)
        snapshots: list[Snapshot] = []
        for document in documents:
            snapshot = compute_snapshot(
                document,
                settings=self._settings,
                resolver=resolver,
                tracker=tracker,
            )
            for warning in snapshot.warnings:
                self._logger.warning(f"{document.label}: {warning}")
            snapshots.append(finalize_snapshot(snapshot))
        return snapshots

    @staticmethod
    def _sorted_documents(
        documents: Iterable[MonthlyDocument],
    ) -> list[MonthlyDocument]:
        ordered = sorted(documents, key=lambda document: document.month)
        if not ordered:
            raise NoDocumentsError("No input documents found")
        seen: dict[str, MonthlyDocument] = {}
        for document in ordered:
            previous = seen.get(document.month)
            if previous is not None:
                raise DuplicateMonthError(
                    f"Month {document.month} appears in both "
                    f"{previous.label} and {document.label}"
                )
            seen[document.month] = document
        return ordered


__all__ = ["GenerateDashboardUseCase"]
