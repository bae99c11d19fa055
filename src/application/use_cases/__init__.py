"""Application use cases package."""

from .generate_dashboard import GenerateDashboardUseCase
from .get_snapshot_entries import (
    GetSnapshotEntriesUseCase,
    SnapshotEntriesView,
    SnapshotEntry,
)
from .rollover_month import RolloverMonthUseCase

__all__ = [
    "GenerateDashboardUseCase",
    "GetSnapshotEntriesUseCase",
    "SnapshotEntriesView",
    "SnapshotEntry",
    "RolloverMonthUseCase",
]
