"""Domain package for snapshot computation rules and core models."""

from .constants import (
    DEFAULT_ASSET_BUCKETS,
    DEFAULT_BASE_CURRENCY,
    DEFAULT_LIABILITY_BUCKETS,
)
from .errors import (
    DashboardError,
    DocumentParseError,
    DuplicateMonthError,
    InvalidMonthError,
    NoDocumentsError,
    SettingsError,
)
from .models import (
    Adjustment,
    CategorySettings,
    Dashboard,
    MonthlyDocument,
    PipelineSettings,
    Snapshot,
    SnapshotBreakdown,
    SnapshotTotals,
    YearlyStats,
)
from .services import (
    CategoryResolver,
    PerformanceTracker,
    compute_snapshot,
    compute_yearly_stats,
    finalize_snapshot,
)

__all__ = [
    "DEFAULT_ASSET_BUCKETS",
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_LIABILITY_BUCKETS",
    "DashboardError",
    "DocumentParseError",
    "DuplicateMonthError",
    "InvalidMonthError",
    "NoDocumentsError",
    "SettingsError",
    "Adjustment",
    "CategorySettings",
    "Dashboard",
    "MonthlyDocument",
    "PipelineSettings",
    "Snapshot",
    "SnapshotBreakdown",
    "SnapshotTotals",
    "YearlyStats",
    "CategoryResolver",
    "PerformanceTracker",
    "compute_snapshot",
    "compute_yearly_stats",
    "finalize_snapshot",
]
