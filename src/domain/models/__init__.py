"""Domain models package."""

from .documents import (
    CashFlowEntry,
    EcliIndices,
    EcliWeights,
    InvestmentContribution,
    MonthlyDocument,
    NetWorthEntry,
)
from .settings import CategorySettings, HicpBase, PipelineSettings
from .snapshot import (
    COST_OF_LIVING_ADJUSTED,
    INFLATION_ADJUSTED,
    REAL_PURCHASING_POWER,
    Adjustment,
    CashFlowSummary,
    Dashboard,
    PerformanceMetrics,
    RealWealth,
    Snapshot,
    SnapshotBreakdown,
    SnapshotTotals,
    YearlyStats,
)

__all__ = [
    "NetWorthEntry",
    "CashFlowEntry",
    "InvestmentContribution",
    "EcliIndices",
    "EcliWeights",
    "MonthlyDocument",
    "CategorySettings",
    "HicpBase",
    "PipelineSettings",
    "INFLATION_ADJUSTED",
    "COST_OF_LIVING_ADJUSTED",
    "REAL_PURCHASING_POWER",
    "Adjustment",
    "CashFlowSummary",
    "Dashboard",
    "PerformanceMetrics",
    "RealWealth",
    "Snapshot",
    "SnapshotBreakdown",
    "SnapshotTotals",
    "YearlyStats",
]
