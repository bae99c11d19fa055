"""Tests for the yearly rollup."""

from decimal import Decimal

from src.domain.models.snapshot import (
    CashFlowSummary,
    PerformanceMetrics,
    RealWealth,
    Snapshot,
    SnapshotBreakdown,
    SnapshotTotals,
)
from src.domain.services.yearly import compute_yearly_stats


def _snapshot(month: str, income: str, expenses: str) -> Snapshot:
    breakdown = SnapshotBreakdown()
    return Snapshot(
        month=month,
        base_currency="EUR",
        breakdown=breakdown,
        totals=SnapshotTotals.from_breakdown(breakdown),
        cash_flow=CashFlowSummary.from_amounts(
            Decimal(income),
            Decimal(expenses),
        ),
        performance=PerformanceMetrics(),
        real_wealth=RealWealth(net_worth_real=Decimal("0")),
    )


def test_groups_by_year_sorted_ascending() -> None:
    """Stats should be grouped per calendar year in ascending order."""
    snapshots = [
        _snapshot("2025-01", "1000", "500"),
        _snapshot("2024-11", "2000", "1000"),
        _snapshot("2024-12", "1000", "750"),
    ]

    stats = compute_yearly_stats(snapshots)

    assert [item.year for item in stats] == [2024, 2025]
    first = stats[0]
    assert first.months_count == 2
    assert first.total_income == Decimal("3000.00")
    assert first.total_expenses == Decimal("1750.00")
    assert first.total_savings == Decimal("1250.00")
    assert first.average_save_rate == Decimal("0.3750")


def test_average_save_rate_is_unweighted_mean() -> None:
    """Months with no income should weigh as much as any other month."""
    snapshots = [
        _snapshot("2024-01", "1000", "0"),
        _snapshot("2024-02", "0", "100"),
    ]

    stats = compute_yearly_stats(snapshots)

    assert stats[0].average_save_rate == Decimal("0.5000")
    assert stats[0].total_savings == Decimal("900.00")


def test_empty_input_returns_no_stats() -> None:
    """No snapshots should produce no yearly stats."""
    assert compute_yearly_stats([]) == []
