"""Calendar-year rollup of finalized snapshots."""

from decimal import Decimal
from typing import Iterable

from src.domain.models.snapshot import Snapshot, YearlyStats
from src.domain.services.rounding import round_money, round_ratio

_ZERO = Decimal("0")


def compute_yearly_stats(snapshots: Iterable[Snapshot]) -> list[YearlyStats]:
    """Aggregate cash flow per calendar year.

    The average save rate is the plain mean of the monthly save rates, not
    weighted by income.

    Args:
        snapshots: Finalized snapshots, in any order.

    Returns:
        list[YearlyStats]: One entry per year, sorted ascending.
    """
    grouped: dict[int, list[Snapshot]] = {}
    for snapshot in snapshots:
        prefix = snapshot.month[:4]
        if not prefix.isdigit():
            continue
        grouped.setdefault(int(prefix), []).append(snapshot)

    stats: list[YearlyStats] = []
    for year in sorted(grouped):
        months = grouped[year]
        total_income = sum((s.cash_flow.income for s in months), _ZERO)
        total_expenses = sum((s.cash_flow.expenses for s in months), _ZERO)
        save_rates = sum((s.cash_flow.save_rate for s in months), _ZERO)
        stats.append(
            YearlyStats(
                year=year,
                months_count=len(months),
                total_income=round_money(total_income),
                total_expenses=round_money(total_expenses),
                total_savings=round_money(total_income - total_expenses),
                average_save_rate=round_ratio(save_rates / len(months)),
            )
        )
    return stats


__all__ = ["compute_yearly_stats"]
