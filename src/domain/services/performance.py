"""Carried-forward portfolio performance across consecutive months."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from src.domain.models.snapshot import (
    PerformanceMetrics,
    RealWealth,
    SnapshotBreakdown,
)

_ZERO = Decimal("0")
_ONE = Decimal("1")


@dataclass(frozen=True)
class PerformanceStep:
    """Result of folding one month into the tracker."""

    performance: PerformanceMetrics
    real_wealth: RealWealth
    portfolio_value: Decimal
    inflation_factor: Decimal


class PerformanceTracker:
    """Accumulator threaded through the chronological fold of one run.

    Months must be fed in ascending order. A new tracker starts with no
    previous month and a cumulative TWR of 1.

    Attributes:
        portfolio_buckets: Buckets summed into the tracked portfolio value.
    """

    def __init__(self, portfolio_buckets: Iterable[str]) -> None:
        self.portfolio_buckets = tuple(portfolio_buckets)
        self.prev_portfolio_value: Decimal | None = None
        self.prev_net_worth_real: Decimal | None = None
        self.prev_inflation_factor: Decimal | None = None
        self.twr_cumulative = _ONE
        self.months_seen = 0

    def portfolio_value(self, breakdown: SnapshotBreakdown) -> Decimal:
        """Return the sum of the investment-like buckets."""
        return sum(
            (breakdown.amount(bucket) for bucket in self.portfolio_buckets),
            _ZERO,
        )

    def step(
        self,
        breakdown: SnapshotBreakdown,
        net_worth: Decimal,
        inflation_factor: Decimal,
        contributions: Decimal = _ZERO,
    ) -> PerformanceStep:
        """Fold one month into the running state.

        Args:
            breakdown: Unrounded breakdown of the month.
            net_worth: Unrounded net worth of the month.
            inflation_factor: Current HICP over base HICP.
            contributions: Deposits into the portfolio during the month.

        Returns:
            PerformanceStep: Returns and real wealth for the month.
        """
        portfolio_value = self.portfolio_value(breakdown)
        has_previous = self.prev_portfolio_value is not None

        nominal_return = _ZERO
        if has_previous and self.prev_portfolio_value > 0:
            change = portfolio_value - self.prev_portfolio_value
            nominal_return = (
                (change - contributions) / self.prev_portfolio_value
            )

        prev_inflation_factor = (
            self.prev_inflation_factor
            if self.prev_inflation_factor is not None
            else inflation_factor
        )
        real_return = _ZERO
        if has_previous:
            inflation_drift = inflation_factor / prev_inflation_factor
            real_return = (_ONE + nominal_return) / inflation_drift - _ONE

        self.twr_cumulative *= _ONE + nominal_return

        net_worth_real = net_worth / inflation_factor
        change_pct = _ZERO
        if self.prev_net_worth_real is not None and self.prev_net_worth_real > 0:
            change_pct = (
                (net_worth_real - self.prev_net_worth_real)
                / self.prev_net_worth_real
            )

        self.prev_portfolio_value = portfolio_value
        self.prev_net_worth_real = net_worth_real
        self.prev_inflation_factor = inflation_factor
        self.months_seen += 1

        return PerformanceStep(
            performance=PerformanceMetrics(
                nominal_return=nominal_return,
                real_return=real_return,
                twr_cumulative=self.twr_cumulative,
            ),
            real_wealth=RealWealth(
                net_worth_real=net_worth_real,
                change_pct_from_prev=change_pct,
            ),
            portfolio_value=portfolio_value,
            inflation_factor=inflation_factor,
        )


def compute_inflation_factor(
    current_hicp: Decimal | None,
    base_hicp: Decimal | None,
) -> Decimal | None:
    """Return ``current_hicp / base_hicp`` or None when not computable."""
    if current_hicp is None or base_hicp is None:
        return None
    if current_hicp <= 0 or base_hicp <= 0:
        return None
    return current_hicp / base_hicp


__all__ = ["PerformanceStep", "PerformanceTracker", "compute_inflation_factor"]
