"""Tests for the carried-forward performance tracker."""

from decimal import Decimal

from src.domain.models.snapshot import SnapshotBreakdown
from src.domain.services.performance import (
    PerformanceTracker,
    compute_inflation_factor,
)


def _breakdown(investments: str, cash: str = "0") -> SnapshotBreakdown:
    return SnapshotBreakdown(
        assets={
            "cash": Decimal(cash),
            "investments": Decimal(investments),
        },
        liabilities={"liabilities": Decimal("0")},
    )


def test_first_month_has_zero_returns_and_unit_twr() -> None:
    """The first month of a run should report zero returns."""
    tracker = PerformanceTracker(("investments",))

    step = tracker.step(
        _breakdown("1000"),
        Decimal("1000"),
        Decimal("1.1"),
    )

    assert step.performance.nominal_return == Decimal("0")
    assert step.performance.real_return == Decimal("0")
    assert step.performance.twr_cumulative == Decimal("1")
    assert step.real_wealth.change_pct_from_prev == Decimal("0")
    assert step.real_wealth.net_worth_real == Decimal("1000") / Decimal("1.1")


def test_twr_is_product_of_monthly_growth() -> None:
    """Cumulative TWR should be the product of (1 + nominal) terms."""
    tracker = PerformanceTracker(("investments",))
    factor = Decimal("1")

    tracker.step(_breakdown("1000"), Decimal("1000"), factor)
    second = tracker.step(_breakdown("1100"), Decimal("1100"), factor)
    third = tracker.step(_breakdown("990"), Decimal("990"), factor)

    assert second.performance.nominal_return == Decimal("0.1")
    assert third.performance.nominal_return == Decimal("-0.1")
    assert third.performance.twr_cumulative == Decimal("1.1") * Decimal("0.9")


def test_contributions_are_not_counted_as_returns() -> None:
    """Deposits should be removed from the change before dividing."""
    tracker = PerformanceTracker(("investments",))
    factor = Decimal("1")

    tracker.step(_breakdown("1000"), Decimal("1000"), factor)
    step = tracker.step(
        _breakdown("1550"),
        Decimal("1550"),
        factor,
        contributions=Decimal("500"),
    )

    assert step.performance.nominal_return == Decimal("0.05")


def test_real_return_deflates_by_inflation_drift() -> None:
    """Real return should divide growth by the month-on-month inflation."""
    tracker = PerformanceTracker(("investments",))

    tracker.step(_breakdown("1000"), Decimal("1000"), Decimal("1.00"))
    step = tracker.step(_breakdown("1100"), Decimal("1100"), Decimal("1.10"))

    assert step.performance.real_return == Decimal("0")
    assert step.real_wealth.change_pct_from_prev == Decimal("0")


def test_zero_previous_portfolio_gives_zero_nominal_return() -> None:
    """Growth from an empty portfolio should not divide by zero."""
    tracker = PerformanceTracker(("investments",))
    factor = Decimal("1")

    tracker.step(_breakdown("0", cash="500"), Decimal("500"), factor)
    step = tracker.step(_breakdown("300", cash="500"), Decimal("800"), factor)

    assert step.performance.nominal_return == Decimal("0")
    assert step.real_wealth.change_pct_from_prev == Decimal("0.6")


def test_compute_inflation_factor_requires_positive_values() -> None:
    """Missing or non-positive HICP values should yield None."""
    assert compute_inflation_factor(Decimal("120"), Decimal("100")) == (
        Decimal("1.2")
    )
    assert compute_inflation_factor(None, Decimal("100")) is None
    assert compute_inflation_factor(Decimal("120"), Decimal("0")) is None
