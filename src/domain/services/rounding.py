"""Display rounding applied once at the output boundary."""

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.domain.constants import MONEY_PLACES, RATIO_PLACES
from src.domain.models.snapshot import (
    Adjustment,
    CashFlowSummary,
    PerformanceMetrics,
    RealWealth,
    Snapshot,
    SnapshotBreakdown,
    SnapshotTotals,
)

_MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)
_RATIO_QUANTUM = Decimal(1).scaleb(-RATIO_PLACES)


def _quantize(value: Decimal, quantum: Decimal) -> Decimal:
    # Precision must cover every integer digit plus the kept decimals.
    digits = max(value.adjusted(), 0) + 1 - quantum.as_tuple().exponent
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 1)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def round_money(value: Decimal) -> Decimal:
    """Round a monetary amount to cents, half up."""
    return _quantize(value, _MONEY_QUANTUM)


def round_ratio(value: Decimal) -> Decimal:
    """Round a ratio, percentage or scale to four decimals, half up."""
    return _quantize(value, _RATIO_QUANTUM)


def _round_optional_ratio(value: Decimal | None) -> Decimal | None:
    return None if value is None else round_ratio(value)


def round_breakdown(breakdown: SnapshotBreakdown) -> SnapshotBreakdown:
    return SnapshotBreakdown(
        assets={k: round_money(v) for k, v in breakdown.assets.items()},
        liabilities={
            k: round_money(v) for k, v in breakdown.liabilities.items()
        },
    )


def round_cash_flow(cash_flow: CashFlowSummary) -> CashFlowSummary:
    """Round a cash-flow summary, re-deriving the net from rounded parts."""
    income = round_money(cash_flow.income)
    expenses = round_money(cash_flow.expenses)
    return CashFlowSummary(
        income=income,
        expenses=expenses,
        net_cash_flow=income - expenses,
        save_rate=round_ratio(cash_flow.save_rate),
        income_by_kind={
            k: round_money(v) for k, v in cash_flow.income_by_kind.items()
        },
        expenses_by_kind={
            k: round_money(v) for k, v in cash_flow.expenses_by_kind.items()
        },
    )


def round_adjustment(adjustment: Adjustment) -> Adjustment:
    breakdown = round_breakdown(adjustment.breakdown)
    return replace(
        adjustment,
        breakdown=breakdown,
        totals=SnapshotTotals.from_breakdown(breakdown),
        scale=round_ratio(adjustment.scale),
        deflator=_round_optional_ratio(adjustment.deflator),
        ecli_norm=_round_optional_ratio(adjustment.ecli_norm),
        advantage_pct=_round_optional_ratio(adjustment.advantage_pct),
        salary_ratio=_round_optional_ratio(adjustment.salary_ratio),
    )


def finalize_snapshot(snapshot: Snapshot) -> Snapshot:
    """Return a display-rounded copy of a snapshot.

    Totals are re-derived from the rounded breakdown so the net worth
    identity holds exactly. Finalizing twice yields the same snapshot.

    Args:
        snapshot: Unrounded snapshot.

    Returns:
        Snapshot: Rounded snapshot.
    """
    breakdown = round_breakdown(snapshot.breakdown)
    performance = snapshot.performance
    return replace(
        snapshot,
        breakdown=breakdown,
        totals=SnapshotTotals.from_breakdown(breakdown),
        cash_flow=round_cash_flow(snapshot.cash_flow),
        performance=PerformanceMetrics(
            nominal_return=round_ratio(performance.nominal_return),
            real_return=round_ratio(performance.real_return),
            twr_cumulative=round_ratio(performance.twr_cumulative),
        ),
        real_wealth=RealWealth(
            net_worth_real=round_money(snapshot.real_wealth.net_worth_real),
            change_pct_from_prev=round_ratio(
                snapshot.real_wealth.change_pct_from_prev
            ),
        ),
        adjustments={
            name: round_adjustment(adjustment)
            for name, adjustment in snapshot.adjustments.items()
        },
    )


__all__ = [
    "round_money",
    "round_ratio",
    "round_breakdown",
    "round_cash_flow",
    "round_adjustment",
    "finalize_snapshot",
]
