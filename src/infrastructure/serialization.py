"""Conversion of dashboard models into JSON-ready dictionaries."""

from decimal import Decimal
from typing import Any

from src.domain.models.snapshot import (
    ADJUSTMENT_KINDS,
    Adjustment,
    CashFlowSummary,
    Dashboard,
    Snapshot,
    SnapshotBreakdown,
    SnapshotTotals,
    YearlyStats,
)


def _number(value: Decimal) -> float:
    return float(value)


def _optional(payload: dict[str, Any], key: str, value) -> None:
    if value is None or value == "" or value == ():
        return
    if isinstance(value, Decimal):
        value = _number(value)
    elif isinstance(value, tuple):
        value = list(value)
    payload[key] = value


def breakdown_to_dict(breakdown: SnapshotBreakdown) -> dict[str, float]:
    """Return the flat bucket -> amount mapping of a breakdown."""
    payload = {
        bucket: _number(amount) for bucket, amount in breakdown.assets.items()
    }
    payload.update(
        {
            bucket: _number(amount)
            for bucket, amount in breakdown.liabilities.items()
        }
    )
    return payload


def totals_to_dict(totals: SnapshotTotals) -> dict[str, float]:
    return {
        "assets": _number(totals.assets),
        "liabilities": _number(totals.liabilities),
        "net_worth": _number(totals.net_worth),
    }


def cash_flow_to_dict(cash_flow: CashFlowSummary) -> dict[str, Any]:
    return {
        "income": _number(cash_flow.income),
        "expenses": _number(cash_flow.expenses),
        "net_cash_flow": _number(cash_flow.net_cash_flow),
        "save_rate": _number(cash_flow.save_rate),
        "income_by_kind": {
            kind: _number(amount)
            for kind, amount in cash_flow.income_by_kind.items()
        },
        "expenses_by_kind": {
            kind: _number(amount)
            for kind, amount in cash_flow.expenses_by_kind.items()
        },
    }


def adjustment_to_dict(adjustment: Adjustment) -> dict[str, Any]:
    """Return an adjustment payload, omitting unset optional fields."""
    payload: dict[str, Any] = {
        "breakdown": breakdown_to_dict(adjustment.breakdown),
        "totals": totals_to_dict(adjustment.totals),
        "scale": _number(adjustment.scale),
    }
    _optional(payload, "deflator", adjustment.deflator)
    _optional(payload, "ecli_norm", adjustment.ecli_norm)
    _optional(payload, "advantage_pct", adjustment.advantage_pct)
    _optional(payload, "salary_ratio", adjustment.salary_ratio)
    _optional(payload, "badge", adjustment.badge)
    _optional(payload, "notes", adjustment.notes)
    _optional(payload, "warnings", adjustment.warnings)
    return payload


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    """Return a snapshot payload.

    Adjustments that were not computed and an empty warning list are left
    out of the payload.
    """
    payload: dict[str, Any] = {
        "month": snapshot.month,
        "base_currency": snapshot.base_currency,
        "breakdown": breakdown_to_dict(snapshot.breakdown),
        "totals": totals_to_dict(snapshot.totals),
        "cash_flow": cash_flow_to_dict(snapshot.cash_flow),
        "performance": {
            "nominal_return": _number(snapshot.performance.nominal_return),
            "real_return": _number(snapshot.performance.real_return),
            "twr_cumulative": _number(snapshot.performance.twr_cumulative),
        },
        "real_wealth": {
            "net_worth_real": _number(snapshot.real_wealth.net_worth_real),
            "change_pct_from_prev": _number(
                snapshot.real_wealth.change_pct_from_prev
            ),
        },
        "fx_rates": {
            code: _number(rate) for code, rate in snapshot.fx_rates.items()
        },
    }
    _optional(payload, "hicp", snapshot.hicp)
    for kind in ADJUSTMENT_KINDS:
        adjustment = snapshot.adjustments.get(kind)
        if adjustment is not None:
            payload[kind] = adjustment_to_dict(adjustment)
    _optional(payload, "warnings", snapshot.warnings)
    return payload


def yearly_stats_to_dict(stats: YearlyStats) -> dict[str, Any]:
    return {
        "year": stats.year,
        "months_count": stats.months_count,
        "total_income": _number(stats.total_income),
        "total_expenses": _number(stats.total_expenses),
        "total_savings": _number(stats.total_savings),
        "average_save_rate": _number(stats.average_save_rate),
    }


def dashboard_to_dict(dashboard: Dashboard) -> dict[str, Any]:
    """Return the JSON-ready payload of a dashboard."""
    payload: dict[str, Any] = {
        "generated_at": dashboard.generated_at,
        "settings_version": dashboard.settings_version,
        "base_currency": dashboard.base_currency,
        "snapshots": [
            snapshot_to_dict(snapshot) for snapshot in dashboard.snapshots
        ],
        "yearly_stats": [
            yearly_stats_to_dict(stats) for stats in dashboard.yearly_stats
        ],
    }
    if dashboard.latest is not None:
        payload["latest"] = snapshot_to_dict(dashboard.latest)
    return payload


__all__ = [
    "adjustment_to_dict",
    "breakdown_to_dict",
    "dashboard_to_dict",
    "snapshot_to_dict",
    "yearly_stats_to_dict",
]
