"""Tests for dashboard serialization."""

from decimal import Decimal

from src.domain.models.snapshot import (
    INFLATION_ADJUSTED,
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
from src.infrastructure.serialization import (
    adjustment_to_dict,
    breakdown_to_dict,
    dashboard_to_dict,
    snapshot_to_dict,
)


def _snapshot(**overrides) -> Snapshot:
    breakdown = SnapshotBreakdown(
        assets={"cash": Decimal("1000"), "investments": Decimal("500.25")},
        liabilities={"liabilities": Decimal("200")},
    )
    values = dict(
        month="2024-01",
        base_currency="EUR",
        breakdown=breakdown,
        totals=SnapshotTotals.from_breakdown(breakdown),
        cash_flow=CashFlowSummary.from_amounts(
            Decimal("3000"),
            Decimal("1000"),
            income_by_kind={"salary": Decimal("3000")},
            expenses_by_kind={"rent": Decimal("1000")},
        ),
        performance=PerformanceMetrics(),
        real_wealth=RealWealth(net_worth_real=Decimal("1300.25")),
    )
    values.update(overrides)
    return Snapshot(**values)


def test_breakdown_is_flattened() -> None:
    """Asset and liability buckets should share one mapping."""
    payload = breakdown_to_dict(_snapshot().breakdown)

    assert payload == {
        "cash": 1000.0,
        "investments": 500.25,
        "liabilities": 200.0,
    }


def test_snapshot_omits_empty_optional_sections() -> None:
    """Missing HICP, adjustments and warnings should be left out."""
    payload = snapshot_to_dict(_snapshot())

    assert payload["totals"] == {
        "assets": 1500.25,
        "liabilities": 200.0,
        "net_worth": 1300.25,
    }
    assert payload["cash_flow"]["save_rate"] == float(
        Decimal("2000") / Decimal("3000")
    )
    assert payload["cash_flow"]["income_by_kind"] == {"salary": 3000.0}
    assert payload["performance"] == {
        "nominal_return": 0.0,
        "real_return": 0.0,
        "twr_cumulative": 1.0,
    }
    assert payload["real_wealth"]["net_worth_real"] == 1300.25
    for key in (
        "hicp",
        "warnings",
        "inflation_adjusted",
        "cost_of_living_adjusted",
        "real_purchasing_power",
    ):
        assert key not in payload


def test_snapshot_includes_computed_adjustments_and_warnings() -> None:
    """Computed adjustments should appear as top-level snapshot keys."""
    base = _snapshot()
    adjustment = Adjustment(
        kind=INFLATION_ADJUSTED,
        breakdown=base.breakdown.scaled(Decimal("0.5")),
        totals=SnapshotTotals.from_breakdown(
            base.breakdown.scaled(Decimal("0.5"))
        ),
        scale=Decimal("0.5"),
        deflator=Decimal("2"),
    )
    snapshot = _snapshot(
        hicp=Decimal("120"),
        adjustments={INFLATION_ADJUSTED: adjustment},
        warnings=("Unknown currency 'XYZ' — using rate 1.0",),
    )

    payload = snapshot_to_dict(snapshot)

    assert payload["hicp"] == 120.0
    assert payload["warnings"] == ["Unknown currency 'XYZ' — using rate 1.0"]
    assert payload["inflation_adjusted"]["scale"] == 0.5
    assert payload["inflation_adjusted"]["deflator"] == 2.0
    assert "cost_of_living_adjusted" not in payload


def test_adjustment_omits_unset_fields() -> None:
    """Only the optional fields that were set should be emitted."""
    breakdown = SnapshotBreakdown(assets={"cash": Decimal("10")})
    adjustment = Adjustment(
        kind="real_purchasing_power",
        breakdown=breakdown,
        totals=SnapshotTotals.from_breakdown(breakdown),
        scale=Decimal("1.25"),
        advantage_pct=Decimal("25"),
        salary_ratio=Decimal("0.3218"),
        badge="+25.0%",
    )

    payload = adjustment_to_dict(adjustment)

    assert payload == {
        "breakdown": {"cash": 10.0},
        "totals": {"assets": 10.0, "liabilities": 0.0, "net_worth": 10.0},
        "scale": 1.25,
        "advantage_pct": 25.0,
        "salary_ratio": 0.3218,
        "badge": "+25.0%",
    }


def test_dashboard_payload_layout() -> None:
    """The dashboard payload should carry snapshots, stats and latest."""
    snapshot = _snapshot()
    dashboard = Dashboard(
        generated_at="2024-02-01T10:00:00",
        base_currency="EUR",
        snapshots=(snapshot,),
        yearly_stats=(
            YearlyStats(
                year=2024,
                months_count=1,
                total_income=Decimal("3000"),
                total_expenses=Decimal("1000"),
                total_savings=Decimal("2000"),
                average_save_rate=Decimal("0.6667"),
            ),
        ),
        latest=snapshot,
        settings_version=2,
    )

    payload = dashboard_to_dict(dashboard)

    assert payload["generated_at"] == "2024-02-01T10:00:00"
    assert payload["settings_version"] == 2
    assert len(payload["snapshots"]) == 1
    assert payload["yearly_stats"][0]["average_save_rate"] == 0.6667
    assert payload["latest"]["month"] == "2024-01"


def test_dashboard_without_latest_omits_key() -> None:
    """An empty dashboard should not carry a latest snapshot."""
    payload = dashboard_to_dict(
        Dashboard(generated_at="now", base_currency="EUR", snapshots=())
    )

    assert payload["snapshots"] == []
    assert "latest" not in payload
