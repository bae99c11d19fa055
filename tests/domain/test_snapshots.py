"""Tests for composing a month's snapshot."""

from decimal import Decimal

from src.domain.models.documents import MonthlyDocument, NetWorthEntry
from src.domain.models.settings import HicpBase, PipelineSettings
from src.domain.services.categories import CategoryResolver
from src.domain.services.performance import PerformanceTracker
from src.domain.services.snapshots import compute_snapshot


def _compute(document: MonthlyDocument, settings: PipelineSettings):
    return compute_snapshot(
        document,
        settings=settings,
        resolver=CategoryResolver(settings.categories),
        tracker=PerformanceTracker(settings.portfolio_buckets),
    )


def _document(**kwargs) -> MonthlyDocument:
    values = {
        "month": "2024-05",
        "base_currency": "EUR",
        "net_worth_entries": [
            NetWorthEntry("Bank", "cash", "EUR", Decimal("1000")),
        ],
    }
    values.update(kwargs)
    return MonthlyDocument(**values)


def test_snapshot_carries_inflation_view_and_real_wealth() -> None:
    """A configured base HICP should drive real wealth and deflation."""
    settings = PipelineSettings(
        hicp=HicpBase(base_value=Decimal("100")),
        adjust_to_inflation=True,
    )

    snapshot = _compute(_document(hicp=Decimal("125")), settings)

    assert snapshot.real_wealth.net_worth_real == Decimal("800")
    assert snapshot.inflation_adjusted.scale == Decimal("0.8")
    assert snapshot.cost_of_living_adjusted is None
    assert snapshot.real_purchasing_power is None
    assert snapshot.warnings == ()


def test_missing_hicp_uses_unit_inflation_factor_with_warning() -> None:
    """Without HICP the real figures should equal the nominal ones."""
    snapshot = _compute(_document(), PipelineSettings())

    assert snapshot.real_wealth.net_worth_real == Decimal("1000")
    assert snapshot.adjustments == {}
    assert snapshot.warnings == (
        "Missing HICP for 2024-05; real figures use an inflation factor "
        "of 1.0",
    )


def test_current_hicp_fallback_is_reported() -> None:
    """Using the current HICP as base should leave a warning."""
    settings = PipelineSettings(adjust_to_inflation=True)

    snapshot = _compute(_document(hicp=Decimal("120")), settings)

    assert snapshot.inflation_adjusted.scale == Decimal("1")
    assert any("No base HICP configured" in w for w in snapshot.warnings)
