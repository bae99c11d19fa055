"""Composition of one month's snapshot from the individual services."""

from decimal import Decimal

from src.domain.models.documents import MonthlyDocument
from src.domain.models.settings import PipelineSettings
from src.domain.models.snapshot import Snapshot
from src.domain.services.adjustments import (
    compute_adjustments,
    resolve_base_hicp,
)
from src.domain.services.categories import CategoryResolver
from src.domain.services.performance import (
    PerformanceTracker,
    compute_inflation_factor,
)
from src.domain.services.snapshot_builder import build_month_figures

_ONE = Decimal("1")


def compute_snapshot(
    document: MonthlyDocument,
    *,
    settings: PipelineSettings,
    resolver: CategoryResolver,
    tracker: PerformanceTracker,
) -> Snapshot:
    """Build the unrounded snapshot of one month and advance the tracker.

    Args:
        document: Monthly document, fed in ascending month order.
        settings: Run settings.
        resolver: Category lookups compiled for the run.
        tracker: Performance accumulator of the run.

    Returns:
        Snapshot: Unrounded snapshot with every applicable adjustment.
    """
    figures = build_month_figures(
        document,
        resolver,
        settings.base_currency,
    )
    warnings = list(figures.warnings)

    base_hicp = resolve_base_hicp(document, settings, warnings)
    inflation_factor = compute_inflation_factor(document.hicp, base_hicp)
    if inflation_factor is None:
        warnings.append(
            f"Missing HICP for {document.month}; "
            "real figures use an inflation factor of 1.0"
        )
        inflation_factor = _ONE

    step = tracker.step(
        figures.breakdown,
        figures.totals.net_worth,
        inflation_factor,
        contributions=figures.contributions_total,
    )

    adjustments = compute_adjustments(
        document,
        figures.breakdown,
        settings,
        base_hicp=base_hicp,
        salary_total=figures.salary_total,
    )
    for adjustment in adjustments.values():
        warnings.extend(adjustment.warnings)

    return Snapshot(
        month=document.month,
        base_currency=figures.base_currency,
        breakdown=figures.breakdown,
        totals=figures.totals,
        cash_flow=figures.cash_flow,
        performance=step.performance,
        real_wealth=step.real_wealth,
        fx_rates=dict(document.fx_rates),
        hicp=document.hicp,
        adjustments=adjustments,
        warnings=tuple(warnings),
    )


__all__ = ["compute_snapshot"]
