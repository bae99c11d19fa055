"""Inflation and cost-of-living adjustments of a snapshot breakdown.

Each adjuster returns ``None`` when it is disabled or lacks inputs, so an
absent adjustment is never confused with one that computed a scale of 1.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import (
    COMBINED_SCALE_HIGH_THRESHOLD,
    ECLI_EPSILON,
    ECLI_NORM_LOW_THRESHOLD,
)
from src.domain.models.documents import (
    EcliIndices,
    EcliWeights,
    MonthlyDocument,
)
from src.domain.models.settings import PipelineSettings
from src.domain.models.snapshot import (
    COST_OF_LIVING_ADJUSTED,
    INFLATION_ADJUSTED,
    REAL_PURCHASING_POWER,
    Adjustment,
    AdjustmentKind,
    SnapshotBreakdown,
    SnapshotTotals,
)

_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")

INFLATION_NOTE = "Inflation-only deflation using HICP"
COST_OF_LIVING_NOTE = "Cost-of-living normalization to New York"
COMBINED_NOTE = (
    "Combined inflation deflation and New York cost-of-living normalization"
)
NO_SALARY_NOTE = "no local salary entry found"


@dataclass(frozen=True)
class AdjustmentFlags:
    """Effective adjustment switches of one document."""

    inflation: bool
    cost_of_living: bool

    @classmethod
    def resolve(
        cls,
        document: MonthlyDocument,
        settings: PipelineSettings,
    ) -> "AdjustmentFlags":
        """Apply document overrides on top of the settings defaults."""
        inflation = document.adjust_to_inflation
        if inflation is None:
            inflation = settings.adjust_to_inflation
        cost_of_living = document.normalize_to_new_york_ecli
        if cost_of_living is None:
            cost_of_living = settings.normalize_to_new_york_ecli
        return cls(inflation=inflation, cost_of_living=cost_of_living)


def resolve_base_hicp(
    document: MonthlyDocument,
    settings: PipelineSettings,
    warnings: list[str],
) -> Decimal | None:
    """Return the base HICP for a document.

    Resolution order is the document override, then the settings value,
    then the document's own current HICP. The last fallback makes every
    deflator equal to 1, so it is reported as a warning.

    Args:
        document: Monthly document.
        settings: Run settings.
        warnings: Snapshot warnings, appended to on fallback.

    Returns:
        Decimal | None: Base HICP, or None when nothing is available.
    """
    if document.hicp_base is not None and document.hicp_base > 0:
        return document.hicp_base
    configured = settings.base_hicp
    if configured is not None and configured > 0:
        return configured
    if document.hicp is not None and document.hicp > 0:
        warnings.append(
            f"No base HICP configured for {document.month}; "
            f"using current HICP {document.hicp} as base (deflator 1.0)"
        )
        return document.hicp
    return None


def _scaled_adjustment(
    kind: AdjustmentKind,
    breakdown: SnapshotBreakdown,
    scale: Decimal,
    **details,
) -> Adjustment:
    scaled = breakdown.scaled(scale)
    return Adjustment(
        kind=kind,
        breakdown=scaled,
        totals=SnapshotTotals.from_breakdown(scaled),
        scale=scale,
        **details,
    )


def _advantage_pct(scale: Decimal) -> Decimal:
    return (scale - _ONE) * _HUNDRED


def compute_inflation_adjustment(
    breakdown: SnapshotBreakdown,
    *,
    enabled: bool,
    base_hicp: Decimal | None,
    current_hicp: Decimal | None,
) -> Adjustment | None:
    """Deflate every bucket to base-period purchasing power.

    Args:
        breakdown: Unrounded snapshot breakdown.
        enabled: Effective inflation flag.
        base_hicp: Base-period HICP.
        current_hicp: HICP of the snapshot month.

    Returns:
        Adjustment | None: Deflated view, or None when not computable.
    """
    if not enabled or base_hicp is None or current_hicp is None:
        return None
    if current_hicp <= 0:
        return None
    deflator = base_hicp / current_hicp
    return _scaled_adjustment(
        INFLATION_ADJUSTED,
        breakdown,
        deflator,
        deflator=deflator,
        advantage_pct=_advantage_pct(deflator),
        notes=INFLATION_NOTE,
    )


def compute_ecli(indices: EcliIndices, weights: EcliWeights) -> Decimal:
    """Return the weighted composite cost-of-living index."""
    return (
        weights.rent_index_weight * indices.rent_index
        + weights.groceries_index_weight * indices.groceries_index
        + weights.cost_of_living_index_weight * indices.cost_of_living_index
    )


def normalize_ecli(ecli: Decimal) -> Decimal:
    """Return ``ecli / 100``, or 1 when the index is effectively zero."""
    if abs(ecli) < ECLI_EPSILON:
        return _ONE
    return ecli / _HUNDRED


def compute_cost_of_living_adjustment(
    breakdown: SnapshotBreakdown,
    *,
    enabled: bool,
    indices: EcliIndices | None,
    weights: EcliWeights | None,
) -> Adjustment | None:
    """Normalize every bucket to New York purchasing power.

    Args:
        breakdown: Unrounded snapshot breakdown.
        enabled: Effective cost-of-living flag.
        indices: Basic ECLI indices of the month.
        weights: ECLI weights.

    Returns:
        Adjustment | None: Normalized view, or None when not computable.
    """
    if not enabled or indices is None or weights is None:
        return None
    ecli_norm = normalize_ecli(compute_ecli(indices, weights))
    warnings: list[str] = []
    if ecli_norm < ECLI_NORM_LOW_THRESHOLD:
        warnings.append(
            f"ECLI_norm very low ({ecli_norm:.3f}) — check index values"
        )
    scale = _ONE / ecli_norm
    advantage = _advantage_pct(scale)
    return _scaled_adjustment(
        COST_OF_LIVING_ADJUSTED,
        breakdown,
        scale,
        ecli_norm=ecli_norm,
        advantage_pct=advantage,
        badge=f"Relative to New York: {advantage:+.1f}% purchasing power",
        notes=COST_OF_LIVING_NOTE,
        warnings=tuple(warnings),
    )


def compute_real_purchasing_power(
    breakdown: SnapshotBreakdown,
    *,
    enabled: bool,
    inflation: Adjustment | None,
    cost_of_living: Adjustment | None,
    salary_total: Decimal,
    reference_salary: Decimal,
) -> Adjustment | None:
    """Compose inflation and cost-of-living scales, with salary parity.

    Args:
        breakdown: Unrounded snapshot breakdown.
        enabled: True when both adjustment flags are on.
        inflation: Inflation adjustment of the month.
        cost_of_living: Cost-of-living adjustment of the month.
        salary_total: Local salary of the month in base currency.
        reference_salary: Reference monthly salary in base currency.

    Returns:
        Adjustment | None: Combined view, or None unless both inputs exist.
    """
    if not enabled or inflation is None or cost_of_living is None:
        return None
    deflator = (
        inflation.deflator
        if inflation.deflator is not None
        else inflation.scale
    )
    ecli_norm = (
        cost_of_living.ecli_norm
        if cost_of_living.ecli_norm is not None
        else _ONE
    )
    combined_scale = deflator / ecli_norm

    warnings: list[str] = []
    if combined_scale > COMBINED_SCALE_HIGH_THRESHOLD:
        warnings.append(
            "Real purchasing power scale unusually large "
            f"({combined_scale:.2f})"
        )

    notes = [COMBINED_NOTE]
    salary_ratio: Decimal | None = None
    effective_scale = combined_scale
    if salary_total > 0 and reference_salary > 0:
        salary_ratio = salary_total / reference_salary
        effective_scale = combined_scale * salary_ratio
        notes.append(f"local salary ratio {salary_ratio:.4f} applied")
    else:
        notes.append(NO_SALARY_NOTE)

    advantage = _advantage_pct(effective_scale)
    return _scaled_adjustment(
        REAL_PURCHASING_POWER,
        breakdown,
        effective_scale,
        deflator=deflator,
        ecli_norm=ecli_norm,
        advantage_pct=advantage,
        salary_ratio=salary_ratio,
        badge=f"Real purchasing power vs New York: {advantage:+.1f}%",
        notes="; ".join(notes),
        warnings=tuple(warnings),
    )


def compute_adjustments(
    document: MonthlyDocument,
    breakdown: SnapshotBreakdown,
    settings: PipelineSettings,
    *,
    base_hicp: Decimal | None,
    salary_total: Decimal = _ZERO,
) -> dict[str, Adjustment]:
    """Compute every applicable adjustment of a month.

    Args:
        document: Monthly document carrying indices and overrides.
        breakdown: Unrounded snapshot breakdown.
        settings: Run settings.
        base_hicp: Base HICP resolved for the document.
        salary_total: Local salary of the month in base currency.

    Returns:
        dict[str, Adjustment]: Computed adjustments keyed by name.
    """
    flags = AdjustmentFlags.resolve(document, settings)
    weights = document.ecli_weights or settings.categories.ecli_weights

    inflation = compute_inflation_adjustment(
        breakdown,
        enabled=flags.inflation,
        base_hicp=base_hicp,
        current_hicp=document.hicp,
    )
    cost_of_living = compute_cost_of_living_adjustment(
        breakdown,
        enabled=flags.cost_of_living,
        indices=document.ecli,
        weights=weights,
    )
    combined = compute_real_purchasing_power(
        breakdown,
        enabled=flags.inflation and flags.cost_of_living,
        inflation=inflation,
        cost_of_living=cost_of_living,
        salary_total=salary_total,
        reference_salary=settings.reference_monthly_salary,
    )

    adjustments: dict[str, Adjustment] = {}
    for adjustment in (inflation, cost_of_living, combined):
        if adjustment is not None:
            adjustments[adjustment.kind] = adjustment
    return adjustments


__all__ = [
    "AdjustmentFlags",
    "INFLATION_NOTE",
    "COST_OF_LIVING_NOTE",
    "COMBINED_NOTE",
    "NO_SALARY_NOTE",
    "resolve_base_hicp",
    "compute_inflation_adjustment",
    "compute_ecli",
    "normalize_ecli",
    "compute_cost_of_living_adjustment",
    "compute_real_purchasing_power",
    "compute_adjustments",
]
