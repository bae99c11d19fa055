"""Domain models for computed snapshots and the dashboard."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

INFLATION_ADJUSTED = "inflation_adjusted"
COST_OF_LIVING_ADJUSTED = "cost_of_living_adjusted"
REAL_PURCHASING_POWER = "real_purchasing_power"

AdjustmentKind = Literal[
    "inflation_adjusted",
    "cost_of_living_adjusted",
    "real_purchasing_power",
]

ADJUSTMENT_KINDS: tuple[AdjustmentKind, ...] = (
    INFLATION_ADJUSTED,
    COST_OF_LIVING_ADJUSTED,
    REAL_PURCHASING_POWER,
)

_ZERO = Decimal("0")


@dataclass(frozen=True)
class SnapshotBreakdown:
    """Per-bucket amounts in base currency.

    Attributes:
        assets: Asset bucket name to amount.
        liabilities: Liability bucket name to amount.
    """

    assets: dict[str, Decimal] = field(default_factory=dict)
    liabilities: dict[str, Decimal] = field(default_factory=dict)

    @property
    def asset_total(self) -> Decimal:
        """Return the sum of asset buckets only."""
        return sum(self.assets.values(), _ZERO)

    @property
    def liability_total(self) -> Decimal:
        """Return the sum of liability buckets."""
        return sum(self.liabilities.values(), _ZERO)

    def amount(self, bucket: str) -> Decimal:
        """Return the amount of a bucket, zero when absent."""
        if bucket in self.assets:
            return self.assets[bucket]
        return self.liabilities.get(bucket, _ZERO)

    def scaled(self, scale: Decimal) -> "SnapshotBreakdown":
        """Return a copy with every bucket multiplied by ``scale``."""
        return SnapshotBreakdown(
            assets={name: value * scale for name, value in self.assets.items()},
            liabilities={
                name: value * scale
                for name, value in self.liabilities.items()
            },
        )


@dataclass(frozen=True)
class SnapshotTotals:
    """Asset, liability and net worth totals."""

    assets: Decimal
    liabilities: Decimal
    net_worth: Decimal

    @classmethod
    def from_breakdown(cls, breakdown: SnapshotBreakdown) -> "SnapshotTotals":
        """Derive totals from a breakdown so both never drift apart."""
        assets = breakdown.asset_total
        liabilities = breakdown.liability_total
        return cls(
            assets=assets,
            liabilities=liabilities,
            net_worth=assets - liabilities,
        )


@dataclass(frozen=True)
class CashFlowSummary:
    """Income and expenses of a month.

    Attributes:
        income: Sum of positive cash flows.
        expenses: Sum of negative cash flows as a positive number.
        net_cash_flow: Income minus expenses.
        save_rate: Net cash flow over income, zero without income.
        income_by_kind: Income split by canonical kind.
        expenses_by_kind: Expenses split by canonical kind.
    """

    income: Decimal
    expenses: Decimal
    net_cash_flow: Decimal
    save_rate: Decimal
    income_by_kind: dict[str, Decimal] = field(default_factory=dict)
    expenses_by_kind: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_amounts(
        cls,
        income: Decimal,
        expenses: Decimal,
        income_by_kind: dict[str, Decimal] | None = None,
        expenses_by_kind: dict[str, Decimal] | None = None,
    ) -> "CashFlowSummary":
        """Build a summary, deriving net cash flow and save rate."""
        net_cash_flow = income - expenses
        save_rate = net_cash_flow / income if income > 0 else _ZERO
        return cls(
            income=income,
            expenses=expenses,
            net_cash_flow=net_cash_flow,
            save_rate=save_rate,
            income_by_kind=dict(income_by_kind or {}),
            expenses_by_kind=dict(expenses_by_kind or {}),
        )


@dataclass(frozen=True)
class PerformanceMetrics:
    """Portfolio returns for a month."""

    nominal_return: Decimal = _ZERO
    real_return: Decimal = _ZERO
    twr_cumulative: Decimal = Decimal("1")


@dataclass(frozen=True)
class RealWealth:
    """Net worth expressed in base-period purchasing power."""

    net_worth_real: Decimal
    change_pct_from_prev: Decimal = _ZERO


@dataclass(frozen=True)
class Adjustment:
    """Scaled, parallel view of a snapshot breakdown.

    Attributes:
        kind: Adjustment name.
        breakdown: Scaled breakdown.
        totals: Totals derived from the scaled breakdown.
        scale: Multiplier applied to every bucket.
        deflator: HICP deflator, when inflation is involved.
        ecli_norm: Normalized ECLI, when cost of living is involved.
        advantage_pct: ``(scale - 1) * 100``.
        salary_ratio: Local over reference salary, combined view only.
        badge: Short display text.
        notes: Free-text explanation.
        warnings: Warnings raised while computing the adjustment.
    """

    kind: AdjustmentKind
    breakdown: SnapshotBreakdown
    totals: SnapshotTotals
    scale: Decimal
    deflator: Decimal | None = None
    ecli_norm: Decimal | None = None
    advantage_pct: Decimal | None = None
    salary_ratio: Decimal | None = None
    badge: str | None = None
    notes: str = ""
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class Snapshot:
    """Computed state of one calendar month.

    Adjustments that were not computed are absent from ``adjustments``.
    """

    month: str
    base_currency: str
    breakdown: SnapshotBreakdown
    totals: SnapshotTotals
    cash_flow: CashFlowSummary
    performance: PerformanceMetrics
    real_wealth: RealWealth
    fx_rates: dict[str, Decimal] = field(default_factory=dict)
    hicp: Decimal | None = None
    adjustments: dict[str, Adjustment] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    @property
    def year(self) -> str:
        return self.month[:4]

    @property
    def inflation_adjusted(self) -> Adjustment | None:
        return self.adjustments.get(INFLATION_ADJUSTED)

    @property
    def cost_of_living_adjusted(self) -> Adjustment | None:
        return self.adjustments.get(COST_OF_LIVING_ADJUSTED)

    @property
    def real_purchasing_power(self) -> Adjustment | None:
        return self.adjustments.get(REAL_PURCHASING_POWER)


@dataclass(frozen=True)
class YearlyStats:
    """Cash-flow aggregates of one calendar year."""

    year: int
    months_count: int
    total_income: Decimal
    total_expenses: Decimal
    total_savings: Decimal
    average_save_rate: Decimal


@dataclass(frozen=True)
class Dashboard:
    """Chronological dashboard built fresh on every run."""

    generated_at: str
    base_currency: str
    snapshots: tuple[Snapshot, ...]
    yearly_stats: tuple[YearlyStats, ...] = ()
    latest: Snapshot | None = None
    settings_version: int = 1


__all__ = [
    "INFLATION_ADJUSTED",
    "COST_OF_LIVING_ADJUSTED",
    "REAL_PURCHASING_POWER",
    "ADJUSTMENT_KINDS",
    "AdjustmentKind",
    "SnapshotBreakdown",
    "SnapshotTotals",
    "CashFlowSummary",
    "PerformanceMetrics",
    "RealWealth",
    "Adjustment",
    "Snapshot",
    "YearlyStats",
    "Dashboard",
]
