"""Classification and aggregation of one monthly document."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import CONTRIBUTION_KIND_MARKERS, SALARY_KIND
from src.domain.models.documents import MonthlyDocument
from src.domain.models.snapshot import (
    CashFlowSummary,
    SnapshotBreakdown,
    SnapshotTotals,
)
from src.domain.services.categories import (
    CategoryResolver,
    normalize_kind,
    unknown_cash_flow_warning,
    unknown_kind_warning,
)
from src.domain.services.fx import convert_amount

_ZERO = Decimal("0")


@dataclass(frozen=True)
class MonthFigures:
    """Unrounded figures of a month before performance and adjustments.

    Attributes:
        document: Source document.
        base_currency: Currency all amounts are expressed in.
        breakdown: Per-bucket amounts.
        totals: Totals derived from ``breakdown``.
        cash_flow: Income and expense summary.
        salary_total: Sum of ``salary`` cash flows in base currency.
        contributions_total: Deposits into tracked portfolios.
        warnings: Recoverable problems found while building.
    """

    document: MonthlyDocument
    base_currency: str
    breakdown: SnapshotBreakdown
    totals: SnapshotTotals
    cash_flow: CashFlowSummary
    salary_total: Decimal = _ZERO
    contributions_total: Decimal = _ZERO
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def month(self) -> str:
        return self.document.month


def build_month_figures(
    document: MonthlyDocument,
    resolver: CategoryResolver,
    default_base_currency: str,
) -> MonthFigures:
    """Classify and convert the entries of one document.

    Args:
        document: Monthly document to aggregate.
        resolver: Category lookups compiled for the run.
        default_base_currency: Base currency when the document sets none.

    Returns:
        MonthFigures: Breakdown, totals and cash flow of the month.
    """
    base_currency = document.base_currency or default_base_currency
    warnings: list[str] = []

    assets = {bucket: _ZERO for bucket in resolver.asset_buckets}
    liabilities = {bucket: _ZERO for bucket in resolver.liability_buckets}
    for entry in document.net_worth_entries:
        match = resolver.match_net_worth(entry.kind)
        if match is None:
            warnings.append(unknown_kind_warning(entry.kind, entry.name))
            continue
        value = convert_amount(
            entry.balance,
            entry.currency,
            base_currency,
            document.fx_rates,
            warnings,
            entry.name,
        )
        target = assets if match.side == "asset" else liabilities
        target[match.bucket] = target.get(match.bucket, _ZERO) + value
    breakdown = SnapshotBreakdown(assets=assets, liabilities=liabilities)

    income = _ZERO
    expenses = _ZERO
    salary_total = _ZERO
    income_by_kind: dict[str, Decimal] = {}
    expenses_by_kind: dict[str, Decimal] = {}
    for entry in document.cash_flow_entries:
        is_salary = normalize_kind(entry.kind) == SALARY_KIND
        match = resolver.match_cash_flow(entry.kind)
        if match is None and not is_salary:
            warnings.append(unknown_cash_flow_warning(entry.kind, entry.name))
            continue
        value = convert_amount(
            entry.amount,
            entry.currency,
            base_currency,
            document.fx_rates,
            warnings,
            entry.name,
        )
        if is_salary:
            salary_total += value
        if match is None:
            warnings.append(unknown_cash_flow_warning(entry.kind, entry.name))
            continue
        if match.direction == "income":
            income += value
            income_by_kind[match.kind] = (
                income_by_kind.get(match.kind, _ZERO) + value
            )
        else:
            expenses += abs(value)
            expenses_by_kind[match.kind] = (
                expenses_by_kind.get(match.kind, _ZERO) + abs(value)
            )

    contributions_total = _ZERO
    for contribution in document.investment_contributions:
        kind = normalize_kind(contribution.kind)
        if not any(marker in kind for marker in CONTRIBUTION_KIND_MARKERS):
            continue
        contributions_total += convert_amount(
            contribution.amount,
            contribution.currency,
            base_currency,
            document.fx_rates,
            warnings,
            contribution.name,
        )

    return MonthFigures(
        document=document,
        base_currency=base_currency,
        breakdown=breakdown,
        totals=SnapshotTotals.from_breakdown(breakdown),
        cash_flow=CashFlowSummary.from_amounts(
            income,
            expenses,
            income_by_kind,
            expenses_by_kind,
        ),
        salary_total=salary_total,
        contributions_total=contributions_total,
        warnings=tuple(warnings),
    )


__all__ = ["MonthFigures", "build_month_figures"]
