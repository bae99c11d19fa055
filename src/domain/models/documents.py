"""Domain models for monthly input documents."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping


@dataclass(frozen=True)
class NetWorthEntry:
    """Holding or debt balance reported for the month.

    Attributes:
        name: Free-text label of the account or holding.
        kind: Raw type string matched against the category settings.
        currency: Currency code the balance is expressed in.
        balance: Balance in ``currency``.
        comment: Optional free-text comment.
    """

    name: str
    kind: str
    currency: str
    balance: Decimal
    comment: str = ""


@dataclass(frozen=True)
class CashFlowEntry:
    """Income or expense amount booked during the month."""

    name: str
    kind: str
    currency: str
    amount: Decimal
    comment: str = ""


@dataclass(frozen=True)
class InvestmentContribution:
    """Deposit into an investment-like account during the month."""

    name: str
    kind: str
    currency: str
    amount: Decimal


@dataclass(frozen=True)
class EcliIndices:
    """Basic cost-of-living indices for the place the money is spent in."""

    rent_index: Decimal
    groceries_index: Decimal
    cost_of_living_index: Decimal


@dataclass(frozen=True)
class EcliWeights:
    """Weights combining the basic ECLI indices into one index."""

    rent_index_weight: Decimal
    groceries_index_weight: Decimal
    cost_of_living_index_weight: Decimal


@dataclass(frozen=True)
class MonthlyDocument:
    """One month of raw personal-finance data.

    Attributes:
        month: Month key in ``YYYY-MM`` format, unique per run.
        base_currency: Currency totals are expressed in.
        fx_rates: Units of base currency per one unit of each currency.
        hicp: Current-period HICP value, when known.
        ecli: Basic cost-of-living indices, when known.
        net_worth_entries: Holdings and debts at month end.
        cash_flow_entries: Income and expenses of the month.
        investment_contributions: Deposits into tracked portfolios.
        adjust_to_inflation: Per-document inflation flag override.
        normalize_to_new_york_ecli: Per-document cost-of-living flag override.
        hicp_base: Per-document base HICP override.
        ecli_weights: Per-document ECLI weight override.
        source: Origin label (file name) used in messages.
    """

    month: str
    base_currency: str
    fx_rates: Mapping[str, Decimal] = field(default_factory=dict)
    hicp: Decimal | None = None
    ecli: EcliIndices | None = None
    net_worth_entries: tuple[NetWorthEntry, ...] = ()
    cash_flow_entries: tuple[CashFlowEntry, ...] = ()
    investment_contributions: tuple[InvestmentContribution, ...] = ()
    adjust_to_inflation: bool | None = None
    normalize_to_new_york_ecli: bool | None = None
    hicp_base: Decimal | None = None
    ecli_weights: EcliWeights | None = None
    source: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "fx_rates",
            dict(self.fx_rates),
        )
        object.__setattr__(
            self,
            "net_worth_entries",
            tuple(self.net_worth_entries),
        )
        object.__setattr__(
            self,
            "cash_flow_entries",
            tuple(self.cash_flow_entries),
        )
        object.__setattr__(
            self,
            "investment_contributions",
            tuple(self.investment_contributions),
        )

    @property
    def label(self) -> str:
        """Return the source label, falling back to the month key."""
        return self.source or self.month


__all__ = [
    "NetWorthEntry",
    "CashFlowEntry",
    "InvestmentContribution",
    "EcliIndices",
    "EcliWeights",
    "MonthlyDocument",
]
