"""Domain models for pipeline settings."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_ASSET_BUCKETS,
    DEFAULT_BASE_CURRENCY,
    DEFAULT_BUCKET_ALIASES,
    DEFAULT_LIABILITY_BUCKETS,
    DEFAULT_NEGATIVE_CASH_FLOWS,
    DEFAULT_PORTFOLIO_BUCKETS,
    DEFAULT_POSITIVE_CASH_FLOWS,
    NEW_YORK_REFERENCE_MONTHLY_SALARY,
)
from src.domain.models.documents import EcliWeights


@dataclass(frozen=True)
class HicpBase:
    """Reference HICP value all months are deflated to."""

    base_value: Decimal
    base_year: int | None = None
    base_month: int | None = None


@dataclass(frozen=True)
class CategorySettings:
    """Bucket lists used to classify entries.

    Attributes:
        assets: Canonical asset bucket names.
        liabilities: Canonical liability bucket names.
        positive_cash_flows: Cash-flow kinds counted as income.
        negative_cash_flows: Cash-flow kinds counted as expenses.
        aliases: Alternative kind names mapped to a canonical bucket.
        ecli_weights: Default ECLI weights. Their sum is not validated.
    """

    assets: tuple[str, ...] = DEFAULT_ASSET_BUCKETS
    liabilities: tuple[str, ...] = DEFAULT_LIABILITY_BUCKETS
    positive_cash_flows: tuple[str, ...] = DEFAULT_POSITIVE_CASH_FLOWS
    negative_cash_flows: tuple[str, ...] = DEFAULT_NEGATIVE_CASH_FLOWS
    aliases: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_BUCKET_ALIASES)
    )
    ecli_weights: EcliWeights | None = None


@dataclass(frozen=True)
class PipelineSettings:
    """Read-only settings shared by every snapshot of a run."""

    settings_version: int = 1
    base_currency: str = DEFAULT_BASE_CURRENCY
    hicp: HicpBase | None = None
    categories: CategorySettings = field(default_factory=CategorySettings)
    adjust_to_inflation: bool = False
    normalize_to_new_york_ecli: bool = False
    reference_monthly_salary: Decimal = NEW_YORK_REFERENCE_MONTHLY_SALARY
    portfolio_buckets: tuple[str, ...] = DEFAULT_PORTFOLIO_BUCKETS

    @property
    def base_hicp(self) -> Decimal | None:
        """Return the configured base HICP value, if any."""
        if self.hicp is None:
            return None
        return self.hicp.base_value


__all__ = ["HicpBase", "CategorySettings", "PipelineSettings"]
