"""Resolution of raw entry kinds to canonical buckets."""

from dataclasses import dataclass
from typing import Literal

from src.domain.constants import UNMAPPED_BUCKET
from src.domain.models.settings import CategorySettings

Side = Literal["asset", "liability"]
Direction = Literal["income", "expense"]


@dataclass(frozen=True)
class BucketMatch:
    """Canonical bucket a net-worth kind resolved to."""

    bucket: str
    side: Side


@dataclass(frozen=True)
class CashFlowMatch:
    """Canonical kind a cash-flow entry resolved to."""

    kind: str
    direction: Direction


def normalize_kind(kind: str | None) -> str:
    """Case-fold and trim a kind string for lookups."""
    if not kind:
        return ""
    return kind.strip().casefold()


class CategoryResolver:
    """Lookup tables compiled once per run from the category settings.

    Liability lists are registered last so a kind configured on both sides
    resolves to a liability.
    """

    def __init__(self, settings: CategorySettings) -> None:
        self._settings = settings
        self._buckets: dict[str, BucketMatch] = {}
        for bucket in settings.assets:
            self._buckets[normalize_kind(bucket)] = BucketMatch(
                bucket=bucket,
                side="asset",
            )
        for bucket in settings.liabilities:
            self._buckets[normalize_kind(bucket)] = BucketMatch(
                bucket=bucket,
                side="liability",
            )
        for alias, target in settings.aliases.items():
            match = self._buckets.get(normalize_kind(target))
            if match is not None:
                self._buckets.setdefault(normalize_kind(alias), match)

        self._cash_flows: dict[str, CashFlowMatch] = {}
        for kind in settings.positive_cash_flows:
            self._cash_flows[normalize_kind(kind)] = CashFlowMatch(
                kind=kind,
                direction="income",
            )
        for kind in settings.negative_cash_flows:
            self._cash_flows.setdefault(
                normalize_kind(kind),
                CashFlowMatch(kind=kind, direction="expense"),
            )

    @property
    def asset_buckets(self) -> tuple[str, ...]:
        return tuple(self._settings.assets)

    @property
    def liability_buckets(self) -> tuple[str, ...]:
        return tuple(self._settings.liabilities)

    def resolve(self, kind: str) -> str:
        """Return the canonical bucket for a kind, or ``"unmapped"``."""
        match = self.match_net_worth(kind)
        return match.bucket if match else UNMAPPED_BUCKET

    def match_net_worth(self, kind: str) -> BucketMatch | None:
        """Return the bucket match for a net-worth kind."""
        return self._buckets.get(normalize_kind(kind))

    def match_cash_flow(self, kind: str) -> CashFlowMatch | None:
        """Return the income or expense match for a cash-flow kind."""
        return self._cash_flows.get(normalize_kind(kind))


def unknown_kind_warning(kind: str, name: str) -> str:
    """Format the warning for a skipped net-worth entry."""
    return f"Unknown type '{kind}' for entry '{name}' — skipped"


def unknown_cash_flow_warning(kind: str, name: str) -> str:
    """Format the warning for a skipped cash-flow entry."""
    return f"Unknown cash flow type '{kind}' for entry '{name}' — skipped"


__all__ = [
    "BucketMatch",
    "CashFlowMatch",
    "CategoryResolver",
    "normalize_kind",
    "unknown_kind_warning",
    "unknown_cash_flow_warning",
]
