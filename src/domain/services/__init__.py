"""Domain services package."""

from .adjustments import (
    compute_adjustments,
    compute_cost_of_living_adjustment,
    compute_inflation_adjustment,
    compute_real_purchasing_power,
    resolve_base_hicp,
)
from .categories import CategoryResolver
from .fx import convert_amount, lookup_fx_rate, resolve_fx_rate
from .months import next_month, parse_month_key
from .normalization import normalize_currency, normalize_flag
from .performance import PerformanceTracker, compute_inflation_factor
from .rounding import finalize_snapshot, round_money, round_ratio
from .snapshot_builder import MonthFigures, build_month_figures
from .snapshots import compute_snapshot
from .yearly import compute_yearly_stats

__all__ = [
    "CategoryResolver",
    "MonthFigures",
    "PerformanceTracker",
    "build_month_figures",
    "compute_adjustments",
    "compute_cost_of_living_adjustment",
    "compute_inflation_adjustment",
    "compute_inflation_factor",
    "compute_real_purchasing_power",
    "compute_snapshot",
    "compute_yearly_stats",
    "convert_amount",
    "finalize_snapshot",
    "lookup_fx_rate",
    "next_month",
    "normalize_currency",
    "normalize_flag",
    "parse_month_key",
    "resolve_base_hicp",
    "resolve_fx_rate",
    "round_money",
    "round_ratio",
]
