"""Domain constants for net worth snapshots."""

from decimal import Decimal
import sys

DEFAULT_BASE_CURRENCY = "EUR"

DEFAULT_ASSET_BUCKETS = (
    "cash",
    "investments",
    "personal",
    "pension",
)

DEFAULT_LIABILITY_BUCKETS = ("liabilities",)

DEFAULT_BUCKET_ALIASES = {
    "liquidity": "cash",
    "retirement": "pension",
    "debt": "liabilities",
}

DEFAULT_POSITIVE_CASH_FLOWS = (
    "salary",
    "bonus",
    "dividends",
    "interest",
    "other_income",
)

DEFAULT_NEGATIVE_CASH_FLOWS = (
    "expenses",
    "rent",
    "groceries",
    "taxes",
    "other_expenses",
)

# Buckets whose sum is the portfolio tracked for returns.
DEFAULT_PORTFOLIO_BUCKETS = ("investments", "pension", "retirement")

# Contribution kinds containing one of these fragments count as deposits.
CONTRIBUTION_KIND_MARKERS = ("investment", "retirement", "pension")

UNMAPPED_BUCKET = "unmapped"
SALARY_KIND = "salary"

# Monthly gross salary in New York, expressed in the base currency.
NEW_YORK_REFERENCE_MONTHLY_SALARY = Decimal("7000")

ECLI_EPSILON = Decimal(repr(sys.float_info.epsilon))
ECLI_NORM_LOW_THRESHOLD = Decimal("0.2")
COMBINED_SCALE_HIGH_THRESHOLD = Decimal("5.0")

MONEY_PLACES = 2
RATIO_PLACES = 4


__all__ = [
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_ASSET_BUCKETS",
    "DEFAULT_LIABILITY_BUCKETS",
    "DEFAULT_BUCKET_ALIASES",
    "DEFAULT_POSITIVE_CASH_FLOWS",
    "DEFAULT_NEGATIVE_CASH_FLOWS",
    "DEFAULT_PORTFOLIO_BUCKETS",
    "CONTRIBUTION_KIND_MARKERS",
    "UNMAPPED_BUCKET",
    "SALARY_KIND",
    "NEW_YORK_REFERENCE_MONTHLY_SALARY",
    "ECLI_EPSILON",
    "ECLI_NORM_LOW_THRESHOLD",
    "COMBINED_SCALE_HIGH_THRESHOLD",
    "MONEY_PLACES",
    "RATIO_PLACES",
]
