"""Currency conversion against a snapshot's base currency."""

from decimal import Decimal
from typing import Mapping

from src.domain.services.normalization import normalize_currency

_ONE = Decimal("1")


def lookup_fx_rate(
    currency: str,
    base_currency: str,
    fx_rates: Mapping[str, Decimal],
) -> Decimal | None:
    """Return units of base currency per one unit of ``currency``.

    Args:
        currency: Currency of the amount being converted.
        base_currency: Currency of the snapshot.
        fx_rates: Month FX table keyed by currency code.

    Returns:
        Decimal | None: Rate, 1 for the base currency, or None when the
        table has no usable rate.
    """
    code = normalize_currency(currency)
    if code == normalize_currency(base_currency):
        return _ONE
    rate = fx_rates.get(code)
    if rate is None:
        rate = fx_rates.get(currency)
    if rate is None or rate <= 0:
        return None
    return rate


def resolve_fx_rate(
    currency: str,
    base_currency: str,
    fx_rates: Mapping[str, Decimal],
    warnings: list[str],
    entry_name: str = "",
) -> Decimal:
    """Return the FX rate, degrading to 1.0 with a warning when missing.

    Args:
        currency: Currency of the amount being converted.
        base_currency: Currency of the snapshot.
        fx_rates: Month FX table keyed by currency code.
        warnings: Snapshot warnings, appended to when the rate is missing.
        entry_name: Entry label used in the warning.

    Returns:
        Decimal: Rate to apply.
    """
    rate = lookup_fx_rate(currency, base_currency, fx_rates)
    if rate is not None:
        return rate
    warnings.append(
        f"Missing FX rate {currency}->{base_currency} "
        f"for entry '{entry_name}' — assuming 1.0"
    )
    return _ONE


def convert_amount(
    amount: Decimal,
    currency: str,
    base_currency: str,
    fx_rates: Mapping[str, Decimal],
    warnings: list[str],
    entry_name: str = "",
) -> Decimal:
    """Convert an amount into the base currency."""
    return amount * resolve_fx_rate(
        currency,
        base_currency,
        fx_rates,
        warnings,
        entry_name,
    )


__all__ = ["lookup_fx_rate", "resolve_fx_rate", "convert_amount"]
