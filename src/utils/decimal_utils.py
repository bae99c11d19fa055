"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so JSON values such as ``0.4`` keep their
    written precision instead of their binary expansion.

    Args:
        value: Raw numeric value from a JSON document or settings file.

    Returns:
        Decimal: Normalized, finite numeric value.

    Raises:
        ValueError: If the value is missing, not numeric, NaN or infinite.
    """
    if value is None:
        raise ValueError("Expected a number, got None")
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got boolean {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Expected a number, got {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a numeric value, keeping ``None`` as missing."""
    if value is None:
        return None
    return coerce_decimal(value)


__all__ = ["coerce_decimal", "coerce_optional_decimal"]
