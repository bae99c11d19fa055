"""Domain normalization helpers."""


def normalize_currency(currency: str | None) -> str:
    """Normalize currency codes for comparisons and FX lookups.

    Args:
        currency: Raw currency code from a document.

    Returns:
        str: Trimmed, upper-cased code, or an empty string.
    """
    if not currency:
        return ""
    return currency.strip().upper()


def normalize_flag(value) -> bool | None:
    """Normalize ``"yes"``/``"no"`` style flags.

    Args:
        value: Raw flag value (string, boolean or None).

    Returns:
        bool | None: Parsed flag, or None when unset or unrecognized.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    cleaned = str(value).strip().lower()
    if cleaned in {"yes", "y", "true", "1", "on"}:
        return True
    if cleaned in {"no", "n", "false", "0", "off"}:
        return False
    return None


__all__ = ["normalize_currency", "normalize_flag"]
