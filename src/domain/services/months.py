"""Month key parsing and sequencing."""

from datetime import date, datetime

from src.domain.errors import InvalidMonthError

_MONTH_FORMATS = ("%Y-%m", "%Y_%m", "%Y/%m")
_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")


def parse_month_key(value: str | None) -> str:
    """Return a canonical ``YYYY-MM`` key from a month or date string.

    Args:
        value: Month (``YYYY-MM``, ``YYYY_MM``) or date (``YYYY-MM-DD``,
            ``YYYY/MM/DD``) string.

    Returns:
        str: Canonical month key.

    Raises:
        InvalidMonthError: If the value matches none of the formats.
    """
    if not value or not isinstance(value, str):
        raise InvalidMonthError(f"Missing or invalid month: {value!r}")
    cleaned = value.strip()
    for fmt in _MONTH_FORMATS + _DATE_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        return f"{parsed.year:04d}-{parsed.month:02d}"
    raise InvalidMonthError(
        f"Unparseable month '{value}'. Expected YYYY-MM or YYYY-MM-DD."
    )


def month_start(month: str) -> date:
    """Return the first day of a ``YYYY-MM`` month."""
    key = parse_month_key(month)
    return date(int(key[:4]), int(key[5:7]), 1)


def next_month(month: str) -> str:
    """Return the month key following ``month``.

    Args:
        month: Month key in any format accepted by ``parse_month_key``.

    Returns:
        str: Following month, December rolling into January.
    """
    start = month_start(month)
    if start.month == 12:
        return f"{start.year + 1:04d}-01"
    return f"{start.year:04d}-{start.month + 1:02d}"


def month_file_name(month: str) -> str:
    """Return the ``YYYY_MM.json`` file name for a month."""
    return parse_month_key(month).replace("-", "_") + ".json"


__all__ = ["parse_month_key", "month_start", "next_month", "month_file_name"]
