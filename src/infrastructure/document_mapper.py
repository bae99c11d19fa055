"""Mapping between raw JSON payloads and monthly document models."""

from decimal import Decimal
from typing import Any, Mapping

from src.domain.errors import DocumentParseError
from src.domain.models.documents import (
    CashFlowEntry,
    EcliIndices,
    EcliWeights,
    InvestmentContribution,
    MonthlyDocument,
    NetWorthEntry,
)
from src.domain.services.months import parse_month_key
from src.domain.services.normalization import (
    normalize_currency,
    normalize_flag,
)
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal

_MISSING = object()


def _first(payload: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        value = payload.get(key, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def _as_mapping(value, label: str, source: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DocumentParseError(f"{source}: '{label}' must be an object")
    return value


def _as_list(value, label: str, source: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentParseError(f"{source}: '{label}' must be a list")
    return value


def _decimal(value, label: str, source: str) -> Decimal:
    if value is None:
        raise DocumentParseError(f"{source}: missing value for '{label}'")
    try:
        return coerce_decimal(value)
    except ValueError as exc:
        raise DocumentParseError(
            f"{source}: invalid number for '{label}': {value!r}"
        ) from exc


def _optional_decimal(value, label: str, source: str) -> Decimal | None:
    try:
        return coerce_optional_decimal(value)
    except ValueError as exc:
        raise DocumentParseError(
            f"{source}: invalid number for '{label}': {value!r}"
        ) from exc


def parse_ecli_indices(payload, source: str = "") -> EcliIndices | None:
    """Return basic ECLI indices, or None when any index is missing."""
    data = _as_mapping(payload, "ecli", source)
    values = [
        data.get("rent_index"),
        data.get("groceries_index"),
        data.get("cost_of_living_index"),
    ]
    if any(value is None for value in values):
        return None
    rent, groceries, cost_of_living = (
        _decimal(value, "ecli", source) for value in values
    )
    return EcliIndices(
        rent_index=rent,
        groceries_index=groceries,
        cost_of_living_index=cost_of_living,
    )


def parse_ecli_weights(payload, source: str = "") -> EcliWeights | None:
    """Return ECLI weights, or None when any weight is missing."""
    data = _as_mapping(payload, "ecli_weights", source)
    values = [
        data.get("rent_index_weight"),
        data.get("groceries_index_weight"),
        data.get("cost_of_living_index_weight"),
    ]
    if any(value is None for value in values):
        return None
    rent, groceries, cost_of_living = (
        _decimal(value, "ecli_weights", source) for value in values
    )
    return EcliWeights(
        rent_index_weight=rent,
        groceries_index_weight=groceries,
        cost_of_living_index_weight=cost_of_living,
    )


def _parse_hicp_base(value, source: str) -> Decimal | None:
    if isinstance(value, Mapping):
        value = _first(value, "base_hicp", "base_value")
    return _optional_decimal(value, "hicp_base", source)


def _parse_fx_rates(payload, source: str) -> dict[str, Decimal]:
    rates = _as_mapping(payload, "fx_rates", source)
    return {
        normalize_currency(code): _decimal(rate, f"fx_rates.{code}", source)
        for code, rate in rates.items()
        if rate is not None
    }


def _entry_kind(item: Mapping[str, Any]) -> str:
    return str(_first(item, "type", "kind", default="")).strip()


def _parse_net_worth_entries(payload, source: str) -> list[NetWorthEntry]:
    entries: list[NetWorthEntry] = []
    for item in _as_list(payload, "net_worth_entries", source):
        item = _as_mapping(item, "net_worth_entries[]", source)
        name = str(item.get("name") or "")
        entries.append(
            NetWorthEntry(
                name=name,
                kind=_entry_kind(item),
                currency=normalize_currency(item.get("currency")),
                balance=_decimal(
                    _first(item, "balance", "amount"),
                    f"balance of '{name}'",
                    source,
                ),
                comment=str(item.get("comment") or ""),
            )
        )
    return entries


def _parse_cash_flow_entries(payload, source: str) -> list[CashFlowEntry]:
    entries: list[CashFlowEntry] = []
    for item in _as_list(payload, "cash_flow_entries", source):
        item = _as_mapping(item, "cash_flow_entries[]", source)
        name = str(item.get("name") or "")
        entries.append(
            CashFlowEntry(
                name=name,
                kind=_entry_kind(item),
                currency=normalize_currency(item.get("currency")),
                amount=_decimal(
                    _first(item, "amount", "balance"),
                    f"amount of '{name}'",
                    source,
                ),
                comment=str(item.get("comment") or ""),
            )
        )
    return entries


def _parse_contributions(payload, source: str) -> list[InvestmentContribution]:
    contributions: list[InvestmentContribution] = []
    for item in _as_list(payload, "investment_contributions", source):
        item = _as_mapping(item, "investment_contributions[]", source)
        name = str(item.get("name") or "")
        contributions.append(
            InvestmentContribution(
                name=name,
                kind=_entry_kind(item),
                currency=normalize_currency(item.get("currency")),
                amount=_decimal(
                    _first(item, "amount", "balance"),
                    f"amount of '{name}'",
                    source,
                ),
            )
        )
    return contributions


def document_from_dict(
    payload: Mapping[str, Any],
    source: str = "",
) -> MonthlyDocument:
    """Build a monthly document from its JSON payload.

    Both the flat layout (``month``, ``hicp``, ``ecli``) and the nested
    layout (``metadata.date``, ``inflation.current_hicp``,
    ``inflation.ecli_basic``) are accepted.

    Args:
        payload: Decoded JSON object.
        source: Origin label used in error messages.

    Returns:
        MonthlyDocument: Parsed document.

    Raises:
        DocumentParseError: If the payload shape or a number is invalid.
        InvalidMonthError: If the month or date cannot be parsed.
    """
    if not isinstance(payload, Mapping):
        raise DocumentParseError(f"{source}: document must be a JSON object")
    metadata = _as_mapping(payload.get("metadata"), "metadata", source)
    inflation = _as_mapping(payload.get("inflation"), "inflation", source)

    raw_month = _first(payload, "month", "reference_month")
    if raw_month is None:
        raw_month = metadata.get("date")
    month = parse_month_key(raw_month)

    hicp = _first(payload, "hicp")
    if hicp is None:
        hicp = inflation.get("current_hicp")

    ecli = _first(payload, "ecli")
    if ecli is None:
        ecli = inflation.get("ecli_basic")

    hicp_base = _first(payload, "hicp_base")
    if hicp_base is None:
        hicp_base = _first(metadata, "hicp_base", "hicp")

    ecli_weights = _first(payload, "ecli_weights", "ecli_weight")
    if ecli_weights is None:
        ecli_weights = _first(metadata, "ecli_weights", "ecli_weight")

    def flag(name: str) -> bool | None:
        value = normalize_flag(payload.get(name))
        if value is None:
            value = normalize_flag(metadata.get(name))
        return value

    return MonthlyDocument(
        month=month,
        base_currency=normalize_currency(
            _first(payload, "base_currency")
            or metadata.get("base_currency")
        ),
        fx_rates=_parse_fx_rates(payload.get("fx_rates"), source),
        hicp=_optional_decimal(hicp, "hicp", source),
        ecli=parse_ecli_indices(ecli, source),
        net_worth_entries=_parse_net_worth_entries(
            payload.get("net_worth_entries"),
            source,
        ),
        cash_flow_entries=_parse_cash_flow_entries(
            _first(payload, "cash_flow_entries", "cash-flow-entries"),
            source,
        ),
        investment_contributions=_parse_contributions(
            payload.get("investment_contributions"),
            source,
        ),
        adjust_to_inflation=flag("adjust_to_inflation"),
        normalize_to_new_york_ecli=flag("normalize_to_new_york_ecli"),
        hicp_base=_parse_hicp_base(hicp_base, source),
        ecli_weights=parse_ecli_weights(ecli_weights, source),
        source=source,
    )


def _number(value: Decimal) -> float | str:
    """Return a JSON number, or the Decimal text when a float would round."""
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


def _flag_text(value: bool | None) -> str | None:
    if value is None:
        return None
    return "yes" if value else "no"


def document_to_dict(document: MonthlyDocument) -> dict[str, Any]:
    """Return the flat JSON payload of a monthly document."""
    payload: dict[str, Any] = {
        "month": document.month,
        "base_currency": document.base_currency,
        "fx_rates": {
            code: _number(rate) for code, rate in document.fx_rates.items()
        },
        "hicp": _number(document.hicp) if document.hicp is not None else None,
        "net_worth_entries": [
            {
                "name": entry.name,
                "type": entry.kind,
                "currency": entry.currency,
                "balance": _number(entry.balance),
                "comment": entry.comment,
            }
            for entry in document.net_worth_entries
        ],
        "cash_flow_entries": [
            {
                "name": entry.name,
                "type": entry.kind,
                "currency": entry.currency,
                "amount": _number(entry.amount),
                "comment": entry.comment,
            }
            for entry in document.cash_flow_entries
        ],
        "investment_contributions": [
            {
                "name": entry.name,
                "type": entry.kind,
                "currency": entry.currency,
                "amount": _number(entry.amount),
            }
            for entry in document.investment_contributions
        ],
    }
    if document.ecli is not None:
        payload["ecli"] = {
            "rent_index": _number(document.ecli.rent_index),
            "groceries_index": _number(document.ecli.groceries_index),
            "cost_of_living_index": _number(
                document.ecli.cost_of_living_index
            ),
        }
    if document.hicp_base is not None:
        payload["hicp_base"] = _number(document.hicp_base)
    if document.ecli_weights is not None:
        payload["ecli_weights"] = {
            "rent_index_weight": _number(
                document.ecli_weights.rent_index_weight
            ),
            "groceries_index_weight": _number(
                document.ecli_weights.groceries_index_weight
            ),
            "cost_of_living_index_weight": _number(
                document.ecli_weights.cost_of_living_index_weight
            ),
        }
    for name in ("adjust_to_inflation", "normalize_to_new_york_ecli"):
        text = _flag_text(getattr(document, name))
        if text is not None:
            payload[name] = text
    return payload


__all__ = [
    "document_from_dict",
    "document_to_dict",
    "parse_ecli_indices",
    "parse_ecli_weights",
]
