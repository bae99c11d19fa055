"""Tests for the monthly document mapper."""

from decimal import Decimal

import pytest

from src.domain.errors import DocumentParseError, InvalidMonthError
from src.domain.models.documents import (
    CashFlowEntry,
    EcliIndices,
    EcliWeights,
    MonthlyDocument,
    NetWorthEntry,
)
from src.infrastructure.document_mapper import (
    document_from_dict,
    document_to_dict,
    parse_ecli_indices,
    parse_ecli_weights,
)


def _flat_payload() -> dict:
    return {
        "month": "2024-03",
        "base_currency": "eur",
        "fx_rates": {"usd": 0.92, "EUR": 1},
        "hicp": 126.4,
        "ecli": {
            "rent_index": 40,
            "groceries_index": 70,
            "cost_of_living_index": 65,
        },
        "net_worth_entries": [
            {
                "name": "Checking",
                "type": "cash",
                "currency": "EUR",
                "balance": 1200.5,
                "comment": "main account",
            },
            {
                "name": "Brokerage",
                "kind": "investments",
                "currency": "USD",
                "balance": "5000",
            },
        ],
        "cash_flow_entries": [
            {
                "name": "Pay",
                "type": "salary",
                "currency": "EUR",
                "amount": 3000,
            },
        ],
        "investment_contributions": [
            {
                "name": "ETF plan",
                "type": "investment",
                "currency": "EUR",
                "amount": 500,
            },
        ],
        "adjust_to_inflation": "yes",
    }


def test_document_from_dict_parses_flat_layout() -> None:
    """The flat layout should map every field onto the document."""
    document = document_from_dict(_flat_payload(), source="2024_03.json")

    assert document.month == "2024-03"
    assert document.base_currency == "EUR"
    assert document.fx_rates == {"USD": Decimal("0.92"), "EUR": Decimal("1")}
    assert document.hicp == Decimal("126.4")
    assert document.ecli == EcliIndices(
        rent_index=Decimal("40"),
        groceries_index=Decimal("70"),
        cost_of_living_index=Decimal("65"),
    )
    assert document.net_worth_entries[0] == NetWorthEntry(
        name="Checking",
        kind="cash",
        currency="EUR",
        balance=Decimal("1200.5"),
        comment="main account",
    )
    assert document.net_worth_entries[1].kind == "investments"
    assert document.net_worth_entries[1].balance == Decimal("5000")
    assert document.cash_flow_entries == (
        CashFlowEntry(
            name="Pay",
            kind="salary",
            currency="EUR",
            amount=Decimal("3000"),
        ),
    )
    assert document.investment_contributions[0].amount == Decimal("500")
    assert document.adjust_to_inflation is True
    assert document.normalize_to_new_york_ecli is None
    assert document.source == "2024_03.json"


def test_document_from_dict_parses_nested_layout() -> None:
    """Metadata and inflation sections should be read as fallbacks."""
    payload = {
        "metadata": {
            "date": "2023-12-31",
            "base_currency": "usd",
            "hicp": {"base_hicp": 100},
            "ecli_weight": {
                "rent_index_weight": 0.5,
                "groceries_index_weight": 0.25,
                "cost_of_living_index_weight": 0.25,
            },
            "normalize_to_new_york_ecli": "no",
        },
        "inflation": {
            "current_hicp": 123,
            "ecli_basic": {
                "rent_index": 50,
                "groceries_index": 60,
                "cost_of_living_index": 70,
            },
        },
        "cash-flow-entries": [
            {"name": "Rent", "type": "rent", "currency": "USD", "amount": 900},
        ],
    }

    document = document_from_dict(payload)

    assert document.month == "2023-12"
    assert document.base_currency == "USD"
    assert document.hicp == Decimal("123")
    assert document.hicp_base == Decimal("100")
    assert document.ecli.cost_of_living_index == Decimal("70")
    assert document.ecli_weights == EcliWeights(
        rent_index_weight=Decimal("0.5"),
        groceries_index_weight=Decimal("0.25"),
        cost_of_living_index_weight=Decimal("0.25"),
    )
    assert document.normalize_to_new_york_ecli is False
    assert document.cash_flow_entries[0].kind == "rent"
    assert document.net_worth_entries == ()


def test_top_level_values_win_over_nested_ones() -> None:
    """Flat keys should take precedence over metadata and inflation."""
    payload = {
        "month": "2024-01",
        "hicp": 110,
        "metadata": {"date": "2020-05-01", "adjust_to_inflation": "no"},
        "inflation": {"current_hicp": 90},
        "adjust_to_inflation": "yes",
    }

    document = document_from_dict(payload)

    assert document.month == "2024-01"
    assert document.hicp == Decimal("110")
    assert document.adjust_to_inflation is True


def test_partial_ecli_is_treated_as_missing() -> None:
    """Indices or weights with a missing member should be ignored."""
    assert parse_ecli_indices({"rent_index": 1, "groceries_index": 2}) is None
    assert parse_ecli_weights({"rent_index_weight": 1}) is None
    assert parse_ecli_indices(None) is None


def test_missing_month_raises_invalid_month() -> None:
    """A document without a month or date should be rejected."""
    with pytest.raises(InvalidMonthError):
        document_from_dict({"base_currency": "EUR"}, source="x.json")


@pytest.mark.parametrize(
    "payload, message",
    [
        (["not", "an", "object"], "must be a JSON object"),
        ({"month": "2024-01", "metadata": "oops"}, "'metadata' must be"),
        ({"month": "2024-01", "net_worth_entries": {}}, "must be a list"),
        (
            {
                "month": "2024-01",
                "net_worth_entries": [
                    {"name": "Cash", "type": "cash", "balance": "lots"}
                ],
            },
            "invalid number for 'balance of 'Cash''",
        ),
        (
            {"month": "2024-01", "fx_rates": {"USD": "abc"}},
            "fx_rates.USD",
        ),
        ({"month": "2024-01", "hicp": True}, "'hicp'"),
    ],
)
def test_invalid_payloads_raise_parse_error(payload, message) -> None:
    """Shape and number errors should raise DocumentParseError."""
    with pytest.raises(DocumentParseError) as excinfo:
        document_from_dict(payload, source="bad.json")

    assert message in str(excinfo.value)


def test_document_to_dict_writes_flat_layout() -> None:
    """Serialized documents should use the flat layout with text flags."""
    document = MonthlyDocument(
        month="2024-02",
        base_currency="EUR",
        fx_rates={"USD": Decimal("0.9")},
        hicp=Decimal("125"),
        net_worth_entries=[
            NetWorthEntry("Cash", "cash", "EUR", Decimal("10.5")),
        ],
        normalize_to_new_york_ecli=False,
        hicp_base=Decimal("100"),
    )

    payload = document_to_dict(document)

    assert payload["month"] == "2024-02"
    assert payload["fx_rates"] == {"USD": 0.9}
    assert payload["hicp"] == 125.0
    assert payload["hicp_base"] == 100.0
    assert payload["net_worth_entries"] == [
        {
            "name": "Cash",
            "type": "cash",
            "currency": "EUR",
            "balance": 10.5,
            "comment": "",
        }
    ]
    assert payload["cash_flow_entries"] == []
    assert payload["normalize_to_new_york_ecli"] == "no"
    assert "adjust_to_inflation" not in payload
    assert "ecli" not in payload
    assert "ecli_weights" not in payload


def test_document_to_dict_keeps_missing_hicp_as_null() -> None:
    """A document without HICP should serialize it as None."""
    payload = document_to_dict(MonthlyDocument("2024-02", "EUR"))

    assert payload["hicp"] is None
    assert document_from_dict(payload).hicp is None


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"month": "2024-01", "fx_rates": {"USD": float("nan")}}, "fx_rates"),
        (
            {
                "month": "2024-01",
                "net_worth_entries": [
                    {"name": "Cash", "type": "cash", "balance": "Infinity"}
                ],
            },
            "balance of 'Cash'",
        ),
        ({"month": "2024-01", "hicp": "-inf"}, "'hicp'"),
    ],
)
def test_non_finite_numbers_raise_parse_error(payload, message) -> None:
    """NaN and infinite values should be rejected while parsing."""
    with pytest.raises(DocumentParseError) as excinfo:
        document_from_dict(payload, source="bad.json")

    assert message in str(excinfo.value)


def test_entry_without_amount_raises_parse_error() -> None:
    """A missing balance or amount should not be read as zero."""
    payload = {
        "month": "2024-01",
        "net_worth_entries": [{"name": "Cash", "type": "cash"}],
    }

    with pytest.raises(DocumentParseError, match="missing value"):
        document_from_dict(payload, source="bad.json")

    payload = {
        "month": "2024-01",
        "cash_flow_entries": [{"name": "Pay", "type": "salary"}],
    }
    with pytest.raises(DocumentParseError, match="amount of 'Pay'"):
        document_from_dict(payload, source="bad.json")


def test_document_to_dict_keeps_precise_decimal_text() -> None:
    """Values a float cannot hold exactly should be written as text."""
    document = MonthlyDocument(
        month="2024-02",
        base_currency="EUR",
        fx_rates={"USD": Decimal("0.9")},
        net_worth_entries=[
            NetWorthEntry(
                "Estate",
                "personal",
                "EUR",
                Decimal("12345678901234567.89"),
            ),
        ],
    )

    payload = document_to_dict(document)

    assert payload["fx_rates"] == {"USD": 0.9}
    assert payload["net_worth_entries"][0]["balance"] == (
        "12345678901234567.89"
    )
    reloaded = document_from_dict(payload)
    assert reloaded.net_worth_entries[0].balance == Decimal(
        "12345678901234567.89"
    )
