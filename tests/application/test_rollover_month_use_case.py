"""Tests for the RolloverMonthUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.rollover_month import RolloverMonthUseCase
from src.domain.models.documents import (
    CashFlowEntry,
    InvestmentContribution,
    MonthlyDocument,
    NetWorthEntry,
)


def _document(month: str = "2024-12") -> MonthlyDocument:
    return MonthlyDocument(
        month=month,
        base_currency="EUR",
        fx_rates={"USD": Decimal("0.9")},
        hicp=Decimal("123.4"),
        net_worth_entries=[
            NetWorthEntry("Bank", "cash", "EUR", Decimal("1000")),
        ],
        cash_flow_entries=[
            CashFlowEntry("Job", "salary", "EUR", Decimal("3000")),
        ],
        investment_contributions=[
            InvestmentContribution("ETF", "investment", "EUR", Decimal("200")),
        ],
        source="2024_12.json",
    )


def test_execute_rolls_december_into_january() -> None:
    """December should roll over into January of the next year."""
    rolled = RolloverMonthUseCase(logger=MagicMock()).execute(_document())

    assert rolled.month == "2025-01"
    assert rolled.source == "2025_01.json"


def test_execute_copies_balances_and_resets_flows() -> None:
    """Balances are copied while cash flows and contributions reset."""
    original = _document("2024-05")

    rolled = RolloverMonthUseCase(logger=MagicMock()).execute(original)

    assert rolled.month == "2024-06"
    assert rolled.net_worth_entries == original.net_worth_entries
    assert rolled.cash_flow_entries == ()
    assert rolled.investment_contributions == ()
    assert rolled.fx_rates == {"USD": Decimal("0.9")}
    assert rolled.hicp == Decimal("123.4")
    assert original.cash_flow_entries != ()


def test_execute_can_drop_meta() -> None:
    """keep_meta=False should clear FX rates and HICP."""
    rolled = RolloverMonthUseCase(logger=MagicMock()).execute(
        _document(),
        keep_meta=False,
    )

    assert rolled.fx_rates == {}
    assert rolled.hicp is None
