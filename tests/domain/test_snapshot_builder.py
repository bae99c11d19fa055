"""Tests for the per-month snapshot builder."""

from decimal import Decimal

from src.domain.models.documents import (
    CashFlowEntry,
    InvestmentContribution,
    MonthlyDocument,
    NetWorthEntry,
)
from src.domain.models.settings import CategorySettings
from src.domain.services.categories import CategoryResolver
from src.domain.services.snapshot_builder import build_month_figures


def _document(**kwargs) -> MonthlyDocument:
    values = {
        "month": "2024-01",
        "base_currency": "EUR",
        "fx_rates": {"USD": Decimal("0.5")},
    }
    values.update(kwargs)
    return MonthlyDocument(**values)


def _build(document: MonthlyDocument):
    return build_month_figures(
        document,
        CategoryResolver(CategorySettings()),
        "EUR",
    )


def test_breakdown_converts_and_sums_entries() -> None:
    """Entries should be converted to base currency and bucketed."""
    document = _document(
        net_worth_entries=[
            NetWorthEntry("Bank", "cash", "EUR", Decimal("1000")),
            NetWorthEntry("Broker", "investments", "USD", Decimal("2000")),
            NetWorthEntry("Wallet", "Liquidity", "EUR", Decimal("50")),
            NetWorthEntry("Card", "liabilities", "EUR", Decimal("300")),
        ]
    )

    figures = _build(document)

    assert figures.breakdown.assets["cash"] == Decimal("1050")
    assert figures.breakdown.assets["investments"] == Decimal("1000.0")
    assert figures.breakdown.liabilities["liabilities"] == Decimal("300")
    assert figures.totals.assets == Decimal("2050.0")
    assert figures.totals.liabilities == Decimal("300")
    assert figures.totals.net_worth == Decimal("1750.0")
    assert figures.warnings == ()


def test_configured_buckets_are_preseeded_at_zero() -> None:
    """Every configured bucket should be present even without entries."""
    figures = _build(_document())

    assert figures.breakdown.assets == {
        "cash": Decimal("0"),
        "investments": Decimal("0"),
        "personal": Decimal("0"),
        "pension": Decimal("0"),
    }
    assert figures.totals.net_worth == Decimal("0")


def test_missing_fx_rate_counts_at_one_and_warns() -> None:
    """An entry without FX rate should count at 1.0 with one warning."""
    document = _document(
        net_worth_entries=[
            NetWorthEntry("Exotic", "cash", "XYZ", Decimal("100")),
        ]
    )

    figures = _build(document)

    assert figures.breakdown.assets["cash"] == Decimal("100")
    assert len(figures.warnings) == 1
    assert "XYZ->EUR" in figures.warnings[0]


def test_unknown_kind_is_skipped_with_warning() -> None:
    """An unknown kind should leave the breakdown unchanged."""
    document = _document(
        net_worth_entries=[
            NetWorthEntry("Bank", "cash", "EUR", Decimal("10")),
            NetWorthEntry("Box", "mystery", "EUR", Decimal("999")),
        ]
    )

    figures = _build(document)

    assert figures.breakdown.assets["cash"] == Decimal("10")
    assert figures.totals.assets == Decimal("10")
    assert figures.warnings == (
        "Unknown type 'mystery' for entry 'Box' — skipped",
    )


def test_cash_flow_income_expenses_and_save_rate() -> None:
    """Cash flows should split into income and absolute expenses."""
    document = _document(
        cash_flow_entries=[
            CashFlowEntry("Job", "salary", "EUR", Decimal("3000")),
            CashFlowEntry("Shares", "dividends", "USD", Decimal("200")),
            CashFlowEntry("Flat", "rent", "EUR", Decimal("-1200")),
            CashFlowEntry("Food", "groceries", "EUR", Decimal("400")),
        ]
    )

    figures = _build(document)

    cash_flow = figures.cash_flow
    assert cash_flow.income == Decimal("3100.0")
    assert cash_flow.expenses == Decimal("1600")
    assert cash_flow.net_cash_flow == Decimal("1500.0")
    assert cash_flow.save_rate == Decimal("1500.0") / Decimal("3100.0")
    assert cash_flow.income_by_kind == {
        "salary": Decimal("3000"),
        "dividends": Decimal("100.0"),
    }
    assert cash_flow.expenses_by_kind["rent"] == Decimal("1200")
    assert figures.salary_total == Decimal("3000")


def test_save_rate_is_zero_without_income() -> None:
    """A month without income should have a zero save rate."""
    document = _document(
        cash_flow_entries=[
            CashFlowEntry("Flat", "rent", "EUR", Decimal("800")),
        ]
    )

    figures = _build(document)

    assert figures.cash_flow.save_rate == Decimal("0")
    assert figures.cash_flow.net_cash_flow == Decimal("-800")


def test_unknown_cash_flow_kind_is_skipped_with_warning() -> None:
    """Unknown cash-flow kinds should be excluded with a warning."""
    document = _document(
        cash_flow_entries=[
            CashFlowEntry("Aunt", "gift", "EUR", Decimal("50")),
        ]
    )

    figures = _build(document)

    assert figures.cash_flow.income == Decimal("0")
    assert figures.warnings == (
        "Unknown cash flow type 'gift' for entry 'Aunt' — skipped",
    )


def test_only_investment_like_contributions_are_counted() -> None:
    """Contributions count only when their kind is investment-like."""
    document = _document(
        investment_contributions=[
            InvestmentContribution(
                "ETF plan", "investment", "EUR", Decimal("500")
            ),
            InvestmentContribution(
                "Pillar 3", "pension_fund", "USD", Decimal("200")
            ),
            InvestmentContribution("Loan", "repayment", "EUR", Decimal("99")),
        ]
    )

    figures = _build(document)

    assert figures.contributions_total == Decimal("600.0")
