"""Tests for the cash-flow Sankey presentation module."""

from decimal import Decimal

from src.adapters.interface.streamlit.sankey_cashflow import (
    DEFICIT_LABEL,
    MIDDLE_LABEL,
    SAVINGS_LABEL,
    build_plotly_figure,
    build_sankey_model,
)
from src.domain.models.snapshot import CashFlowSummary


def _cash_flow(income: dict, expenses: dict) -> CashFlowSummary:
    return CashFlowSummary.from_amounts(
        sum(income.values(), Decimal("0")),
        sum(expenses.values(), Decimal("0")),
        income_by_kind=income,
        expenses_by_kind=expenses,
    )


def test_kinds_become_left_and_right_nodes():
    cash_flow = _cash_flow(
        {"salary": Decimal("3000"), "other_income": Decimal("200")},
        {"rent": Decimal("1000")},
    )

    model = build_sankey_model(cash_flow)

    assert model.node_keys[:4] == [
        "M:INCOME",
        "L:salary",
        "L:other_income",
        "R:rent",
    ]
    assert model.node_labels[:4] == [
        MIDDLE_LABEL,
        "Salary",
        "Other income",
        "Rent",
    ]
    assert model.side_by_key["L:salary"] == "L"
    assert model.side_by_key["R:rent"] == "R"


def test_same_kind_on_both_sides_keeps_distinct_keys():
    cash_flow = _cash_flow(
        {"other": Decimal("5")},
        {"other": Decimal("5")},
    )

    model = build_sankey_model(cash_flow)

    assert "L:other" in model.node_keys
    assert "R:other" in model.node_keys
    assert model.node_labels.count("Other") == 2


def test_zero_amounts_are_skipped():
    cash_flow = _cash_flow(
        {"salary": Decimal("100"), "bonus": Decimal("0")},
        {"rent": Decimal("100")},
    )

    model = build_sankey_model(cash_flow)

    assert "L:bonus" not in model.node_keys
    assert SAVINGS_LABEL not in model.node_labels
    assert len(model.links) == 2


def test_positive_difference_adds_savings_node_and_link():
    cash_flow = _cash_flow(
        {"salary": Decimal("100")},
        {"groceries": Decimal("80")},
    )

    model = build_sankey_model(cash_flow)

    savings_index = model.node_labels.index(SAVINGS_LABEL)
    middle_index = model.node_labels.index(MIDDLE_LABEL)
    assert any(
        link.source == middle_index
        and link.target == savings_index
        and link.value == Decimal("20")
        for link in model.links
    )


def test_negative_difference_deficit_link_only_when_allowed():
    cash_flow = _cash_flow(
        {"salary": Decimal("80")},
        {"groceries": Decimal("100")},
    )

    model_no_deficit = build_sankey_model(
        cash_flow,
        allow_negative_diff=False,
    )
    assert DEFICIT_LABEL not in model_no_deficit.node_labels

    model_with_deficit = build_sankey_model(cash_flow)
    deficit_index = model_with_deficit.node_labels.index(DEFICIT_LABEL)
    middle_index = model_with_deficit.node_labels.index(MIDDLE_LABEL)
    assert any(
        link.source == deficit_index
        and link.target == middle_index
        and link.value == Decimal("20")
        for link in model_with_deficit.links
    )


def test_empty_cash_flow_gives_empty_model():
    model = build_sankey_model(_cash_flow({}, {}))

    assert model.is_empty
    assert model.node_labels == [MIDDLE_LABEL]


def test_plotly_figure_places_sides_in_columns():
    cash_flow = _cash_flow(
        {"salary": Decimal("100")},
        {"rent": Decimal("60")},
    )
    model = build_sankey_model(cash_flow)

    figure = build_plotly_figure(model)

    sankey = figure.data[0]
    assert list(sankey.node.label) == model.node_labels
    assert list(sankey.node.x) == [0.5, 0.02, 0.98, 0.98]
    assert list(sankey.link.value) == [100.0, 60.0, 40.0]
