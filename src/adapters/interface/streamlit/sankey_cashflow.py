"""Cash-flow Sankey presentation logic for the Streamlit UI.

This module contains pure, testable transformations from the
``CashFlowSummary`` of a snapshot to a Sankey model and Plotly figure.

The Sankey layout is fixed to three columns:
    income kinds -> Income -> expense kinds
with optional nodes for the difference:
    - ``Savings`` when the net cash flow is positive,
    - ``Deficit`` (optional) when the net cash flow is negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal
from typing import TYPE_CHECKING

from src.domain.models.snapshot import CashFlowSummary

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


LEFT_PREFIX = "L:"
MIDDLE_PREFIX = "M:"
RIGHT_PREFIX = "R:"

MIDDLE_LABEL = "Income"
SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"

MIDDLE_KEY = f"{MIDDLE_PREFIX}INCOME"
SAVINGS_KEY = f"{RIGHT_PREFIX}SAVINGS"
DEFICIT_KEY = f"{LEFT_PREFIX}DEFICIT"

Side = Literal["L", "M", "R"]


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Model used by the UI to render a Sankey with stable indices."""

    node_labels: list[str]
    node_keys: list[str]
    links: list[SankeyLink]
    side_by_key: dict[str, Side]

    @property
    def is_empty(self) -> bool:
        return not self.links


def _label(kind: str) -> str:
    return kind.replace("_", " ").strip().capitalize()


def _add_node(
    *,
    node_keys: list[str],
    node_labels: list[str],
    side_by_key: dict[str, Side],
    key: str,
    label: str,
    side: Side,
) -> int:
    if key in side_by_key:
        return node_keys.index(key)
    node_keys.append(key)
    node_labels.append(label)
    side_by_key[key] = side
    return len(node_keys) - 1


def build_sankey_model(
    cash_flow: CashFlowSummary,
    allow_negative_diff: bool = True,
) -> SankeyModel:
    """Build a stable Sankey model from a month's cash flow.

    Args:
        cash_flow: Cash-flow summary of a snapshot.
        allow_negative_diff: Show a ``Deficit`` node feeding the middle node
            when expenses exceed income.

    Returns:
        SankeyModel: Nodes and links, zero amounts left out.
    """
    node_labels: list[str] = []
    node_keys: list[str] = []
    side_by_key: dict[str, Side] = {}
    links: list[SankeyLink] = []

    middle_index = _add_node(
        node_keys=node_keys,
        node_labels=node_labels,
        side_by_key=side_by_key,
        key=MIDDLE_KEY,
        label=MIDDLE_LABEL,
        side="M",
    )

    for kind, amount in cash_flow.income_by_kind.items():
        if amount <= 0:
            continue
        source = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=f"{LEFT_PREFIX}{kind}",
            label=_label(kind),
            side="L",
        )
        links.append(
            SankeyLink(source=source, target=middle_index, value=amount)
        )

    for kind, amount in cash_flow.expenses_by_kind.items():
        if amount <= 0:
            continue
        target = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=f"{RIGHT_PREFIX}{kind}",
            label=_label(kind),
            side="R",
        )
        links.append(
            SankeyLink(source=middle_index, target=target, value=amount)
        )

    diff = cash_flow.net_cash_flow
    if diff > 0:
        savings_index = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=SAVINGS_KEY,
            label=SAVINGS_LABEL,
            side="R",
        )
        links.append(
            SankeyLink(source=middle_index, target=savings_index, value=diff)
        )
    if diff < 0 and allow_negative_diff:
        deficit_index = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=DEFICIT_KEY,
            label=DEFICIT_LABEL,
            side="L",
        )
        links.append(
            SankeyLink(
                source=deficit_index,
                target=middle_index,
                value=abs(diff),
            )
        )

    return SankeyModel(
        node_labels=node_labels,
        node_keys=node_keys,
        links=links,
        side_by_key=side_by_key,
    )


def build_plotly_figure(model: SankeyModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a Sankey model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    node_x: list[float] = []
    node_y: list[float] = []
    left_count = sum(
        1 for key in model.node_keys if model.side_by_key.get(key) == "L"
    )
    right_count = sum(
        1 for key in model.node_keys if model.side_by_key.get(key) == "R"
    )

    left_seen = 0
    right_seen = 0
    for key in model.node_keys:
        side = model.side_by_key.get(key, "M")
        if side == "L":
            node_x.append(0.02)
            y = (left_seen + 1) / (left_count + 1) if left_count else 0.5
            node_y.append(y)
            left_seen += 1
        elif side == "R":
            node_x.append(0.98)
            y = (right_seen + 1) / (right_count + 1) if right_count else 0.5
            node_y.append(y)
            right_seen += 1
        else:
            node_x.append(0.5)
            node_y.append(0.5)

    sources = [link.source for link in model.links]
    targets = [link.target for link in model.links]
    values = [float(link.value) for link in model.links]

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    x=node_x,
                    y=node_y,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=sources,
                    target=targets,
                    value=values,
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=480,
    )
    return fig


__all__ = [
    "SankeyLink",
    "SankeyModel",
    "build_sankey_model",
    "build_plotly_figure",
]
