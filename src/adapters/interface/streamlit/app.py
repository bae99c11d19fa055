"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
from importlib import import_module

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.sankey_cashflow import (
    build_plotly_figure,
    build_sankey_model,
)
from src.application.use_cases.get_snapshot_entries import (
    SnapshotEntriesView,
)
from src.domain.errors import DashboardError
from src.domain.models.snapshot import (
    ADJUSTMENT_KINDS,
    Dashboard,
    Snapshot,
    SnapshotBreakdown,
)
from src.infrastructure.container import (
    build_generate_dashboard_use_case,
    build_snapshot_entries_use_case,
)

_ADJUSTMENT_LABELS = {
    "inflation_adjusted": "Inflation adjusted",
    "cost_of_living_adjusted": "Cost of living (New York)",
    "real_purchasing_power": "Real purchasing power",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether the dataframe libraries Altair charts need load.

    Returns:
        Tuple of a success flag and an error message when a library is
        missing or only partially importable.
    """
    checks = (("numpy", "ndarray"), ("pandas", "Timestamp"))
    for module_name, attribute in checks:
        try:
            module = import_module(module_name)
        except ImportError as exc:
            return False, f"{module_name} could not be imported: {exc}"
        if not hasattr(module, attribute):
            return (
                False,
                f"{module_name} is incomplete (missing {attribute}). "
                "Reinstall it to render charts.",
            )
    return True, None


def _fetch_dashboard() -> Dashboard:
    """Compute the dashboard from the configured document directory."""
    use_case = build_generate_dashboard_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_dashboard(schema_version: int = 1) -> Dashboard:
    """Cached wrapper around _fetch_dashboard for Streamlit sessions."""
    _ = schema_version
    return _fetch_dashboard()


def _fetch_entries(month: str) -> SnapshotEntriesView:
    """Fetch the enriched net-worth entries of a month."""
    use_case = build_snapshot_entries_use_case()
    return use_case.execute(month)


@st.cache_data(show_spinner=False)
def _load_entries(month: str) -> SnapshotEntriesView:
    """Cached wrapper around _fetch_entries."""
    return _fetch_entries(month)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_percent(ratio: Decimal) -> str:
    """Format a ratio (0.0123) as a signed percentage."""
    percent = ratio * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.2f}%"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / baseline) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _previous_snapshot(
    snapshots: Sequence[Snapshot],
    month: str,
) -> Snapshot | None:
    """Return the snapshot preceding ``month``, if any."""
    previous = None
    for snapshot in snapshots:
        if snapshot.month >= month:
            break
        previous = snapshot
    return previous


def _net_worth_series(
    snapshots: Sequence[Snapshot],
) -> list[dict[str, str | float]]:
    """Return long-format net worth rows, one per month and variant."""
    rows: list[dict[str, str | float]] = []
    for snapshot in snapshots:
        rows.append(
            {
                "month": snapshot.month,
                "series": "Nominal",
                "net_worth": float(snapshot.totals.net_worth),
            }
        )
        rows.append(
            {
                "month": snapshot.month,
                "series": "Real (HICP)",
                "net_worth": float(snapshot.real_wealth.net_worth_real),
            }
        )
        for kind in ADJUSTMENT_KINDS:
            adjustment = snapshot.adjustments.get(kind)
            if adjustment is None:
                continue
            rows.append(
                {
                    "month": snapshot.month,
                    "series": _ADJUSTMENT_LABELS[kind],
                    "net_worth": float(adjustment.totals.net_worth),
                }
            )
    return rows


def _render_net_worth_chart(
    snapshots: Sequence[Snapshot],
    currency_code: str,
) -> None:
    """Render the net worth history as a multi-series line chart."""
    data = _net_worth_series(snapshots)
    if not data:
        st.info("No snapshots available for the chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("month:O", title=None),
        y=alt.Y("net_worth:Q", title=f"Net worth ({currency_code})"),
        color=alt.Color(
            "series:N",
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:O"),
            alt.Tooltip("series:N"),
            alt.Tooltip("net_worth:Q", format=",.2f"),
        ],
    ).properties(height=360)
    st.subheader("Net worth over time")
    st.altair_chart(chart, width="stretch")


def _prepare_donut_chart_data(
    breakdown: SnapshotBreakdown,
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Bucket amounts of the snapshot.
        currency_code: Currency used in labels.
        max_categories: Maximum buckets to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        (
            (bucket, amount)
            for bucket, amount in breakdown.assets.items()
            if amount > 0
        ),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    other_amount = sum(
        (amount for _bucket, amount in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items = [*top_items, ("Other", other_amount)]
    total_amount = sum(
        (amount for _bucket, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for bucket, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": bucket.capitalize(),
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_asset_chart(
    breakdown: SnapshotBreakdown,
    currency_code: str,
    title: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of asset amounts by bucket."""
    data, _total = _prepare_donut_chart_data(breakdown, currency_code)
    if not data:
        st.info("No asset amounts available for the chart.")
        return
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                range=[
                    "#1b9aaa",
                    "#2e7d32",
                    "#f4a261",
                    "#e76f51",
                    "#457b9d",
                    "#f6c453",
                    "#6c8ead",
                ]
            ),
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=3,
            ),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.25)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
        color="#f5f7ff",
    ).encode(text="amount_label:N")
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _yearly_rows(dashboard: Dashboard) -> list[dict[str, str | int]]:
    """Return display rows for the yearly stats table."""
    currency_code = dashboard.base_currency
    return [
        {
            "Year": stats.year,
            "Months": stats.months_count,
            "Income": _format_currency(stats.total_income, currency_code),
            "Expenses": _format_currency(stats.total_expenses, currency_code),
            "Savings": _format_currency(stats.total_savings, currency_code),
            "Avg save rate": _format_percent(stats.average_save_rate),
        }
        for stats in dashboard.yearly_stats
    ]


def _adjustment_rows(snapshot: Snapshot) -> list[dict[str, str]]:
    """Return display rows for the adjustments of a snapshot."""
    rows: list[dict[str, str]] = []
    for kind in ADJUSTMENT_KINDS:
        adjustment = snapshot.adjustments.get(kind)
        if adjustment is None:
            continue
        rows.append(
            {
                "View": _ADJUSTMENT_LABELS[kind],
                "Net worth": _format_currency(
                    adjustment.totals.net_worth,
                    snapshot.base_currency,
                ),
                "Scale": f"{adjustment.scale:.4f}",
                "Advantage": (
                    f"{adjustment.advantage_pct:+.2f}%"
                    if adjustment.advantage_pct is not None
                    else "—"
                ),
                "Notes": adjustment.badge or adjustment.notes or "—",
            }
        )
    return rows


def _render_cash_flow(snapshot: Snapshot) -> None:
    """Render cash-flow metrics and the income/expense Sankey."""
    cash_flow = snapshot.cash_flow
    currency_code = snapshot.base_currency
    st.subheader(f"Cash flow {snapshot.month}")
    income_col, expenses_col, rate_col = st.columns(3)
    income_col.metric(
        "Income",
        _format_currency(cash_flow.income, currency_code),
    )
    expenses_col.metric(
        "Expenses",
        _format_currency(cash_flow.expenses, currency_code),
    )
    rate_col.metric("Save rate", _format_percent(cash_flow.save_rate))
    model = build_sankey_model(cash_flow)
    if model.is_empty:
        st.info("No cash-flow entries recorded for this month.")
        return
    st.plotly_chart(build_plotly_figure(model), width="stretch")


def _render_dashboard(dashboard: Dashboard, charts_enabled: bool) -> None:
    """Render the overview page of the dashboard."""
    snapshots = list(dashboard.snapshots)
    months = [snapshot.month for snapshot in snapshots]
    selected_month = st.sidebar.selectbox(
        "Month",
        list(reversed(months)),
        index=0,
    )
    snapshot = next(s for s in snapshots if s.month == selected_month)
    previous = _previous_snapshot(snapshots, selected_month)
    currency_code = snapshot.base_currency

    assets_col, liabilities_col, net_worth_col, twr_col = st.columns(4)
    baseline = previous.totals if previous else None
    assets_col.metric(
        "Assets",
        _format_currency(snapshot.totals.assets, currency_code),
        _format_delta_with_percent(
            snapshot.totals.assets - baseline.assets,
            baseline.assets,
        )
        if baseline
        else None,
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(snapshot.totals.liabilities, currency_code),
        _format_delta_with_percent(
            snapshot.totals.liabilities - baseline.liabilities,
            baseline.liabilities,
        )
        if baseline
        else None,
        delta_color="inverse",
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(snapshot.totals.net_worth, currency_code),
        _format_delta_with_percent(
            snapshot.totals.net_worth - baseline.net_worth,
            baseline.net_worth,
        )
        if baseline
        else None,
    )
    twr_col.metric(
        "TWR (cumulative)",
        _format_percent(snapshot.performance.twr_cumulative - 1),
        _format_percent(snapshot.performance.nominal_return),
    )

    if charts_enabled:
        chart_left, chart_right = st.columns(2)
        with chart_left:
            _render_net_worth_chart(snapshots, currency_code)
        with chart_right:
            _render_asset_chart(
                snapshot.breakdown,
                currency_code,
                f"Assets by bucket ({currency_code})",
            )

    adjustment_rows = _adjustment_rows(snapshot)
    if adjustment_rows:
        st.subheader("Adjusted views")
        st.dataframe(adjustment_rows, width="stretch", hide_index=True)

    _render_cash_flow(snapshot)

    yearly_rows = _yearly_rows(dashboard)
    if yearly_rows:
        st.subheader("Yearly statistics")
        st.dataframe(yearly_rows, width="stretch", hide_index=True)

    if snapshot.warnings:
        st.subheader("Warnings")
        for warning in snapshot.warnings:
            st.warning(warning)


def _render_entries(dashboard: Dashboard) -> None:
    """Render the net-worth entries of a selected month."""
    months = [snapshot.month for snapshot in reversed(dashboard.snapshots)]
    month = st.sidebar.selectbox("Month", months, index=0)
    view = _load_entries(month)
    st.caption(f"{len(view.entries)} entries for {view.month}")
    data = [
        {
            "Name": entry.name,
            "Type": entry.kind,
            "Bucket": entry.bucket,
            "Currency": entry.currency,
            "Balance": f"{entry.balance:,.2f}",
            "FX rate": f"{entry.fx_rate:.4f}",
            f"Balance ({view.base_currency})": f"{entry.balance_in_base:,.2f}",
            "Comment": entry.comment or "—",
        }
        for entry in view.entries
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)
    for warning in view.warnings:
        st.warning(warning)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Dashboard", layout="wide")
    st.title("Net Worth Dashboard")

    try:
        dashboard = _load_dashboard(schema_version=1)
    except DashboardError as exc:
        st.error(f"Unable to build the dashboard: {exc}")
        return

    st.caption(
        f"{len(dashboard.snapshots)} months, generated "
        f"{dashboard.generated_at}"
    )
    charts_enabled, message = _check_altair_dependencies()
    if not charts_enabled:
        st.warning(f"Charts disabled: {message}")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Entries"])
    if page == "Dashboard":
        _render_dashboard(dashboard, charts_enabled)
    else:
        _render_entries(dashboard)


if __name__ == "__main__":  # pragma: no cover
    main()
