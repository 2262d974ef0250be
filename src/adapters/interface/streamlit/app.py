"""Streamlit dashboard entry point."""

from collections.abc import Sequence

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.settlement_view import (
    PAYABLE,
    RECEIVABLE,
    SETTLED,
    balance_chart_data,
    balance_rows,
    transfer_rows,
)
from src.application.use_cases.get_ledger_settlement import LedgerSettlement
from src.domain.models.ledger import Ledger
from src.infrastructure.container import (
    build_ledger_repository,
    build_settlement_use_case,
)
from src.infrastructure.settings import LedgerSettings


def _fetch_ledgers() -> Sequence[Ledger]:
    """Fetch every stored ledger."""
    repository = build_ledger_repository()
    return repository.list_ledgers()


@st.cache_data(show_spinner=False, ttl=30)
def _load_ledgers() -> Sequence[Ledger]:
    """Cached wrapper around _fetch_ledgers for Streamlit sessions."""
    return _fetch_ledgers()


def _fetch_settlement(ledger_id: str) -> LedgerSettlement:
    """Compute balances and transfers for a ledger."""
    use_case = build_settlement_use_case()
    return use_case.execute(ledger_id)


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas are usable before charting.

    Returns:
        tuple[bool, str | None]: Whether charts can render, and why not.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts need numpy and pandas: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is incomplete (missing Timestamp)."
    return True, None


def _render_balance_chart(
    settlement: LedgerSettlement,
    symbol: str,
    digits: int,
) -> None:
    """Render a signed bar chart of balances."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.info(message)
        return
    data = balance_chart_data(settlement, symbol, digits)
    if not data:
        st.info("No balances to chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("amount:Q", title=f"Balance ({symbol})"),
        y=alt.Y("person:N", sort=None, title=None),
        color=alt.Color(
            "side:N",
            scale=alt.Scale(
                domain=[RECEIVABLE, PAYABLE, SETTLED],
                range=["#2e7d32", "#e76f51", "#6c8ead"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("person:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(
        height=max(120, 40 * len(data)),
    )
    st.altair_chart(chart, width="stretch")


def _render_settlement(
    settlement: LedgerSettlement,
    symbol: str,
    digits: int,
) -> None:
    """Render balances, chart and transfers for one ledger."""
    ledger = settlement.ledger
    st.caption(
        f"{len(ledger.participants)} participants, "
        f"{len(ledger.expenses)} expenses"
    )
    balances_col, chart_col = st.columns(2)
    with balances_col:
        st.subheader("Balances")
        st.dataframe(
            balance_rows(settlement, symbol, digits),
            width="stretch",
            hide_index=True,
        )
    with chart_col:
        _render_balance_chart(settlement, symbol, digits)

    st.subheader("Transfers")
    if settlement.is_settled:
        st.success("Everyone is settled up.")
        return
    st.dataframe(
        transfer_rows(settlement, symbol, digits),
        width="stretch",
        hide_index=True,
    )


def _ledger_label(ledger: Ledger) -> str:
    count = ledger.member_count
    noun = "member" if count == 1 else "members"
    return f"{ledger.title} ({count} {noun})"


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Shared Ledger", layout="wide")
    st.title("Shared Ledger")

    ledgers = _load_ledgers()
    if not ledgers:
        st.warning(
            "No ledgers found. Create one with `manage-ledger create`."
        )
        return

    settings = LedgerSettings.from_env()
    titles = {ledger.id: _ledger_label(ledger) for ledger in ledgers}
    ledger_id = st.sidebar.selectbox(
        "Ledger",
        options=list(titles),
        format_func=lambda key: titles[key],
    )
    settlement = _fetch_settlement(ledger_id)
    _render_settlement(
        settlement,
        settings.currency_symbol,
        settings.display_digits,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
