# app_pages/position_percent_calculator.py

import streamlit as st

from app_pages.common import action_row, init_inputs, render_history, render_outcome, ticker_row
from config.settings import DEFAULT_CONFIG, DEFAULT_INPUTS
from sizing.calculators import compute_position_percent
from sizing.models import CalculationMode, TradeInput

P = "pp"
KEYS = [f"{P}_account", f"{P}_pct", f"{P}_entry", f"{P}_stop", f"{P}_ticker"]


def position_percent_main():
    st.title("Position % Calculator")
    st.caption("Put a fixed % of the account into the position. Risk is whatever the stop distance makes of it.")

    init_inputs({
        f"{P}_account": DEFAULT_INPUTS["account_value"],
        f"{P}_pct": DEFAULT_INPUTS["position_percentage"],
        f"{P}_entry": DEFAULT_INPUTS["entry_price"],
        f"{P}_stop": DEFAULT_INPUTS["stop_loss"],
    })
    hints = DEFAULT_CONFIG.field_hints

    ticker = ticker_row(P, f"{P}_entry")

    c1, c2 = st.columns(2)
    with c1:
        account = st.number_input("Account Value ($)", key=f"{P}_account", value=None, step=100.0,
                                  help=hints["account_value"])
    with c2:
        pct = st.number_input("Position Size (% of account)", key=f"{P}_pct", value=None, step=0.5,
                              help=hints["risk_percentage"])
        if pct is not None and 0 <= pct <= 100:
            st.progress(pct / 100)

    c3, c4 = st.columns(2)
    with c3:
        entry = st.number_input("Entry Price", key=f"{P}_entry", value=None, step=0.01, help=hints["entry_price"])
    with c4:
        stop = st.number_input("Stop Loss", key=f"{P}_stop", value=None, step=0.01, help=hints["stop_loss"])

    trigger = action_row(P, KEYS)

    inp = TradeInput(
        account_value=account,
        risk_percentage=pct,
        entry_price=entry,
        stop_loss=stop,
        ticker_symbol=ticker,
    )
    render_outcome(inp, compute_position_percent(inp, DEFAULT_CONFIG), trigger)
    render_history(CalculationMode.POSITION_PERCENT)
