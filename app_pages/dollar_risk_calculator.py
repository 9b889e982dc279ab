# app_pages/dollar_risk_calculator.py

import streamlit as st

from app_pages.common import action_row, init_inputs, render_history, render_outcome, ticker_row
from config.settings import DEFAULT_CONFIG, DEFAULT_INPUTS
from sizing.calculators import compute_dollar_risk
from sizing.models import CalculationMode, TradeInput

P = "dr"
KEYS = [f"{P}_dollar", f"{P}_entry", f"{P}_stop", f"{P}_account", f"{P}_ticker"]


def dollar_risk_main():
    st.title("Dollar Risk Calculator")
    st.caption("Risk a fixed dollar amount per trade.")

    init_inputs({
        f"{P}_dollar": DEFAULT_INPUTS["dollar_risk"],
        f"{P}_entry": DEFAULT_INPUTS["entry_price"],
        f"{P}_stop": DEFAULT_INPUTS["stop_loss"],
        f"{P}_account": DEFAULT_INPUTS["account_size"],
    })
    hints = DEFAULT_CONFIG.field_hints

    ticker = ticker_row(P, f"{P}_entry")

    c1, c2 = st.columns(2)
    with c1:
        dollar_risk = st.number_input("Dollar Risk ($)", key=f"{P}_dollar", value=None, step=10.0,
                                      help=hints["dollar_risk"])
    with c2:
        account_size = st.number_input("Account Size ($, optional)", key=f"{P}_account", value=None,
                                       step=100.0, help=hints["account_size"])

    c3, c4 = st.columns(2)
    with c3:
        entry = st.number_input("Entry Price", key=f"{P}_entry", value=None, step=0.01, help=hints["entry_price"])
    with c4:
        stop = st.number_input("Stop Loss", key=f"{P}_stop", value=None, step=0.01, help=hints["stop_loss"])

    trigger = action_row(P, KEYS)

    inp = TradeInput(
        dollar_risk=dollar_risk,
        entry_price=entry,
        stop_loss=stop,
        account_size=account_size,
        ticker_symbol=ticker,
    )
    render_outcome(inp, compute_dollar_risk(inp, DEFAULT_CONFIG), trigger)
    render_history(CalculationMode.DOLLAR_RISK)
