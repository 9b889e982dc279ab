# app_pages/total_risk_calculator.py

import streamlit as st

from app_pages.common import action_row, init_inputs, render_history, render_outcome, ticker_row
from config.settings import DEFAULT_CONFIG, DEFAULT_INPUTS, RISK_PRESETS
from sizing.calculators import compute_total_risk
from sizing.models import CalculationMode, TradeInput

P = "tr"
KEYS = [f"{P}_account", f"{P}_risk", f"{P}_entry", f"{P}_stop", f"{P}_maxpos", f"{P}_ticker"]


def _set_risk(value: float):
    st.session_state[f"{P}_risk"] = value


def total_risk_main():
    st.title("Total Risk % Calculator")
    st.caption("Risk a fixed % of the account per trade. Optional max positions caps the capital per trade.")

    init_inputs({
        f"{P}_account": DEFAULT_INPUTS["account_value"],
        f"{P}_risk": DEFAULT_INPUTS["risk_percentage"],
        f"{P}_entry": DEFAULT_INPUTS["entry_price"],
        f"{P}_stop": DEFAULT_INPUTS["stop_loss"],
        f"{P}_maxpos": DEFAULT_INPUTS["max_positions"],
    })
    hints = DEFAULT_CONFIG.field_hints

    ticker = ticker_row(P, f"{P}_entry")

    c1, c2 = st.columns(2)
    with c1:
        account = st.number_input("Account Value ($)", key=f"{P}_account", value=None, step=100.0,
                                  help=hints["account_value"])
    with c2:
        risk = st.number_input("Total Account Risk (%)", key=f"{P}_risk", value=None, step=0.25,
                               help=hints["risk_percentage"])
        presets = st.columns(len(RISK_PRESETS))
        for col, pct in zip(presets, RISK_PRESETS):
            with col:
                st.button(f"{pct:g}%", key=f"{P}_preset_{pct}", on_click=_set_risk, args=(pct,))

    c3, c4, c5 = st.columns(3)
    with c3:
        entry = st.number_input("Entry Price", key=f"{P}_entry", value=None, step=0.01, help=hints["entry_price"])
    with c4:
        stop = st.number_input("Stop Loss", key=f"{P}_stop", value=None, step=0.01, help=hints["stop_loss"])
    with c5:
        max_positions = st.number_input("Max Positions (optional)", key=f"{P}_maxpos", value=None,
                                        min_value=0, step=1, help=hints["max_positions"])

    trigger = action_row(P, KEYS)

    inp = TradeInput(
        account_value=account,
        risk_percentage=risk,
        entry_price=entry,
        stop_loss=stop,
        max_positions=max_positions,
        ticker_symbol=ticker,
    )
    render_outcome(inp, compute_total_risk(inp, DEFAULT_CONFIG), trigger)
    render_history(CalculationMode.TOTAL_RISK)
