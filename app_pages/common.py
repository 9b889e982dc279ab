# app_pages/common.py

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

import streamlit as st

from config.settings import DEFAULT_CONFIG, CalculatorConfig
from data.fetch import last_close
from sizing.formatters import (
    field_label,
    format_allotment,
    format_currency,
    format_optional,
    format_percentage,
    format_shares,
)
from sizing.history import CalculationHistory, entry_text
from sizing.models import (
    CalculationMode,
    CalculationOutcome,
    CalculationResult,
    PositionDirection,
    TradeInput,
    Trigger,
    ValidationFailure,
)

HISTORY_KEY = "calc_history"



def get_history(config: CalculatorConfig = DEFAULT_CONFIG) -> CalculationHistory:
    if HISTORY_KEY not in st.session_state:
        st.session_state[HISTORY_KEY] = CalculationHistory(config)
    return st.session_state[HISTORY_KEY]


# -------------------------
# Inputs
# -------------------------
def ticker_row(prefix: str, entry_key: str) -> str:
    """Ticker input plus a button that copies the last close into the entry price."""

    def _use_last_close():
        sym = st.session_state.get(f"{prefix}_ticker", "")
        px = last_close(sym)
        if px is None:
            st.session_state[f"{prefix}_quote_msg"] = f"No quote found for {sym.strip().upper() or '—'}."
        else:
            st.session_state[entry_key] = round(px, 2)
            st.session_state[f"{prefix}_quote_msg"] = None

    c1, c2 = st.columns([3, 1])
    with c1:
        ticker = st.text_input(
            "Ticker Symbol (optional)",
            key=f"{prefix}_ticker",
            help=DEFAULT_CONFIG.field_hints["ticker_symbol"],
        )
    with c2:
        st.write("")
        st.button("Use last close", key=f"{prefix}_quote", on_click=_use_last_close)

    msg = st.session_state.get(f"{prefix}_quote_msg")
    if msg:
        st.caption(msg)
    return ticker


def init_inputs(defaults: Dict[str, object]) -> None:
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def action_row(prefix: str, clear_keys: Iterable[str]) -> Trigger:
    def _clear():
        for k in clear_keys:
            st.session_state[k] = "" if k.endswith("_ticker") else None
        st.session_state[f"{prefix}_quote_msg"] = None

    c1, c2, _ = st.columns([1, 1, 6])
    with c1:
        pressed = st.button("Calculate", key=f"{prefix}_calc", type="primary")
    with c2:
        st.button("Clear", key=f"{prefix}_clear", on_click=_clear)
    return Trigger.MANUAL if pressed else Trigger.AUTO


# -------------------------
# Results
# -------------------------
def _direction_badge(direction: PositionDirection) -> None:
    if direction is PositionDirection.LONG:
        st.success(f"🔵 {direction.label}")
    elif direction is PositionDirection.SHORT:
        st.warning(f"🟠 {direction.label}")


def render_failure(failure: ValidationFailure, trigger: Trigger, config: CalculatorConfig = DEFAULT_CONFIG) -> None:
    lines: List[str] = []
    for name, msg in failure.field_errors.items():
        hint = config.field_hints.get(name, "")
        label = field_label(name, failure.mode)
        lines.append(f"- **{label}**: {msg} {hint}".rstrip())
    st.error("\n".join(lines))

    if trigger is Trigger.MANUAL:
        st.toast(config.messages.fix_fields)


def render_metrics(rows: List[Tuple[str, str]]) -> None:
    for start in range(0, len(rows), 4):
        chunk = rows[start:start + 4]
        cols = st.columns(4)
        for col, (label, value) in zip(cols, chunk):
            with col:
                st.metric(label, value)


def result_metrics(res: CalculationResult, config: CalculatorConfig = DEFAULT_CONFIG) -> List[Tuple[str, str]]:
    rows = [
        ("Max Shares", format_shares(res.max_shares, config)),
        ("Position Size ($)", format_currency(res.position_size, config)),
        ("Risk per Share ($)", format_currency(res.risk_per_share, config)),
        ("Dollars Risked ($)", format_currency(res.dollars_risked, config)),
    ]
    if res.percent_risked is not None:
        rows.append(("Trade Risk (%)", format_percentage(res.percent_risked, config)))

    if res.mode is CalculationMode.TOTAL_RISK:
        rows.append(("Max Positions", str(res.max_positions) if res.max_positions else config.not_applicable_text))
        rows.append(("Position Allotment ($)", format_optional(res.position_allotment, format_allotment, config)))
    elif res.mode is CalculationMode.DOLLAR_RISK:
        rows.append(("Position % of Account", format_optional(res.position_percent_account, format_percentage, config)))
    elif res.mode is CalculationMode.POSITION_PERCENT:
        rows.append(("Position Allocation ($)", format_optional(res.position_allocation, format_currency, config)))

    if res.targets is not None:
        rows.append(("1R Target", format_currency(res.targets.one_r, config)))
        rows.append(("2R Target", format_currency(res.targets.two_r, config)))
        rows.append(("3R Target", format_currency(res.targets.three_r, config)))
    return rows


def render_outcome(
    inp: TradeInput,
    outcome: CalculationOutcome,
    trigger: Trigger,
    config: CalculatorConfig = DEFAULT_CONFIG,
) -> None:
    """Show one outcome. Only manual runs go into the session history."""
    st.subheader("Result")

    if not outcome.ok:
        render_failure(outcome, trigger, config)
        return

    _direction_badge(outcome.direction)
    render_metrics(result_metrics(outcome, config))

    if trigger is Trigger.MANUAL:
        get_history(config).add(inp, outcome)
        st.toast("Calculation complete.")


def render_history(mode: CalculationMode, config: CalculatorConfig = DEFAULT_CONFIG) -> None:
    history = get_history(config)
    entries = history.for_mode(mode)

    st.divider()
    top = st.columns([6, 1, 1])
    with top[0]:
        st.subheader("Recent Results")
    with top[1]:
        st.download_button(
            "CSV",
            data=history.to_csv(mode),
            file_name=f"{mode.name.lower()}_history.csv",
            mime="text/csv",
            disabled=not entries,
            key=f"{mode.name}_csv",
        )
    with top[2]:
        if st.button("Clear", key=f"{mode.name}_history_clear", disabled=not entries):
            history.clear(mode)
            st.rerun()

    if not entries:
        st.caption("Press **Calculate** to add a result here.")
        return

    st.dataframe(history.to_frame(mode), use_container_width=True, hide_index=True)

    for e in entries:
        with st.expander(f"{e.ticker_symbol} — {e.timestamp.strftime('%H:%M:%S')}"):
            st.code(entry_text(e, config), language=None)
