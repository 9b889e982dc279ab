# sizing/history.py
"""
Running log of calculations for one browser session.

Newest entries come first. Nothing is written to disk; the Streamlit pages
keep one CalculationHistory per session in st.session_state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, List, Optional

import pandas as pd

from config.settings import DEFAULT_CONFIG, CalculatorConfig
from sizing.formatters import (
    format_allotment,
    format_currency,
    format_optional,
    format_percentage,
    format_shares,
)
from sizing.models import CalculationMode, CalculationResult, TradeInput
from sizing.validators import is_positive_number, to_number

HISTORY_COLUMNS = [
    "Timestamp",
    "Mode",
    "Ticker",
    "Position",
    "Entry",
    "Stop",
    "Max Shares",
    "Position Size",
    "Risk/Share",
    "Dollars Risked",
    "Trade Risk %",
    "1R",
    "2R",
    "3R",
]


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: datetime
    inputs: TradeInput
    result: CalculationResult

    @property
    def ticker_symbol(self) -> str:
        return self.result.ticker_symbol or "N/A"


def _input_lines(entry: HistoryEntry, config: CalculatorConfig) -> List[str]:
    inp, res = entry.inputs, entry.result
    na = config.not_applicable_text
    lines = [f"Ticker Symbol: {entry.ticker_symbol}"]

    if res.mode is CalculationMode.DOLLAR_RISK:
        lines.append(f"Dollar Risk: ${format_currency(inp.dollar_risk, config)}")
    else:
        lines.append(f"Account Value: ${format_currency(inp.account_value, config)}")
        label = "Total Account Risk" if res.mode is CalculationMode.TOTAL_RISK else "Position Risk %"
        lines.append(f"{label}: {inp.risk_percentage}%")

    lines.append(f"Entry Price: ${format_currency(inp.entry_price, config)}")
    lines.append(f"Stop Loss: ${format_currency(inp.stop_loss, config)}")

    if res.mode is CalculationMode.DOLLAR_RISK:
        size = to_number(inp.account_size) if is_positive_number(inp.account_size) else None
        shown = na if size is None else f"${format_currency(size, config)}"
        lines.append(f"Account Size: {shown}")

    lines.append(f"Position Type: {res.direction.label}")
    if res.mode is CalculationMode.TOTAL_RISK:
        lines.append(f"Max Positions Allowed: {res.max_positions or na}")
    return lines


def _result_lines(res: CalculationResult, config: CalculatorConfig) -> List[str]:
    lines = [
        f"Max Shares: {format_shares(res.max_shares, config)}",
        f"Position Size: ${format_currency(res.position_size, config)}",
        f"Risk per Share: ${format_currency(res.risk_per_share, config)}",
    ]
    if res.percent_risked is not None:
        lines.append(f"Trade Risk: {format_percentage(res.percent_risked, config)}%")
    lines.append(f"Dollars Risked: ${format_currency(res.dollars_risked, config)}")

    if res.targets is not None:
        lines.append(f"1R: ${format_currency(res.targets.one_r, config)}")
        lines.append(f"2R: ${format_currency(res.targets.two_r, config)}")
        lines.append(f"3R: ${format_currency(res.targets.three_r, config)}")

    if res.mode is CalculationMode.TOTAL_RISK:
        allotment = format_optional(res.position_allotment, format_allotment, config)
        if res.position_allotment is not None:
            allotment = f"${allotment}"
        lines.append(f"Position Allotment: {allotment}")
    elif res.mode is CalculationMode.DOLLAR_RISK:
        pct = format_optional(res.position_percent_account, format_percentage, config)
        if res.position_percent_account is not None:
            pct = f"{pct}%"
        lines.append(f"Position Size as % of Account: {pct}")
    return lines


def entry_text(entry: HistoryEntry, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    """Plain-text block for one entry (what the copy button puts on the clipboard)."""
    lines = _input_lines(entry, config)
    lines.append("")
    lines.append("Result:")
    lines.extend(_result_lines(entry.result, config))
    lines.append(f"Timestamp: {entry.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
    return "\n".join(lines)


class CalculationHistory:
    """Newest-first list of HistoryEntry, bounded and cleared per calculator mode."""

    def __init__(self, config: CalculatorConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def add(
        self,
        inputs: TradeInput,
        result: CalculationResult,
        timestamp: Optional[datetime] = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(timestamp=timestamp or datetime.now(), inputs=inputs, result=result)
        self._entries.insert(0, entry)

        # drop this mode's oldest entries past the limit; other modes are untouched
        same_mode = [e for e in self._entries if e.result.mode is result.mode]
        stale = {id(e) for e in same_mode[self.config.history_limit:]}
        if stale:
            self._entries = [e for e in self._entries if id(e) not in stale]
        return entry

    def clear(self, mode: Optional[CalculationMode] = None) -> None:
        if mode is None:
            self._entries.clear()
        else:
            self._entries = [e for e in self._entries if e.result.mode is not mode]

    def for_mode(self, mode: CalculationMode) -> List[HistoryEntry]:
        return [e for e in self._entries if e.result.mode is mode]

    def to_frame(self, mode: Optional[CalculationMode] = None) -> pd.DataFrame:
        entries = self.for_mode(mode) if mode is not None else list(self._entries)

        rows: List[Dict] = []
        for e in entries:
            res = e.result
            t = res.targets
            rows.append({
                "Timestamp": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                "Mode": res.mode.value,
                "Ticker": e.ticker_symbol,
                "Position": res.direction.label,
                "Entry": e.inputs.entry_price,
                "Stop": e.inputs.stop_loss,
                "Max Shares": round(res.max_shares, self.config.precision.shares),
                "Position Size": round(res.position_size, self.config.precision.currency),
                "Risk/Share": round(res.risk_per_share, self.config.precision.currency),
                "Dollars Risked": round(res.dollars_risked, self.config.precision.currency),
                "Trade Risk %": None if res.percent_risked is None
                else round(res.percent_risked, self.config.precision.percentage),
                "1R": None if t is None else round(t.one_r, self.config.precision.currency),
                "2R": None if t is None else round(t.two_r, self.config.precision.currency),
                "3R": None if t is None else round(t.three_r, self.config.precision.currency),
            })

        return pd.DataFrame(rows, columns=HISTORY_COLUMNS)

    def to_csv(self, mode: Optional[CalculationMode] = None) -> str:
        return self.to_frame(mode).to_csv(index=False)
