# config/settings.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

LOG_LEVEL = os.environ.get("POSITION_CALC_LOG_LEVEL", "WARNING").upper()


@dataclass(frozen=True)
class ErrorMessages:
    invalid_number: str = "Please enter a valid number."
    invalid_percentage: str = "Please enter a valid percentage."
    percentage_range: str = "Position risk must be between 0 and 100."
    positive_number: str = "Value must be greater than 0."
    entry_stop_equal: str = "Entry price and stop loss cannot be equal."
    dollar_risk_positive: str = "Dollar risk must be greater than 0."
    fix_fields: str = "Please correct the highlighted fields."


@dataclass(frozen=True)
class DisplayPrecision:
    currency: int = 2
    shares: int = 4
    percentage: int = 2
    allotment: int = 4


# Hints shown under an input when it is rejected
FIELD_HINTS: Mapping[str, str] = MappingProxyType({
    # Total Risk / Position %
    "account_value": "Enter account value in dollars (e.g., 10000).",
    "risk_percentage": "Allowed range: 0–100.",
    "entry_price": "Positive price (e.g., 100.50).",
    "stop_loss": "Positive price (e.g., 95.00).",
    "max_positions": "Optional: integer greater than 0.",
    # Dollar Risk
    "dollar_risk": "Positive dollars (e.g., 100).",
    "account_size": "Optional: account value in dollars.",
    "ticker_symbol": "Optional reference only; affects history display.",
})


@dataclass(frozen=True)
class CalculatorConfig:
    """Everything the calculators and formatters read, passed in explicitly."""

    messages: ErrorMessages = field(default_factory=ErrorMessages)
    precision: DisplayPrecision = field(default_factory=DisplayPrecision)
    field_hints: Mapping[str, str] = field(default_factory=lambda: FIELD_HINTS)
    risk_multiples: Tuple[int, ...] = (1, 2, 3)
    history_limit: int = 50
    missing_text: str = "-"
    not_applicable_text: str = "N/A"


DEFAULT_CONFIG = CalculatorConfig()

# Quick-pick buttons for the risk percentage input
RISK_PRESETS = (0.5, 1.0, 2.0)

DEFAULT_INPUTS = {
    "account_value": 10_000.0,
    "risk_percentage": 1.0,
    "entry_price": 100.0,
    "stop_loss": 95.0,
    "max_positions": None,
    "dollar_risk": 100.0,
    "account_size": None,
    "position_percentage": 10.0,
}

# Error-list labels; risk_percentage means something different per mode
FIELD_LABELS: Mapping[str, str] = MappingProxyType({
    "account_value": "Account Value ($)",
    "risk_percentage": "Total Account Risk (%)",
    "entry_price": "Entry Price",
    "stop_loss": "Stop Loss",
    "max_positions": "Max Positions",
    "dollar_risk": "Dollar Risk ($)",
    "account_size": "Account Size ($)",
})

# keyed by CalculationMode.name
MODE_FIELD_LABELS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "POSITION_PERCENT": MappingProxyType({"risk_percentage": "Position Size (% of account)"}),
})
