# sizing/formatters.py

from __future__ import annotations

from typing import Callable, Optional

from config.settings import DEFAULT_CONFIG, FIELD_LABELS, MODE_FIELD_LABELS, CalculatorConfig
from sizing.models import CalculationMode
from sizing.validators import to_number


def _fixed(v, nd: int, missing: str) -> str:
    n = to_number(v)
    if n is None:
        return missing
    return f"{n:.{nd}f}"


def format_currency(v, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    return _fixed(v, config.precision.currency, config.missing_text)


def format_shares(v, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    return _fixed(v, config.precision.shares, config.missing_text)


def format_percentage(v, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    return _fixed(v, config.precision.percentage, config.missing_text)


def format_optional(
    v: Optional[float],
    formatter: Callable[..., str] = format_currency,
    config: CalculatorConfig = DEFAULT_CONFIG,
) -> str:
    """Absent values render as "N/A"; present ones go through formatter."""
    if v is None:
        return config.not_applicable_text
    return formatter(v, config)


def format_allotment(v, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    return _fixed(v, config.precision.allotment, config.missing_text)


def field_label(name: str, mode: Optional[CalculationMode] = None) -> str:
    """Label for an input field as the given calculator page shows it."""
    if mode is not None:
        override = MODE_FIELD_LABELS.get(mode.name, {})
        if name in override:
            return override[name]
    return FIELD_LABELS.get(name, name)
