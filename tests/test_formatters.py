"""Tests for display formatters."""

import math

from config.settings import CalculatorConfig, DisplayPrecision
from sizing.formatters import (
    field_label,
    format_allotment,
    format_currency,
    format_optional,
    format_percentage,
    format_shares,
)
from sizing.models import CalculationMode


def test_currency_two_decimals():
    assert format_currency(1000) == "1000.00"
    assert format_currency(110.456) == "110.46"


def test_shares_four_decimals():
    assert format_shares(10) == "10.0000"
    assert format_shares(1 / 3) == "0.3333"


def test_percentage_two_decimals():
    assert format_percentage(1) == "1.00"
    assert format_percentage("12.346") == "12.35"


def test_invalid_values_use_sentinel():
    for fmt in (format_currency, format_shares, format_percentage):
        assert fmt(None) == "-"
        assert fmt("") == "-"
        assert fmt(math.nan) == "-"
        assert fmt(math.inf) == "-"
        assert fmt("abc") == "-"


def test_optional_absent_is_na():
    assert format_optional(None) == "N/A"
    assert format_optional(2000) == "2000.00"
    assert format_optional(1.5, format_percentage) == "1.50"


def test_precision_from_config():
    config = CalculatorConfig(precision=DisplayPrecision(currency=0, shares=2, percentage=1), missing_text="—")
    assert format_currency(1234.56, config) == "1235"
    assert format_shares(1 / 3, config) == "0.33"
    assert format_percentage(12.345, config) == "12.3"
    assert format_currency(None, config) == "—"


def test_allotment_four_decimals():
    assert format_allotment(2000) == "2000.0000"
    assert format_allotment(10_000 / 3) == "3333.3333"
    assert format_optional(None, format_allotment) == "N/A"


def test_risk_percentage_label_depends_on_mode():
    assert field_label("risk_percentage", CalculationMode.TOTAL_RISK) == "Total Account Risk (%)"
    assert field_label("risk_percentage", CalculationMode.POSITION_PERCENT) == "Position Size (% of account)"
    assert field_label("entry_price", CalculationMode.POSITION_PERCENT) == "Entry Price"
    assert field_label("unknown_field") == "unknown_field"
