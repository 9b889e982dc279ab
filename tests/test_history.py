"""Tests for the in-session calculation history."""

from datetime import datetime

import pandas as pd
import pytest

from config.settings import CalculatorConfig
from sizing.calculators import compute_dollar_risk, compute_position_percent, compute_total_risk
from sizing.history import HISTORY_COLUMNS, CalculationHistory, entry_text
from sizing.models import CalculationMode, TradeInput


@pytest.fixture
def history():
    return CalculationHistory()


def _add(history, calc, inp, ts=None):
    return history.add(inp, calc(inp), timestamp=ts)


class TestCalculationHistory:

    def test_newest_first(self, history, total_risk_input, dollar_risk_input):
        _add(history, compute_total_risk, total_risk_input, datetime(2024, 1, 1, 9, 30))
        _add(history, compute_dollar_risk, dollar_risk_input, datetime(2024, 1, 1, 9, 31))
        modes = [e.result.mode for e in history]
        assert modes == [CalculationMode.DOLLAR_RISK, CalculationMode.TOTAL_RISK]

    def test_limit_drops_oldest(self, total_risk_input):
        history = CalculationHistory(CalculatorConfig(history_limit=2))
        for i in range(3):
            _add(history, compute_total_risk, total_risk_input, datetime(2024, 1, 1, 10, i))
        assert len(history) == 2
        assert [e.timestamp.minute for e in history] == [2, 1]

    def test_for_mode_and_clear(self, history, total_risk_input, position_percent_input):
        _add(history, compute_total_risk, total_risk_input)
        _add(history, compute_position_percent, position_percent_input)
        assert len(history.for_mode(CalculationMode.POSITION_PERCENT)) == 1
        history.clear()
        assert len(history) == 0

    def test_clear_one_mode_keeps_others(self, history, total_risk_input, dollar_risk_input):
        _add(history, compute_total_risk, total_risk_input)
        _add(history, compute_dollar_risk, dollar_risk_input)
        history.clear(CalculationMode.DOLLAR_RISK)
        assert history.for_mode(CalculationMode.DOLLAR_RISK) == []
        assert len(history.for_mode(CalculationMode.TOTAL_RISK)) == 1

    def test_limit_is_per_mode(self, total_risk_input, dollar_risk_input):
        history = CalculationHistory(CalculatorConfig(history_limit=2))
        _add(history, compute_dollar_risk, dollar_risk_input, datetime(2024, 1, 1, 9, 0))
        for i in range(3):
            _add(history, compute_total_risk, total_risk_input, datetime(2024, 1, 1, 10, i))
        assert len(history.for_mode(CalculationMode.DOLLAR_RISK)) == 1
        assert [e.timestamp.minute for e in history.for_mode(CalculationMode.TOTAL_RISK)] == [2, 1]

    def test_ticker_defaults_to_na(self, history, total_risk_input):
        entry = _add(history, compute_total_risk, total_risk_input)
        assert entry.ticker_symbol == "N/A"


class TestHistoryFrame:

    def test_empty_frame_has_columns(self, history):
        df = history.to_frame()
        assert df.empty
        assert list(df.columns) == HISTORY_COLUMNS

    def test_rows(self, history, total_risk_input, dollar_risk_input):
        _add(history, compute_total_risk, total_risk_input)
        _add(history, compute_dollar_risk, dollar_risk_input)

        df = history.to_frame()
        assert len(df) == 2

        dollar_row = df.iloc[0]
        assert dollar_row["Mode"] == "Dollar Risk"
        assert dollar_row["Max Shares"] == pytest.approx(20)
        assert pd.isna(dollar_row["1R"])

        total_row = df.iloc[1]
        assert total_row["Position"] == "Long Position"
        assert total_row["3R"] == pytest.approx(130)

    def test_frame_filtered_by_mode(self, history, total_risk_input, dollar_risk_input):
        _add(history, compute_total_risk, total_risk_input)
        _add(history, compute_dollar_risk, dollar_risk_input)
        df = history.to_frame(CalculationMode.TOTAL_RISK)
        assert df["Mode"].tolist() == ["Total Risk %"]

    def test_csv(self, history, total_risk_input):
        _add(history, compute_total_risk, total_risk_input)
        csv = history.to_csv()
        assert csv.splitlines()[0].split(",") == HISTORY_COLUMNS
        assert len(csv.splitlines()) == 2


class TestEntryText:

    def test_total_risk_text(self, history):
        inp = TradeInput(
            account_value=10_000, risk_percentage=1, entry_price=100, stop_loss=90,
            max_positions=5, ticker_symbol="msft",
        )
        text = entry_text(_add(history, compute_total_risk, inp, datetime(2024, 3, 4, 15, 0, 5)))
        assert "Ticker Symbol: msft" in text
        assert "Max Positions Allowed: 5" in text
        assert "Max Shares: 10.0000" in text
        assert "1R: $110.00" in text
        assert "Position Allotment: $2000.0000" in text
        assert text.endswith("Timestamp: 2024-03-04 15:00:05")

    def test_dollar_risk_text_without_account(self, history, dollar_risk_input):
        text = entry_text(_add(history, compute_dollar_risk, dollar_risk_input))
        assert "Account Size: N/A" in text
        assert "Position Size as % of Account: N/A" in text
        assert "1R:" not in text

    def test_position_percent_text(self, history, position_percent_input):
        text = entry_text(_add(history, compute_position_percent, position_percent_input))
        assert "Position Risk %: 10%" in text
        assert "Trade Risk: 1.00%" in text
