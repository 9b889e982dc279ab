"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sizing.models import TradeInput  # noqa: E402


@pytest.fixture
def total_risk_input():
    """10k account, 1% risk, long 100 -> 90."""
    return TradeInput(account_value=10_000, risk_percentage=1, entry_price=100, stop_loss=90)


@pytest.fixture
def dollar_risk_input():
    return TradeInput(dollar_risk=100, entry_price=50, stop_loss=45)


@pytest.fixture
def position_percent_input():
    return TradeInput(account_value=10_000, risk_percentage=10, entry_price=50, stop_loss=45)
