# sizing/engine.py
from __future__ import annotations

from typing import Optional, Sequence

from sizing.models import PositionDirection, ProfitTargets


# -------------------------
# Direction + risk per share
# -------------------------
def classify_direction(entry: float, stop: float) -> PositionDirection:
    """
    LONG when entry is above the stop, SHORT when below.
    Exact comparison: only identical prices are INVALID.
    """
    if entry > stop:
        return PositionDirection.LONG
    if stop > entry:
        return PositionDirection.SHORT
    return PositionDirection.INVALID


def risk_per_share(entry: float, stop: float) -> float:
    return abs(entry - stop)


# -------------------------
# Share count
# -------------------------
def position_allotment(account_value: float, max_positions: int) -> float:
    """Capital available to one slot when the account is split max_positions ways."""
    if max_positions <= 0:
        raise ValueError("max_positions must be a positive integer")
    return account_value / max_positions


def max_shares(
    dollars_risked: float,
    risk_per_share: float,
    allotment: Optional[float] = None,
    entry_price: Optional[float] = None,
) -> float:
    """
    Largest (fractional) share count that keeps the loss at the stop within
    dollars_risked. With an allotment, the position value is also capped at
    allotment and the smaller of the two counts wins.
    """
    if risk_per_share <= 0:
        raise ValueError("risk_per_share must be positive (entry equals stop?)")

    by_risk = dollars_risked / risk_per_share

    if allotment is not None and entry_price is not None:
        if entry_price <= 0:
            raise ValueError("entry_price must be positive")
        shares = min(by_risk, allotment / entry_price)
    else:
        shares = by_risk

    # never exceed the risk budget
    if shares * risk_per_share > dollars_risked:
        shares = dollars_risked / risk_per_share

    return shares


# -------------------------
# R-multiple targets
# -------------------------
def profit_targets(
    direction: PositionDirection,
    entry: float,
    risk_per_share: float,
    multiples: Sequence[int] = (1, 2, 3),
) -> ProfitTargets:
    if direction is PositionDirection.LONG:
        sign = 1
    elif direction is PositionDirection.SHORT:
        sign = -1
    else:
        raise ValueError("No profit targets for an invalid direction")

    one, two, three = (entry + sign * k * risk_per_share for k in multiples)
    return ProfitTargets(one_r=one, two_r=two, three_r=three)
