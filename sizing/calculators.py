# sizing/calculators.py
"""
The three calculator modes.

Each one validates a TradeInput field by field, refuses entry == stop, and
only then runs the engine. Bad input comes back as a ValidationFailure; the
functions never raise for it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from config.settings import DEFAULT_CONFIG, CalculatorConfig
from sizing import engine
from sizing.models import (
    CalculationMode,
    CalculationOutcome,
    CalculationResult,
    ErrorKind,
    FieldError,
    PositionDirection,
    TradeInput,
    ValidationFailure,
)
from sizing.validators import (
    is_percentage,
    is_positive_number,
    is_valid_number,
    parse_max_positions,
    to_number,
)

logger = logging.getLogger(__name__)

PRICE_FIELDS = ("entry_price", "stop_loss")


# -------------------------
# Validation helpers
# -------------------------
def _check_numbers(
    inp: TradeInput,
    fields: Iterable[str],
    config: CalculatorConfig,
    errors: Dict[str, FieldError],
) -> None:
    msgs = config.messages
    for name in fields:
        if not is_valid_number(getattr(inp, name)):
            msg = msgs.invalid_percentage if name == "risk_percentage" else msgs.invalid_number
            errors[name] = FieldError(ErrorKind.INVALID_NUMBER, msg)


def _check_positive(
    inp: TradeInput,
    fields: Iterable[str],
    config: CalculatorConfig,
    errors: Dict[str, FieldError],
) -> None:
    msgs = config.messages
    for name in fields:
        if name in errors:
            continue
        if not is_positive_number(getattr(inp, name)):
            msg = msgs.dollar_risk_positive if name == "dollar_risk" else msgs.positive_number
            errors[name] = FieldError(ErrorKind.NON_POSITIVE, msg)


def _check_percentage(
    inp: TradeInput,
    config: CalculatorConfig,
    errors: Dict[str, FieldError],
) -> None:
    if "risk_percentage" in errors:
        return
    if not is_percentage(inp.risk_percentage):
        errors["risk_percentage"] = FieldError(
            ErrorKind.PERCENTAGE_RANGE, config.messages.percentage_range
        )


def _classify(
    inp: TradeInput,
    config: CalculatorConfig,
    errors: Dict[str, FieldError],
) -> PositionDirection:
    # Equal prices are reported even when other fields are also wrong.
    if any(name in errors for name in PRICE_FIELDS):
        return PositionDirection.INVALID

    direction = engine.classify_direction(to_number(inp.entry_price), to_number(inp.stop_loss))
    if direction is PositionDirection.INVALID:
        for name in PRICE_FIELDS:
            errors[name] = FieldError(ErrorKind.ENTRY_STOP_EQUAL, config.messages.entry_stop_equal)
    return direction


def _validate(
    mode: CalculationMode,
    inp: TradeInput,
    required: Iterable[str],
    positive: Iterable[str],
    config: CalculatorConfig,
    with_percentage: bool,
):
    errors: Dict[str, FieldError] = {}
    _check_numbers(inp, required, config, errors)
    if with_percentage:
        _check_percentage(inp, config, errors)
    _check_positive(inp, positive, config, errors)
    direction = _classify(inp, config, errors)

    if errors:
        failure = ValidationFailure(mode=mode, errors=errors)
        logger.debug("%s rejected: %s", mode.value, failure.field_errors)
        return None, failure
    return direction, None


def _ticker(inp: TradeInput) -> Optional[str]:
    # shown as typed; blank means no ticker
    sym = inp.ticker_symbol
    return sym if sym and sym.strip() else None


# -------------------------
# Calculators
# -------------------------
def compute_total_risk(
    inp: TradeInput, config: CalculatorConfig = DEFAULT_CONFIG
) -> CalculationOutcome:
    """
    Risk a percentage of the account. With max_positions, each trade is also
    capped at account_value / max_positions of capital.
    """
    mode = CalculationMode.TOTAL_RISK
    direction, failure = _validate(
        mode,
        inp,
        required=("account_value", "risk_percentage", "entry_price", "stop_loss"),
        positive=("account_value", "entry_price", "stop_loss"),
        config=config,
        with_percentage=True,
    )
    if failure is not None:
        return failure

    account_value = to_number(inp.account_value)
    entry = to_number(inp.entry_price)
    stop = to_number(inp.stop_loss)

    rps = engine.risk_per_share(entry, stop)
    dollars_risked = account_value * to_number(inp.risk_percentage) / 100

    positions = parse_max_positions(inp.max_positions)
    allotment = None
    if positions is not None:
        allotment = engine.position_allotment(account_value, positions)
        shares = engine.max_shares(dollars_risked, rps, allotment, entry)
    else:
        shares = engine.max_shares(dollars_risked, rps)

    result = CalculationResult(
        mode=mode,
        direction=direction,
        max_shares=shares,
        position_size=shares * entry,
        risk_per_share=rps,
        dollars_risked=dollars_risked,
        percent_risked=rps / entry * 100,
        max_positions=positions,
        position_allotment=allotment,
        targets=engine.profit_targets(direction, entry, rps, config.risk_multiples),
        ticker_symbol=_ticker(inp),
    )
    logger.debug("%s: %s", mode.value, result)
    return result


def compute_dollar_risk(
    inp: TradeInput, config: CalculatorConfig = DEFAULT_CONFIG
) -> CalculationOutcome:
    """Risk a fixed dollar amount. account_size is optional and display-only."""
    mode = CalculationMode.DOLLAR_RISK
    direction, failure = _validate(
        mode,
        inp,
        required=("dollar_risk", "entry_price", "stop_loss"),
        positive=("dollar_risk", "entry_price", "stop_loss"),
        config=config,
        with_percentage=False,
    )
    if failure is not None:
        return failure

    dollar_risk = to_number(inp.dollar_risk)
    entry = to_number(inp.entry_price)
    stop = to_number(inp.stop_loss)

    rps = engine.risk_per_share(entry, stop)
    shares = engine.max_shares(dollar_risk, rps)
    position_size = shares * entry

    pct_of_account = None
    if is_positive_number(inp.account_size):
        pct_of_account = position_size / to_number(inp.account_size) * 100

    result = CalculationResult(
        mode=mode,
        direction=direction,
        max_shares=shares,
        position_size=position_size,
        risk_per_share=rps,
        dollars_risked=dollar_risk,
        position_percent_account=pct_of_account,
        ticker_symbol=_ticker(inp),
    )
    logger.debug("%s: %s", mode.value, result)
    return result


def compute_position_percent(
    inp: TradeInput, config: CalculatorConfig = DEFAULT_CONFIG
) -> CalculationOutcome:
    """
    The percentage sizes the position, not the risk. Dollars risked is
    whatever the stop distance makes of that fixed allocation.
    """
    mode = CalculationMode.POSITION_PERCENT
    direction, failure = _validate(
        mode,
        inp,
        required=("account_value", "risk_percentage", "entry_price", "stop_loss"),
        positive=("account_value", "entry_price", "stop_loss"),
        config=config,
        with_percentage=True,
    )
    if failure is not None:
        return failure

    account_value = to_number(inp.account_value)
    entry = to_number(inp.entry_price)
    stop = to_number(inp.stop_loss)

    rps = engine.risk_per_share(entry, stop)
    allocation = account_value * to_number(inp.risk_percentage) / 100
    shares = allocation / entry
    dollars_risked = shares * rps

    result = CalculationResult(
        mode=mode,
        direction=direction,
        max_shares=shares,
        position_size=shares * entry,
        risk_per_share=rps,
        dollars_risked=dollars_risked,
        percent_risked=dollars_risked / account_value * 100,
        position_allocation=allocation,
        ticker_symbol=_ticker(inp),
    )
    logger.debug("%s: %s", mode.value, result)
    return result


CALCULATORS = {
    CalculationMode.TOTAL_RISK: compute_total_risk,
    CalculationMode.DOLLAR_RISK: compute_dollar_risk,
    CalculationMode.POSITION_PERCENT: compute_position_percent,
}


def compute(
    mode: CalculationMode, inp: TradeInput, config: CalculatorConfig = DEFAULT_CONFIG
) -> CalculationOutcome:
    return CALCULATORS[mode](inp, config)
