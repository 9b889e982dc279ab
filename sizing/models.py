# sizing/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Mapping, Optional, Union


class PositionDirection(Enum):
    LONG = "Long Position"
    SHORT = "Short Position"
    INVALID = "Invalid"

    @property
    def label(self) -> str:
        return self.value


class CalculationMode(Enum):
    TOTAL_RISK = "Total Risk %"
    DOLLAR_RISK = "Dollar Risk"
    POSITION_PERCENT = "Position %"


class Trigger(Enum):
    """What started a calculation. Only MANUAL runs record history and notify."""

    AUTO = "auto"
    MANUAL = "manual"


class ErrorKind(Enum):
    INVALID_NUMBER = "invalid_number"
    PERCENTAGE_RANGE = "percentage_range"
    NON_POSITIVE = "non_positive"
    ENTRY_STOP_EQUAL = "entry_stop_equal"


@dataclass(frozen=True)
class TradeInput:
    """
    Already-parsed calculator inputs. Absent optional fields are None.
    Which fields are required depends on the calculator mode.
    """

    account_value: Optional[float] = None
    risk_percentage: Optional[float] = None
    entry_price: Optional[float] = None
    stop_loss: Optional[float] = None
    ticker_symbol: Optional[str] = None
    max_positions: Optional[float] = None
    dollar_risk: Optional[float] = None
    account_size: Optional[float] = None


@dataclass(frozen=True)
class ProfitTargets:
    one_r: float
    two_r: float
    three_r: float


@dataclass(frozen=True)
class CalculationResult:
    mode: CalculationMode
    direction: PositionDirection
    max_shares: float
    position_size: float
    risk_per_share: float
    dollars_risked: float
    percent_risked: Optional[float] = None
    max_positions: Optional[int] = None
    position_allotment: Optional[float] = None
    position_allocation: Optional[float] = None
    position_percent_account: Optional[float] = None
    targets: Optional[ProfitTargets] = None
    ticker_symbol: Optional[str] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FieldError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    mode: CalculationMode
    errors: Mapping[str, FieldError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False

    @property
    def field_errors(self) -> Dict[str, str]:
        return {name: err.message for name, err in self.errors.items()}

    @property
    def kinds(self) -> FrozenSet[ErrorKind]:
        return frozenset(err.kind for err in self.errors.values())

    def has(self, kind: ErrorKind) -> bool:
        return kind in self.kinds


CalculationOutcome = Union[CalculationResult, ValidationFailure]
