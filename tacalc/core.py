"""Core value types shared by methods and indicators."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class TaError(Exception):
    """Base class for every error raised by this package."""


class WrongConfigError(TaError):
    """An indicator configuration failed validation."""

    def __init__(self, message: str = "wrong indicator configuration") -> None:
        super().__init__(message)


class WrongMethodParametersError(TaError):
    """A method was created with parameters it cannot work with."""

    def __init__(self, message: str = "wrong method parameters") -> None:
        super().__init__(message)


class ParameterParseError(TaError):
    """A configuration parameter could not be set from its text form."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"unable to parse value {value!r} for parameter {name!r}")
        self.name = name
        self.value = value


class Source(Enum):
    """Which value of a candle an indicator reads."""

    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    VOLUME = "volume"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"
    VOLUMED_PRICE = "volumed_price"


_SOURCE_ALIASES = {
    "hlc3": Source.TP,
    "volumedprice": Source.VOLUMED_PRICE,
}


def parse_source(value: str | Source) -> Source:
    """Return the `Source` named by `value`; raise ValueError for unknown names."""
    if isinstance(value, Source):
        return value
    key = str(value).strip().lower().replace("-", "_")
    if key in _SOURCE_ALIASES:
        return _SOURCE_ALIASES[key]
    try:
        return Source(key)
    except ValueError:
        raise ValueError(f"unknown source type {value!r}") from None


def _clamp(strength: float) -> float:
    return max(-1.0, min(1.0, strength))


@dataclass(frozen=True)
class Action:
    """A trading signal: positive buys, negative sells, zero means no signal.

    `strength` lies in [-1.0; 1.0]; `Action(1)` is a full buy signal.
    """

    strength: float = 0.0

    def __post_init__(self) -> None:
        strength = float(self.strength)
        if math.isnan(strength) or not -1.0 <= strength <= 1.0:
            raise ValueError(f"action strength must be in [-1.0; 1.0], got {self.strength!r}")
        object.__setattr__(self, "strength", strength)

    def analog(self) -> int:
        """Return the sign of the signal: 1, 0 or -1."""
        return (self.strength > 0) - (self.strength < 0)

    def is_some(self) -> bool:
        """Return True when there is any signal at all."""
        return self.strength != 0

    def __int__(self) -> int:
        return self.analog()

    def __neg__(self) -> Action:
        return Action(-self.strength)

    def __add__(self, other: Action) -> Action:
        if not isinstance(other, Action):
            return NotImplemented
        return Action(_clamp(self.strength + other.strength))

    def __sub__(self, other: Action) -> Action:
        if not isinstance(other, Action):
            return NotImplemented
        return Action(_clamp(self.strength - other.strength))


Action.NONE = Action(0.0)  # type: ignore[attr-defined]
Action.BUY_ALL = Action(1.0)  # type: ignore[attr-defined]
Action.SELL_ALL = Action(-1.0)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Candle:
    """One OHLCV bar."""

    open: float
    high: float
    low: float
    close: float
    volume: float

    def tp(self) -> float:
        """Typical price: (high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3.0

    def hl2(self) -> float:
        """Middle of the bar: (high + low) / 2."""
        return (self.high + self.low) * 0.5

    def ohlc4(self) -> float:
        """Mean of open, high, low and close."""
        return (self.open + self.high + self.low + self.close) * 0.25

    def clv(self) -> float:
        """Close location value in [-1.0; 1.0]; 0.0 for a bar with no range."""
        if self.high == self.low:
            return 0.0
        return ((self.close - self.low) - (self.high - self.close)) / (self.high - self.low)

    def tr_close(self, prev_close: float) -> float:
        """True range against the previous close."""
        return max(self.high, prev_close) - min(self.low, prev_close)

    def source(self, source: Source | str) -> float:
        """Return the value of this candle selected by `source`."""
        match parse_source(source):
            case Source.CLOSE:
                return self.close
            case Source.OPEN:
                return self.open
            case Source.HIGH:
                return self.high
            case Source.LOW:
                return self.low
            case Source.VOLUME:
                return self.volume
            case Source.HL2:
                return self.hl2()
            case Source.TP:
                return self.tp()
            case Source.OHLC4:
                return self.ohlc4()
            case Source.VOLUMED_PRICE:
                return self.tp() * self.volume
        raise ValueError(f"unsupported source {source!r}")

    def __add__(self, other: Candle) -> Candle:
        """Merge this bar with the following one into a single bar."""
        if not isinstance(other, Candle):
            return NotImplemented
        return Candle(
            open=self.open,
            high=max(self.high, other.high),
            low=min(self.low, other.low),
            close=other.close,
            volume=self.volume + other.volume,
        )


class Window(Generic[T]):
    """Fixed-size sliding window, prefilled with one value.

    Iterates from the oldest value to the newest.
    """

    __slots__ = ("_items",)

    def __init__(self, size: int, value: T) -> None:
        if size < 0:
            raise ValueError("window size must not be negative")
        self._items: deque[T] = deque([value] * size, maxlen=size)

    def push(self, value: T) -> T:
        """Add `value` and return the value that dropped out of the window.

        An empty window passes `value` straight through.
        """
        if not self._items:
            return value
        oldest = self._items[0]
        self._items.append(value)
        return oldest

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Window({list(self._items)!r})"


@dataclass(frozen=True)
class IndicatorResult:
    """Values and signals produced by one step of an indicator."""

    values: tuple[float, ...]
    signals: tuple[Action, ...]

    def __init__(self, values: Iterable[float], signals: Iterable[Action]) -> None:
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "signals", tuple(signals))

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> Action:
        return self.signals[index]