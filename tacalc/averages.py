"""Exponential moving averages and a generic moving-average selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .core import WrongMethodParametersError


def _check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise WrongMethodParametersError(f"length must be a positive integer, got {length!r}")
    return length


class EMA:
    """Exponential moving average of `length` values."""

    __slots__ = ("_alpha", "_value")

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length)
        self._alpha = 2.0 / (length + 1)
        self._value = float(value)

    def next(self, value: float) -> float:
        self._value = (value - self._value) * self._alpha + self._value
        return self._value

    def peek(self) -> float:
        return self._value


class DMA:
    """EMA applied over an EMA."""

    __slots__ = ("_ema", "_dma")

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)

    def next(self, value: float) -> float:
        return self._dma.next(self._ema.next(value))

    def peek(self) -> float:
        return self._dma.peek()


class TMA:
    """EMA applied three times in a row."""

    __slots__ = ("_dma", "_tma")

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._dma = DMA(length, value)
        self._tma = EMA(length, value)

    def next(self, value: float) -> float:
        return self._tma.next(self._dma.next(value))

    def peek(self) -> float:
        return self._tma.peek()


class DEMA:
    """Double exponential moving average: 2 * EMA - EMA(EMA)."""

    __slots__ = ("_ema", "_dma")

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)

    def next(self, value: float) -> float:
        self._dma.next(self._ema.next(value))
        return self.peek()

    def peek(self) -> float:
        return self._ema.peek() * 2.0 - self._dma.peek()


class TEMA:
    """Triple exponential moving average: 3 * (EMA - DMA) + TMA."""

    __slots__ = ("_ema", "_dma", "_tma")

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)
        self._tma = EMA(length, value)

    def next(self, value: float) -> float:
        e_ma = self._ema.next(value)
        d_ma = self._dma.next(e_ma)
        self._tma.next(d_ma)
        return self.peek()

    def peek(self) -> float:
        return (self._ema.peek() - self._dma.peek()) * 3.0 + self._tma.peek()


MovingAverage = Union[EMA, DMA, TMA, DEMA, TEMA]


class MAKind(Enum):
    """Kinds of moving average an `MA` can build."""

    EMA = "ema"
    DMA = "dma"
    TMA = "tma"
    DEMA = "dema"
    TEMA = "tema"


_CONSTRUCTORS = {
    MAKind.EMA: EMA,
    MAKind.DMA: DMA,
    MAKind.TMA: TMA,
    MAKind.DEMA: DEMA,
    MAKind.TEMA: TEMA,
}


@dataclass(frozen=True)
class MA:
    """A moving average kind together with its period, e.g. ``MA("ema", 12)``."""

    kind: MAKind
    period: int

    def __post_init__(self) -> None:
        kind = self.kind
        if not isinstance(kind, MAKind):
            try:
                kind = MAKind(str(kind).strip().lower())
            except ValueError:
                raise ValueError(f"unknown moving average kind {self.kind!r}") from None
        object.__setattr__(self, "kind", kind)
        if isinstance(self.period, bool) or not isinstance(self.period, int) or self.period < 0:
            raise ValueError(f"moving average period must be a non-negative integer, got {self.period!r}")

    def init(self, value: float) -> MovingAverage:
        """Create a running moving average starting from `value`."""
        return _CONSTRUCTORS[self.kind](self.period, value)

    def ma_period(self) -> int:
        return self.period

    def is_similar_to(self, other: MA) -> bool:
        """Return True when `other` is the same kind of moving average."""
        return self.kind is other.kind

    def __str__(self) -> str:
        return f"{self.kind.value}-{self.period}"


def parse_ma(text: str | MA) -> MA:
    """Parse text such as ``"ema-12"``; raise ValueError when it is malformed."""
    if isinstance(text, MA):
        return text
    kind, sep, period = str(text).strip().partition("-")
    if not sep or not period.strip().isdigit():
        raise ValueError(f"cannot parse moving average from {text!r}")
    return MA(kind, int(period))