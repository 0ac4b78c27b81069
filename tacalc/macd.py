"""Moving average convergence/divergence indicator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

from .averages import MA, MAKind, parse_ma
from .core import (
    Candle,
    IndicatorResult,
    ParameterParseError,
    Source,
    WrongConfigError,
    parse_source,
)
from .cross import Cross

_PARSERS = {
    "ma1": parse_ma,
    "ma2": parse_ma,
    "signal": parse_ma,
    "source": parse_source,
}


@dataclass
class MACD:
    """MACD configuration.

    Values: MACD line, signal line.
    Signals: MACD crossing the signal line, MACD crossing zero.
    """

    NAME: ClassVar[str] = "MACD"

    ma1: MA = MA(MAKind.EMA, 12)
    ma2: MA = MA(MAKind.EMA, 26)
    signal: MA = MA(MAKind.EMA, 9)
    source: Source = Source.CLOSE

    def init(self, candle: Candle) -> MACDInstance:
        """Create a running instance starting from `candle`."""
        if not self.validate():
            raise WrongConfigError()
        return MACDInstance(dataclasses.replace(self), candle)

    def validate(self) -> bool:
        return (
            self.ma1.ma_period() < self.ma2.ma_period()
            and self.ma1.ma_period() > 1
            and self.signal.ma_period() > 1
        )

    def set(self, name: str, value: str) -> None:
        """Set parameter `name` from its text form."""
        parser = _PARSERS.get(name)
        if parser is None:
            raise ParameterParseError(name, value)
        try:
            parsed = parser(value)
        except ValueError:
            raise ParameterParseError(name, value) from None
        setattr(self, name, parsed)

    def size(self) -> tuple[int, int]:
        """Return the number of values and of signals."""
        return (2, 2)


MovingAverageConvergenceDivergence = MACD


class MACDInstance:
    """Running MACD calculation."""

    def __init__(self, config: MACD, candle: Candle) -> None:
        self.config = config
        src = candle.source(config.source)
        self._ma1 = config.ma1.init(src)
        self._ma2 = config.ma2.init(src)
        self._ma3 = config.signal.init(0.0)
        self._cross1 = Cross()
        self._cross2 = Cross()

    def next(self, candle: Candle) -> IndicatorResult:
        src = candle.source(self.config.source)
        macd = self._ma1.next(src) - self._ma2.next(src)
        sigline = self._ma3.next(macd)
        signal1 = self._cross1.next(macd, sigline)
        signal2 = self._cross2.next(macd, 0.0)
        return IndicatorResult([macd, sigline], [signal1, signal2])