"""Relative strength index indicator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

from .averages import MA, MAKind, parse_ma
from .core import (
    Action,
    Candle,
    IndicatorResult,
    ParameterParseError,
    Source,
    WrongConfigError,
    parse_source,
)
from .cross import Cross

_PARSERS = {
    "ma": parse_ma,
    "zone": float,
    "source": parse_source,
}


@dataclass
class RelativeStrengthIndex:
    """RSI configuration.

    Value: RSI in [0.0; 1.0].
    Signals: entering an over-zone, leaving an over-zone.
    """

    NAME: ClassVar[str] = "RelativeStrengthIndex"

    ma: MA = MA(MAKind.EMA, 14)
    zone: float = 0.3
    source: Source = Source.CLOSE

    def init(self, candle: Candle) -> RelativeStrengthIndexInstance:
        """Create a running instance starting from `candle`."""
        if not self.validate():
            raise WrongConfigError()
        return RelativeStrengthIndexInstance(dataclasses.replace(self), candle)

    def validate(self) -> bool:
        return self.ma.ma_period() > 2 and 0.0 < self.zone <= 0.5

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
        return (1, 2)


RSI = RelativeStrengthIndex


class RelativeStrengthIndexInstance:
    """Running RSI calculation."""

    def __init__(self, config: RelativeStrengthIndex, candle: Candle) -> None:
        self.config = config
        self._previous_input = candle.source(config.source)
        self._posma = config.ma.init(0.0)
        self._negma = config.ma.init(0.0)
        self._cross_upper = Cross(0.5, 1.0 - config.zone)
        self._cross_lower = Cross(0.5, config.zone)

    def next(self, candle: Candle) -> IndicatorResult:
        zone = self.config.zone
        src = candle.source(self.config.source)
        change = src - self._previous_input
        self._previous_input = src

        pos = self._posma.next(max(change, 0.0))
        neg = -self._negma.next(min(change, 0.0))

        value = pos / (pos + neg) if pos != 0.0 or neg != 0.0 else 0.5

        oversold = self._cross_lower.next(value, zone).analog()
        overbought = self._cross_upper.next(value, 1.0 - zone).analog()

        signal1 = int(oversold < 0) - int(overbought > 0)
        signal2 = int(oversold > 0) - int(overbought < 0)
        return IndicatorResult([value], [Action(signal1), Action(signal2)])