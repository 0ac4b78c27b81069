"""Parabolic stop and reverse indicator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

from .core import Action, Candle, IndicatorResult, ParameterParseError, WrongConfigError

_PARSERS = {"af_step": float, "af_max": float}


@dataclass
class ParabolicSAR:
    """Parabolic SAR configuration.

    Values: SAR, trend (-1.0 or 1.0).
    Signal: full buy when the trend turns up, full sell when it turns down.
    """

    NAME: ClassVar[str] = "ParabolicSAR"

    af_step: float = 0.02
    af_max: float = 0.2

    def init(self, candle: Candle) -> ParabolicSARInstance:
        """Create a running instance starting from `candle`."""
        if not self.validate():
            raise WrongConfigError()
        return ParabolicSARInstance(dataclasses.replace(self), candle)

    def validate(self) -> bool:
        return self.af_step < self.af_max

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
        return (2, 1)


ParabolicStopAndReverse = ParabolicSAR


class ParabolicSARInstance:
    """Running parabolic SAR calculation."""

    def __init__(self, config: ParabolicSAR, candle: Candle) -> None:
        self.config = config
        self._trend = 1
        self._trend_inc = 1
        self._low = candle.low
        self._high = candle.high
        self._sar = candle.low
        self._prev_high = candle.high
        self._prev_low = candle.low
        self._prev_trend = 0

    def next(self, candle: Candle) -> IndicatorResult:
        if self._trend > 0:
            if self._high < candle.high:
                self._high = candle.high
                self._trend_inc += 1
            if candle.low < self._sar:
                self._trend = -self._trend
                self._low = candle.low
                self._trend_inc = 1
                self._sar = self._high
        elif self._trend < 0:
            if self._low > candle.low:
                self._low = candle.low
                self._trend_inc += 1
            if candle.high > self._sar:
                self._trend = -self._trend
                self._high = candle.high
                self._trend_inc = 1
                self._sar = self._low

        trend = self._trend
        sar = self._sar

        af = min(self.config.af_max, self.config.af_step * self._trend_inc)

        if self._trend > 0:
            self._sar = af * (self._high - self._sar) + self._sar
            self._sar = min(self._sar, candle.low, self._prev_low)
        elif self._trend < 0:
            self._sar = af * (self._low - self._sar) + self._sar
            self._sar = max(self._sar, candle.high, self._prev_high)

        self._prev_high = candle.high
        self._prev_low = candle.low

        signal = trend if self._prev_trend != trend else 0
        self._prev_trend = trend

        return IndicatorResult([sar, float(trend)], [Action(signal)])