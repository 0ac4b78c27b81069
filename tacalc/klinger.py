"""Klinger volume oscillator indicator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

from .averages import MA, MAKind, parse_ma
from .core import Candle, IndicatorResult, ParameterParseError, WrongConfigError
from .cross import Cross

_PARSERS = {"ma1": parse_ma, "ma2": parse_ma, "signal": parse_ma}


def _sign(value: float) -> float:
    return float((value > 0) - (value < 0))


@dataclass
class KlingerVolumeOscillator:
    """Klinger volume oscillator configuration.

    Values: oscillator, signal line.
    Signals: oscillator crossing zero, oscillator crossing the signal line.
    """

    NAME: ClassVar[str] = "KlingerVolumeOscillator"

    ma1: MA = MA(MAKind.EMA, 34)
    ma2: MA = MA(MAKind.EMA, 55)
    signal: MA = MA(MAKind.EMA, 13)

    def init(self, candle: Candle) -> KlingerVolumeOscillatorInstance:
        """Create a running instance starting from `candle`."""
        if not self.validate():
            raise WrongConfigError()
        return KlingerVolumeOscillatorInstance(dataclasses.replace(self), candle)

    def validate(self) -> bool:
        return (
            self.ma1.is_similar_to(self.ma2)
            and self.ma1.ma_period() > 1
            and self.signal.ma_period() > 1
            and self.ma1.ma_period() < self.ma2.ma_period()
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


class KlingerVolumeOscillatorInstance:
    """Running Klinger volume oscillator calculation."""

    def __init__(self, config: KlingerVolumeOscillator, candle: Candle) -> None:
        self.config = config
        self._ma1 = config.ma1.init(0.0)
        self._ma2 = config.ma2.init(0.0)
        self._ma3 = config.signal.init(0.0)
        self._cross1 = Cross()
        self._cross2 = Cross()
        self._last_tp = candle.tp()

    def next(self, candle: Candle) -> IndicatorResult:
        tp = candle.tp()
        direction = tp - self._last_tp
        self._last_tp = tp

        vol = _sign(direction) * candle.volume
        ko = self._ma1.next(vol) - self._ma2.next(vol)
        ma3 = self._ma3.next(ko)

        s1 = self._cross1.next(ko, 0.0)
        s2 = self._cross2.next(ko, ma3)
        return IndicatorResult([ko, ma3], [s1, s2])