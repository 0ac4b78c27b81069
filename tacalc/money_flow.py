"""Money flow index indicator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

from .core import (
    Action,
    Candle,
    IndicatorResult,
    ParameterParseError,
    Window,
    WrongConfigError,
)
from .cross import Cross

_MAX_PERIOD = 65535


def _parse_period(text: str) -> int:
    period = int(str(text).strip())
    if not 0 <= period <= _MAX_PERIOD:
        raise ValueError(f"period out of range: {text!r}")
    return period


_PARSERS = {"period": _parse_period, "zone": float}


def _flows(candle: Candle, last_candle: Candle) -> tuple[float, float]:
    tp1 = candle.tp()
    tp2 = last_candle.tp()
    return (
        float(tp1 > tp2) * candle.volume,
        float(tp1 < tp2) * candle.volume,
    )


@dataclass
class MoneyFlowIndex:
    """Money flow index configuration.

    Values: upper bound, MFI in [0.0; 1.0], lower bound.
    Signals: entering a zone, leaving a zone.
    """

    NAME: ClassVar[str] = "MoneyFlowIndex"

    period: int = 14
    zone: float = 0.2

    def init(self, candle: Candle) -> MoneyFlowIndexInstance:
        """Create a running instance starting from `candle`."""
        if not self.validate():
            raise WrongConfigError()
        return MoneyFlowIndexInstance(dataclasses.replace(self), candle)

    def validate(self) -> bool:
        return 0.0 <= self.zone <= 0.5

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
        return (3, 2)


class MoneyFlowIndexInstance:
    """Running money flow index calculation."""

    def __init__(self, config: MoneyFlowIndex, candle: Candle) -> None:
        self.config = config
        self._window: Window[Candle] = Window(config.period, candle)
        self._prev_candle = candle
        self._last_prev_candle = candle
        self._pmf = 0.0
        self._nmf = 0.0
        self._cross_lower = Cross()
        self._cross_upper = Cross()

    def next(self, candle: Candle) -> IndicatorResult:
        pos, neg = _flows(candle, self._prev_candle)
        last_candle = self._window.push(candle)
        left_pos, left_neg = _flows(last_candle, self._last_prev_candle)

        self._last_prev_candle = last_candle
        self._prev_candle = candle

        self._pmf += pos - left_pos
        self._nmf += neg - left_neg

        mfr = 1.0 if self._nmf == 0.0 else self._pmf / self._nmf
        value = 1.0 - 1.0 / (1.0 + mfr)

        upper = 1.0 - self.config.zone
        lower = self.config.zone

        cross_upper = self._cross_upper.next(value, upper).analog()
        cross_lower = self._cross_lower.next(value, lower).analog()

        enters_zone = int(cross_lower < 0) - int(cross_upper > 0)
        leaves_zone = int(cross_lower > 0) - int(cross_upper < 0)

        return IndicatorResult(
            [upper, value, lower], [Action(enters_zone), Action(leaves_zone)]
        )