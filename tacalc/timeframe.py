"""Timeseries conversions: timeframe collapsing and Heikin Ashi candles."""

from __future__ import annotations

from .core import Candle, WrongMethodParametersError


class CollapseTimeframe:
    """Merges every `period` consecutive candles into one.

    `next` returns the merged candle once `period` candles have been fed,
    and None in between.
    """

    __slots__ = ("_current", "_index", "_period")

    def __init__(self, period: int, candle: Candle | None = None) -> None:
        if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
            raise WrongMethodParametersError(f"period must be a positive integer, got {period!r}")
        self._current: Candle | None = None
        self._index = 0
        self._period = period

    def next(self, candle: Candle) -> Candle | None:
        self._current = candle if self._current is None else self._current + candle
        self._index += 1
        if self._index == self._period:
            self._index = 0
            collapsed, self._current = self._current, None
            return collapsed
        return None


class HeikinAshi:
    """Converts ordinary candles into Heikin Ashi candles."""

    __slots__ = ("_next_open",)

    def __init__(self, candle: Candle) -> None:
        # Starting from ohlc4 keeps the output stable for constant input.
        self._next_open = candle.ohlc4()

    def next(self, candle: Candle) -> Candle:
        open_ = self._next_open
        close = candle.ohlc4()
        self._next_open = (open_ + close) * 0.5
        return Candle(
            open=open_,
            high=max(candle.high, open_),
            low=min(candle.low, open_),
            close=close,
            volume=candle.volume,
        )