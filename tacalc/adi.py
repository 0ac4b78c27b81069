"""Accumulation/distribution index."""

from __future__ import annotations

from .core import Candle, Window, WrongMethodParametersError


class ADI:
    """Accumulation/distribution index: running sum of ``clv * volume``.

    With ``length == 0`` the sum covers the whole history. Otherwise it
    covers only the last `length` candles.
    """

    __slots__ = ("_cmf_sum", "_window")

    def __init__(self, length: int, candle: Candle) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise WrongMethodParametersError(
                f"length must be a non-negative integer, got {length!r}"
            )
        if length > 0:
            clvv = candle.clv() * candle.volume
            self._cmf_sum = clvv * length
            self._window: Window[float] = Window(length, clvv)
        else:
            self._cmf_sum = 0.0
            self._window = Window(0, 0.0)

    def next(self, candle: Candle) -> float:
        clvv = candle.clv() * candle.volume
        self._cmf_sum += clvv
        if not self._window.is_empty():
            self._cmf_sum -= self._window.push(clvv)
        return self.peek()

    def peek(self) -> float:
        """Return the last calculated value."""
        return self._cmf_sum