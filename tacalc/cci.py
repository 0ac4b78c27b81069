"""Commodity channel index."""

from __future__ import annotations

import math

from .core import Window, WrongMethodParametersError


class CCI:
    """Commodity channel index over `length` values, without the 1/0.015 factor.

    Returns ``(value - sma) / mean_abs_dev``, or 0.0 when the deviation is zero.
    """

    __slots__ = ("_window",)

    def __init__(self, length: int, value: float) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise WrongMethodParametersError(f"length must be a positive integer, got {length!r}")
        self._window: Window[float] = Window(length, float(value))

    def next(self, value: float) -> float:
        value = float(value)
        self._window.push(value)
        values = list(self._window)
        count = len(values)
        ma = math.fsum(values) / count
        mean_dev = math.fsum(abs(v - ma) for v in values) / count
        if mean_dev > 0.0:
            return (value - ma) / mean_dev
        return 0.0