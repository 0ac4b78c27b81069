"""Discrete derivative over a window."""

from __future__ import annotations

from .core import Window, WrongMethodParametersError


class Derivative:
    """Change between the current value and the one `length` steps back, divided by `length`."""

    __slots__ = ("_divider", "_window")

    def __init__(self, length: int = 1, value: float = 0.0) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise WrongMethodParametersError(f"length must be a positive integer, got {length!r}")
        self._divider = 1.0 / length
        self._window: Window[float] = Window(length, float(value))

    def next(self, value: float) -> float:
        prev_value = self._window.push(float(value))
        return (value - prev_value) * self._divider


Differential = Derivative