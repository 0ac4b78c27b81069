"""Convolution moving average."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .core import Window, WrongMethodParametersError

MAX_WEIGHTS_LEN = 65535


class Conv:
    """Moving average weighted by `weights`; the first weight applies to the newest value."""

    __slots__ = ("_weights", "_window", "_wsum_invert")

    def __init__(self, weights: Iterable[float], value: float) -> None:
        weights = [float(w) for w in weights]
        if not 1 <= len(weights) <= MAX_WEIGHTS_LEN:
            raise WrongMethodParametersError(
                f"weights count must be in [1; {MAX_WEIGHTS_LEN}], got {len(weights)}"
            )
        total = sum(weights)
        self._wsum_invert = 1.0 / total if total != 0 else math.copysign(math.inf, total)
        self._weights = weights
        self._window: Window[float] = Window(len(weights), float(value))

    def next(self, value: float) -> float:
        self._window.push(float(value))
        return self.peek()

    def peek(self) -> float:
        weighted = sum(v * w for v, w in zip(self._window, reversed(self._weights)))
        return weighted * self._wsum_invert