import random

import pytest

from tacalc.core import Candle, WrongMethodParametersError
from tacalc.timeframe import CollapseTimeframe, HeikinAshi


def _random_candles(count, seed=5):
    rng = random.Random(seed)
    price = 100.0
    candles = []
    for _ in range(count):
        open_ = price
        close = open_ + rng.uniform(-5.0, 5.0)
        high = max(open_, close) + rng.uniform(0.1, 3.0)
        low = min(open_, close) - rng.uniform(0.1, 3.0)
        volume = rng.uniform(100.0, 1000.0)
        candles.append(Candle(open_, high, low, close, volume))
        price = close
    return candles


def test_collapse_example():
    timeframe = [
        Candle(10.0, 15.0, 5.0, 12.0, 1000.0),
        Candle(12.1, 17.0, 6.0, 13.0, 2000.0),
    ]
    collapser = CollapseTimeframe(2, timeframe[0])
    assert collapser.next(timeframe[0]) is None
    collapsed = collapser.next(timeframe[1])
    assert collapsed.open == 10.0
    assert collapsed.high == 17.0
    assert collapsed.low == 5.0
    assert collapsed.close == 13.0
    assert collapsed.volume == 3000.0


@pytest.mark.parametrize("length", range(2, 10))
def test_timeframe_collapse(length):
    candles = _random_candles(100)
    method = CollapseTimeframe(length, candles[0])
    converted = [c for c in (method.next(x) for x in candles) if c is not None]

    chunks = [candles[i:i + length] for i in range(0, len(candles) - length + 1, length)]
    assert len(converted) == len(chunks)
    for chunk, got in zip(chunks, converted):
        assert got.open == pytest.approx(chunk[0].open)
        assert got.high == pytest.approx(max(c.high for c in chunk))
        assert got.low == pytest.approx(min(c.low for c in chunk))
        assert got.close == pytest.approx(chunk[-1].close)
        assert got.volume == pytest.approx(sum(c.volume for c in chunk))


def test_timeframe_collapse1():
    candles = _random_candles(100)
    method = CollapseTimeframe(1, candles[0])
    for candle in candles:
        assert method.next(candle) == candle


def test_timeframe_collapse_fail():
    candle = _random_candles(1)[0]
    with pytest.raises(WrongMethodParametersError):
        CollapseTimeframe(0, candle)


def test_heikin_ashi_pinned_values():
    first = Candle(10.0, 15.0, 5.0, 12.0, 1000.0)
    second = Candle(12.1, 17.0, 6.0, 13.0, 2000.0)
    ha = HeikinAshi(first)

    out1 = ha.next(first)
    assert out1 == Candle(10.5, 15.0, 5.0, 10.5, 1000.0)

    out2 = ha.next(second)
    assert out2.open == pytest.approx(10.5)
    assert out2.close == pytest.approx(12.025)
    assert out2.high == 17.0
    assert out2.low == 6.0
    assert out2.volume == 2000.0

    out3 = ha.next(second)
    assert out3.open == pytest.approx((10.5 + 12.025) / 2)


def test_heikin_ashi_const():
    candle = Candle(121.0, 133.0, 49.0, 70.0, 531.0)
    ha = HeikinAshi(candle)
    first = ha.next(candle)
    for _ in range(10):
        assert ha.next(candle) == first


def test_heikin_ashi_invariants():
    candles = _random_candles(101, seed=9)
    ha = HeikinAshi(candles[0])
    prev = Candle(candles[0].ohlc4(), 0.0, 0.0, candles[0].ohlc4(), 0.0)
    for candle in candles[1:]:
        out = ha.next(candle)
        assert out.open == pytest.approx((prev.open + prev.close) / 2)
        assert out.close == pytest.approx(candle.ohlc4())
        assert out.high == pytest.approx(max(candle.high, out.open, out.close))
        assert out.low == pytest.approx(min(candle.low, out.open, out.close))
        assert out.volume == candle.volume
        prev = out