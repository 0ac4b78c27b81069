import random

import pytest

from tacalc.core import Action
from tacalc.cross import Cross, CrossAbove, CrossUnder

T1 = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
T2 = [5.0, 3.0, 1.8, 2.9, 4.1, 5.6]


def _closes(count=100, seed=7):
    rng = random.Random(seed)
    price = 100.0
    out = []
    for _ in range(count):
        price += rng.uniform(-3.0, 3.0)
        out.append(price)
    return out


def test_cross_example():
    cross = Cross()
    result = [cross.next(v, b).analog() for v, b in zip(T1, T2)]
    assert result == [0, 0, 1, 0, -1, 0]


def test_cross_above_example():
    cross = CrossAbove(0.0, 5.0)
    result = [cross.next(v, b).analog() for v, b in zip(T1, T2)]
    assert result == [0, 0, 1, 0, 0, 0]


def test_cross_under_example():
    cross = CrossUnder(0.0, 5.0)
    result = [cross.next(v, b).analog() for v, b in zip(T1, T2)]
    assert result == [0, 0, 0, 0, 1, 0]


@pytest.mark.parametrize("cls", [Cross, CrossAbove, CrossUnder])
def test_const(cls):
    method = cls(7.0, 1.0)
    output = method.next(7.0, 1.0)
    assert output == Action.NONE
    for _ in range(100):
        assert method.next(7.0, 1.0) == output


def test_cross_random():
    src = _closes()
    avg = sum(src) / len(src)
    cross = Cross(src[0], avg)
    for i, x in enumerate(src):
        prev = src[max(i - 1, 0)]
        if x > avg and prev < avg:
            expected = 1
        elif x < avg and prev > avg:
            expected = -1
        else:
            expected = 0
        assert cross.next(x, avg).analog() == expected, i


def test_cross_above_random():
    src = _closes()
    avg = sum(src) / len(src)
    cross = CrossAbove(src[0], avg)
    for i, x in enumerate(src):
        prev = src[max(i - 1, 0)]
        assert cross.next(x, avg).analog() == int(x > avg and prev < avg), i


def test_cross_under_random():
    src = _closes()
    avg = sum(src) / len(src)
    cross = CrossUnder(src[0], avg)
    for i, x in enumerate(src):
        prev = src[max(i - 1, 0)]
        assert cross.next(x, avg).analog() == int(x < avg and prev > avg), i


def test_binary_touch_counts_as_cross():
    above = CrossAbove(0.0, 1.0)
    under = CrossUnder(2.0, 1.0)
    assert above.binary(1.0, 1.0) is True
    assert under.binary(1.0, 1.0) is True
    assert above.binary(1.0, 1.0) is False
    assert under.binary(1.0, 1.0) is False