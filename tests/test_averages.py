import random

import pytest

from tacalc.averages import DEMA, DMA, EMA, MA, TEMA, TMA, parse_ma
from tacalc.core import WrongMethodParametersError

KINDS = ["ema", "dma", "tma", "dema", "tema"]


def _closes(count=300, seed=7):
    rng = random.Random(seed)
    price = 100.0
    out = []
    for _ in range(count):
        price += rng.uniform(-3.0, 3.0)
        out.append(price)
    return out


def test_ema_example():
    ema = EMA(3, 3.0)
    ema.next(3.0)
    ema.next(6.0)
    assert ema.next(9.0) == 6.75
    assert ema.next(12.0) == 9.375
    assert ema.peek() == 9.375


def test_dema_example():
    dema = DEMA(3, 1.0)
    dema.next(1.0)
    dema.next(2.0)
    assert dema.next(3.0) == 2.75
    assert dema.next(4.0) == 3.8125


def test_tema_example():
    tema = TEMA(3, 1.0)
    tema.next(1.0)
    tema.next(2.0)
    assert tema.next(3.0) == 2.9375
    assert tema.next(4.0) == 4.0


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("length", [1, 2, 5, 17, 100, 254])
def test_const_input_gives_const_output(kind, length):
    value = (length + 56.0) / 16.3251
    method = MA(kind, length).init(value)
    first = method.next(value)
    for _ in range(20):
        assert method.next(value) == pytest.approx(first)
    assert first == pytest.approx(value)


@pytest.mark.parametrize("kind", KINDS)
def test_length_one_follows_input(kind):
    closes = _closes(100)
    method = MA(kind, 1).init(closes[0])
    for x in closes:
        assert method.next(x) == pytest.approx(x)


@pytest.mark.parametrize("length", [2, 5, 30])
def test_dma_is_ema_of_ema(length):
    closes = _closes()
    dma = DMA(length, closes[0])
    e1, e2 = EMA(length, closes[0]), EMA(length, closes[0])
    for x in closes:
        assert dma.next(x) == pytest.approx(e2.next(e1.next(x)))


@pytest.mark.parametrize("length", [2, 5, 30])
def test_tma_dema_tema_compose_from_emas(length):
    closes = _closes()
    tma, dema, tema = TMA(length, closes[0]), DEMA(length, closes[0]), TEMA(length, closes[0])
    e1, e2, e3 = (EMA(length, closes[0]) for _ in range(3))
    for x in closes:
        a = e1.next(x)
        b = e2.next(a)
        c = e3.next(b)
        assert tma.next(x) == pytest.approx(c)
        assert dema.next(x) == pytest.approx(2 * a - b)
        assert tema.next(x) == pytest.approx(3 * a - 3 * b + c)


def test_zero_length_rejected():
    with pytest.raises(WrongMethodParametersError):
        EMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        DMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        TMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        DEMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        TEMA(0, 1.0)


def test_ma_builds_instances():
    ma = MA("ema", 3)
    instance = ma.init(3.0)
    instance.next(3.0)
    instance.next(6.0)
    assert instance.next(9.0) == 6.75
    assert ma.ma_period() == 3
    assert isinstance(MA("tema", 4).init(0.0), TEMA)


def test_ma_similarity():
    assert MA("ema", 3).is_similar_to(MA("ema", 30))
    assert not MA("ema", 3).is_similar_to(MA("dema", 3))


def test_parse_ma_round_trip():
    ma = parse_ma("dema-12")
    assert ma == MA("dema", 12)
    assert parse_ma(str(ma)) == ma
    assert parse_ma(" TMA-5 ") == MA("tma", 5)


@pytest.mark.parametrize("text", ["ema", "ema-", "ema-x", "foo-3", "-3"])
def test_parse_ma_errors(text):
    with pytest.raises(ValueError):
        parse_ma(text)


def test_ma_zero_period_fails_on_init():
    with pytest.raises(WrongMethodParametersError):
        MA("ema", 0).init(1.0)