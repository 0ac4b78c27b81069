# tacalc

Streaming technical analysis for OHLCV time series. Each method and indicator
keeps its own state. You feed it one value or candle at a time, so it behaves
the same on historical data as on a live feed.

The package has no dependencies beyond the Python standard library. It needs
Python 3.10 or later.

## Installation

```
pip install tacalc
```

## Core types

`tacalc.core` holds the shared types:

- `Candle(open, high, low, close, volume)` is an immutable bar. Its helpers are
  `tp()`, `hl2()`, `ohlc4()`, `clv()`, `tr_close(prev_close)` and
  `source(source)`. Adding two candles (`a + b`) gives one longer candle. That
  candle takes its open from `a`, its close from `b`, the highest high, the
  lowest low and the summed volume.
- `Source` names which value of a candle to read: `CLOSE`, `OPEN`, `HIGH`,
  `LOW`, `VOLUME`, `HL2`, `TP`, `OHLC4` and `VOLUMED_PRICE`.
  `parse_source(text)` accepts these names in any case and also accepts
  `"hlc3"`. It raises `ValueError` for an unknown name.
- `Action(strength)` is a signal with a strength in `[-1.0; 1.0]`. Positive
  means buy and negative means sell. `analog()` returns `-1`, `0` or `1`, and
  `is_some()` tells whether there is any signal. The constants are
  `Action.NONE`, `Action.BUY_ALL` and `Action.SELL_ALL`.
- `Window(size, value)` is a fixed-size sliding window, prefilled with `value`.
  `push(value)` returns the value that drops out. A window of size 0 passes
  values straight through.
- `IndicatorResult` holds the `values` and `signals` an indicator returns for
  one candle. Read them with `value(i)` and `signal(i)`.
- Errors: `TaError` is the base class. `WrongConfigError`,
  `WrongMethodParametersError` and `ParameterParseError` derive from it.

## Methods

A method is created from its parameter and a first value. After that you call
`next(...)` once for each new input. An invalid parameter raises
`WrongMethodParametersError`.

```python
from tacalc.averages import EMA

ema = EMA(3, 3.0)
ema.next(3.0)
ema.next(6.0)
assert ema.next(9.0) == 6.75
assert ema.next(12.0) == 9.375
```

- `tacalc.averages`
  - `EMA`, `DMA`, `TMA`, `DEMA` and `TEMA`, each with `next` and `peek`.
  - `MA(kind, period)` together with `parse_ma("ema-12")` selects one of those
    five kinds by name: `ema`, `dma`, `tma`, `dema` or `tema`.
  - `MA.init(value)` builds the running average.
  - `ma_period()` and `is_similar_to(other)` support config validation.
- `tacalc.conv`: `Conv(weights, value)` is a moving average with arbitrary
  weights. The first weight applies to the newest value.
- `tacalc.derivative`: `Derivative(length, value)` returns the change over
  `length` steps divided by `length`. `Differential` is another name for it.
- `tacalc.cross`: `Cross`, `CrossAbove` and `CrossUnder` take `(value, base)`
  pairs and return an `Action`.
  - `Cross` returns a full buy for an upward cross and a full sell for a
    downward cross.
  - `CrossAbove` and `CrossUnder` each return a full buy only for their own
    direction.
- `tacalc.adi`: `ADI(length, candle)` is the accumulation/distribution index,
  the sum of `clv * volume`. It runs over the last `length` candles, or over
  the whole history when `length` is `0`.
- `tacalc.cci`: `CCI(length, value)` is the commodity channel index, computed
  without the `1/0.015` factor. It returns `0.0` when the deviation is zero.
- `tacalc.timeframe`
  - `CollapseTimeframe(period, candle)` merges every `period` candles into one
    and returns `None` in between.
  - `HeikinAshi(candle)` turns ordinary candles into Heikin Ashi candles.

```python
from tacalc.core import Candle
from tacalc.timeframe import CollapseTimeframe

candles = [Candle(10.0, 15.0, 5.0, 12.0, 1000.0), Candle(12.1, 17.0, 6.0, 13.0, 2000.0)]
collapser = CollapseTimeframe(2, candles[0])
assert collapser.next(candles[0]) is None
merged = collapser.next(candles[1])
assert (merged.open, merged.high, merged.low, merged.close, merged.volume) == (10.0, 17.0, 5.0, 13.0, 3000.0)
```

## Indicators

An indicator config is a dataclass with defaults. To use it:

1. Adjust its fields directly, or use `set(name, value)` with text values.
2. Call `init(candle)`, which checks the config and returns a running instance.
3. Call `next(candle)` on that instance for each candle. It returns an
   `IndicatorResult`.

Errors and helpers:

- `init` raises `WrongConfigError` when `validate()` fails.
- `set` raises `ParameterParseError` for an unknown name or unreadable text.
- `size()` returns the number of values and of signals.

| Config | Values | Signals |
| --- | --- | --- |
| `tacalc.macd.MACD` (alias `MovingAverageConvergenceDivergence`) | MACD, signal line | cross of signal line, cross of zero |
| `tacalc.rsi.RelativeStrengthIndex` (alias `RSI`) | RSI in `[0; 1]` | entering an over-zone, leaving an over-zone |
| `tacalc.klinger.KlingerVolumeOscillator` | oscillator, signal line | cross of zero, cross of signal line |
| `tacalc.money_flow.MoneyFlowIndex` | upper bound, MFI, lower bound | entering a zone, leaving a zone |
| `tacalc.parabolic_sar.ParabolicSAR` (alias `ParabolicStopAndReverse`) | SAR, trend | trend reversal |

```python
from tacalc.core import Candle
from tacalc.macd import MACD

config = MACD()
config.set("ma1", "dema-4")
config.set("signal", "tema-5")

first = Candle(10.0, 11.0, 9.0, 10.5, 100.0)
macd = config.init(first)
result = macd.next(Candle(10.5, 12.0, 10.0, 11.5, 150.0))
print(result.value(0), result.value(1), result.signal(0))
```

## What this package does not do

- Moving averages are limited to the exponential family: EMA, DMA, TMA, DEMA
  and TEMA. There is no simple, weighted, Hull or median moving average, and
  `parse_ma` rejects other names such as `"sma-4"`.
- Only the five indicators above are included.
- There is no random candle generator, no data loading or storage, and no
  command-line tool. You supply the candles yourself.