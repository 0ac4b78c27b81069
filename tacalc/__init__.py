"""Streaming technical analysis: exponential moving averages, cross detection, ADI, CCI,
timeframe conversion and the MACD, RSI, Klinger, money flow and parabolic SAR indicators."""

__version__ = "0.7.0"