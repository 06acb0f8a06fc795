"""
Signal math for a single symbol.

The probability score is a fixed heuristic:

    probability = min(90, 20 + gap*500 + |roc|*30 + |macd|*50)

rounded half-up to an integer, where `gap` is the absolute fractional move
of the last bar and `roc`/`macd` are the latest indicator readings.
"""

import math
from typing import NamedTuple, Sequence

from nifty_scanner.core.models import Direction

MAX_PROBABILITY = 90
BASE_PROBABILITY = 20
GAP_WEIGHT = 500
ROC_WEIGHT = 30
MACD_WEIGHT = 50


class Signal(NamedTuple):
    probability: int
    direction: Direction


def latest(series: Sequence[float]) -> float:
    return float(series[-1]) if len(series) > 0 else 0.0


def compute_signal(roc: Sequence[float], macd: Sequence[float], last_close: float,
                   prev_close: float) -> Signal:
    gap = abs(last_close - prev_close) / prev_close if prev_close else 0.0
    roc_value = abs(latest(roc))
    macd_value = abs(latest(macd))

    raw = min(MAX_PROBABILITY, BASE_PROBABILITY + gap * GAP_WEIGHT + roc_value * ROC_WEIGHT
              + macd_value * MACD_WEIGHT)
    probability = int(math.floor(raw + 0.5))

    direction: Direction = "buy" if len(roc) > 0 and roc[-1] > 0 else "sell"
    return Signal(probability, direction)


def percent_change(last_close: float, prev_close: float) -> float:
    """Percent move from prev_close to last_close; 0 when prev_close is 0."""
    if not prev_close:
        return 0.0
    return (last_close - prev_close) / prev_close * 100


def volatility(closes: Sequence[float]) -> float:
    """Mean absolute bar-to-bar return, in percent."""
    if len(closes) < 2:
        return 0.0
    total = 0.0
    for prev, cur in zip(closes, closes[1:]):
        if prev:
            total += abs((cur - prev) / prev)
    return total / (len(closes) - 1) * 100


def strip_exchange_suffix(symbol: str) -> str:
    # RELIANCE.BSE -> RELIANCE
    return symbol.split(".")[0]
