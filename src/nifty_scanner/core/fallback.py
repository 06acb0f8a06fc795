"""Synthetic results for symbols the provider couldn't serve."""

import random
from typing import Optional

from nifty_scanner.core.models import IndicatorReadings, StockResult
from nifty_scanner.core.signals import strip_exchange_suffix


def generate_fallback(symbol: str, rng: Optional[random.Random] = None) -> StockResult:
    """
    Build a random but well-formed StockResult.
    Ranges: probability 50-90, price 100-5100, change -2..2, volatility 0-3.
    Indicator readings carry the sign of the chosen direction.
    """
    rng = rng or random.Random()
    direction = "buy" if rng.random() > 0.5 else "sell"
    sign = 1 if direction == "buy" else -1

    return StockResult(
        symbol=strip_exchange_suffix(symbol),
        price=round(rng.uniform(100, 5100), 2),
        change=round(rng.uniform(-2, 2), 2),
        volatility=round(rng.uniform(0, 3), 2),
        probability=rng.randint(50, 90),
        direction=direction,
        indicators=IndicatorReadings(
            roc=round(sign * rng.uniform(0, 2), 2),
            macd=round(sign * rng.uniform(0, 0.5), 2),
        ),
    )
