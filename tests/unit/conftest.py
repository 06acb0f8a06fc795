from datetime import datetime, timedelta
from typing import List

import pytest

from nifty_scanner.core.models import IndicatorReadings, PriceBar, StockResult


def bars_from_closes(closes: List[float]) -> List[PriceBar]:
    """Chronological closes -> PriceBars in provider order (most recent first)."""
    start = datetime(2026, 10, 16, 9, 15)
    bars = [
        PriceBar(timestamp=(start + timedelta(minutes=5 * i)).strftime("%Y-%m-%d %H:%M:%S"), close=c)
        for i, c in enumerate(closes)
    ]
    return list(reversed(bars))


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def make_result():
    def _make(symbol: str = "TCS", probability: int = 50, direction: str = "buy") -> StockResult:
        return StockResult(
            symbol=symbol,
            price=100.0,
            change=0.5,
            volatility=1.2,
            probability=probability,
            direction=direction,
            indicators=IndicatorReadings(roc=1.0, macd=0.1),
        )
    return _make


@pytest.fixture
def make_bars():
    return bars_from_closes


@pytest.fixture
def clock():
    return FakeClock()
