import logging
from typing import List, Protocol

from nifty_scanner.core.fallback import generate_fallback
from nifty_scanner.core.indicators import macd_histogram, rate_of_change
from nifty_scanner.core.models import IndicatorReadings, PriceBar, StockResult
from nifty_scanner.core.signals import (
    compute_signal,
    latest,
    percent_change,
    strip_exchange_suffix,
    volatility,
)

logger = logging.getLogger(__name__)

MAX_BARS = 30


class BarSource(Protocol):
    async def fetch_intraday_bars(self, symbol: str) -> List[PriceBar]: ...


def build_result(symbol: str, closes: List[float]) -> StockResult:
    """Compute indicators and signal from chronological closes."""
    roc = rate_of_change(closes)
    macd = macd_histogram(closes)

    last_close = closes[-1]
    prev_close = closes[-2] if len(closes) > 1 else last_close
    signal = compute_signal(roc, macd, last_close, prev_close)

    return StockResult(
        symbol=strip_exchange_suffix(symbol),
        price=round(last_close, 2),
        change=round(percent_change(last_close, prev_close), 2),
        volatility=round(volatility(closes), 2),
        probability=signal.probability,
        direction=signal.direction,
        indicators=IndicatorReadings(roc=round(latest(roc), 2), macd=round(latest(macd), 2)),
    )


async def process_stock(symbol: str, client: BarSource, rng=None) -> StockResult:
    """
    Fetch, compute and score one symbol.
    Never raises: any failure is logged and replaced by fallback data.
    """
    try:
        bars = await client.fetch_intraday_bars(symbol)
        if not bars:
            raise ValueError("provider returned no bars")

        # provider order is most-recent-first
        closes = [bar.close for bar in bars[:MAX_BARS]]
        closes.reverse()
        return build_result(symbol, closes)
    except Exception as e:
        logger.warning("Error processing %s, using fallback data: %s", symbol, e)
        return generate_fallback(symbol, rng)
