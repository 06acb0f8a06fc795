import asyncio
import logging
import math
from typing import Any, Dict, List, Optional

import aiohttp

from nifty_scanner.config import (
    ALPHA_VANTAGE_BASE,
    CLOSE_FIELD,
    INTRADAY_FUNCTION,
    INTRADAY_INTERVAL,
    SERIES_KEY,
)
from nifty_scanner.core.models import PriceBar

logger = logging.getLogger(__name__)

# Keys the provider uses instead of a series when it throttles or rejects a call
NOTICE_KEYS = ("Note", "Information", "Error Message")


class ProviderError(RuntimeError):
    """Raised when the market data provider can't give us usable data."""


class MalformedResponseError(ProviderError):
    """Payload arrived but doesn't carry the expected time series."""


def parse_price(val) -> Optional[float]:
    """
    Parse price if numeric or numeric-like string; else None.
    NaN and infinities count as unparseable.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        price = float(val)
    else:
        try:
            price = float(str(val).replace(",", "").strip())
        except ValueError:
            return None
    return price if math.isfinite(price) else None


def parse_intraday_bars(payload: Any) -> List[PriceBar]:
    """
    Turn a TIME_SERIES_INTRADAY payload into PriceBars.
    Order is kept as delivered (most recent first).
    Raises MalformedResponseError when the series is missing, empty or
    a bar has no usable (finite, positive) close.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"expected a JSON object, got {type(payload).__name__}")

    series = payload.get(SERIES_KEY)
    if not isinstance(series, dict):
        notice = next((payload[k] for k in NOTICE_KEYS if k in payload), None)
        if notice:
            raise MalformedResponseError(f"no '{SERIES_KEY}' in response: {notice}")
        raise MalformedResponseError(f"no '{SERIES_KEY}' in response")
    if not series:
        raise MalformedResponseError(f"'{SERIES_KEY}' is empty")

    bars: List[PriceBar] = []
    for timestamp, bar in series.items():
        close = parse_price(bar.get(CLOSE_FIELD)) if isinstance(bar, dict) else None
        if close is None or close <= 0:
            raise MalformedResponseError(f"bar {timestamp} has no usable '{CLOSE_FIELD}'")
        bars.append(PriceBar(timestamp=timestamp, close=close))
    return bars


class AlphaVantageClient:
    """Thin async wrapper over the Alpha Vantage intraday endpoint."""

    def __init__(self, api_key: str, timeout: float = 30, base_url: str = ALPHA_VANTAGE_BASE) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url

    async def fetch_intraday(self, symbol: str) -> Dict[str, Any]:
        """Return the raw intraday payload for `symbol` at 5-minute granularity."""
        if not self.api_key:
            raise ProviderError("ALPHA_VANTAGE_API_KEY not set")

        params = {
            "function": INTRADAY_FUNCTION,
            "symbol": symbol,
            "interval": INTRADAY_INTERVAL,
            "apikey": self.api_key,
        }
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            try:
                async with session.get(self.base_url, params=params) as response:
                    response.raise_for_status()
                    data = await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise ProviderError(f"Alpha Vantage request failed for {symbol}: {e}") from e
            except ValueError as e:
                raise ProviderError(f"Alpha Vantage returned non-JSON body for {symbol}") from e

        logger.debug("Fetched intraday payload for %s", symbol)
        return data

    async def fetch_intraday_bars(self, symbol: str) -> List[PriceBar]:
        payload = await self.fetch_intraday(symbol)
        return parse_intraday_bars(payload)
