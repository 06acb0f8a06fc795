"""
Scan orchestration.

`StockScanner.scan()` either serves the cached result set or runs one
sequential pass over the symbol list, pausing between provider calls,
then sorts and caches the results.
"""

import asyncio
import logging
import time
from typing import Callable, List, Optional, Sequence

from nifty_scanner.config import NIFTY_50_SYMBOLS
from nifty_scanner.core.models import StockResult
from nifty_scanner.core.processor import BarSource, process_stock
from nifty_scanner.scanner.cache import ResultCache
from nifty_scanner.scanner.rate_limit import FixedDelayLimiter

logger = logging.getLogger(__name__)


def sort_by_probability(results: List[StockResult]) -> List[StockResult]:
    # stable: equal probabilities keep symbol-list order
    return sorted(results, key=lambda r: r.probability, reverse=True)


class StockScanner:

    def __init__(self, client: BarSource, cache: Optional[ResultCache] = None,
                 limiter: Optional[FixedDelayLimiter] = None,
                 symbols: Sequence[str] = NIFTY_50_SYMBOLS,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.client = client
        self.cache = cache or ResultCache()
        self.limiter = limiter or FixedDelayLimiter(12)
        self.symbols = tuple(symbols)
        self._clock = clock
        self._scan_lock = asyncio.Lock()

    async def scan(self) -> List[StockResult]:
        """Return the current result set, scanning only when the cache is stale.

        Concurrent callers share one in-flight scan: whoever gets the lock
        second re-checks the cache and returns what the first one wrote.
        """
        cached = self.cache.get_fresh(self._clock())
        if cached is not None:
            logger.debug("Serving %d cached results", len(cached))
            return cached

        async with self._scan_lock:
            cached = self.cache.get_fresh(self._clock())
            if cached is not None:
                logger.debug("Scan finished while waiting, serving cache")
                return cached

            results = await self._run_scan()
            results = sort_by_probability(results)
            self.cache.replace(results, self._clock())
            logger.info("Scan complete: %d symbols cached", len(results))
            return list(results)

    async def _run_scan(self) -> List[StockResult]:
        logger.info("Scanning %d symbols", len(self.symbols))
        results: List[StockResult] = []
        for i, symbol in enumerate(self.symbols):
            results.append(await process_stock(symbol, self.client))
            if i < len(self.symbols) - 1:
                await self.limiter.pause()
        return results
