from typing import List, Optional

from nifty_scanner.core.models import StockResult


class ResultCache:
    """Single slot holding the last completed scan.

    Contents are replaced as a whole by `replace`; nothing edits the list
    in place, so readers always see one complete scan.
    """

    def __init__(self, ttl_seconds: float = 300) -> None:
        self.ttl_seconds = ttl_seconds
        self._data: List[StockResult] = []
        self._last_updated: Optional[float] = None

    @property
    def last_updated(self) -> Optional[float]:
        return self._last_updated

    def get_fresh(self, now: float) -> Optional[List[StockResult]]:
        """Return cached results if non-empty and younger than the TTL, else None."""
        if not self._data or self._last_updated is None:
            return None
        if now - self._last_updated >= self.ttl_seconds:
            return None
        return list(self._data)

    def replace(self, results: List[StockResult], now: float) -> None:
        self._data, self._last_updated = list(results), now
