import asyncio
from typing import Awaitable, Callable


class FixedDelayLimiter:
    """Fixed pause between provider calls.

    Not adaptive: throttled responses are absorbed by the fallback path,
    the delay never grows. `sleep` is injectable so callers can test the
    policy without waiting on the wall clock.
    """

    def __init__(self, delay_seconds: float, sleep: Callable[[float], Awaitable[None]] = asyncio.sleep) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    async def pause(self) -> None:
        if self.delay_seconds > 0:
            await self._sleep(self.delay_seconds)
