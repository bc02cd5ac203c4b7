"""
Production implementations of the pump seams.
"""

import asyncio
import uuid
from datetime import datetime, timezone

from bookshelf.core.errors import OperationCancelledError

from .cancellation import CancellationToken
from .contracts import AsyncDelay, Clock, IdGenerator


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class AsyncioDelay(AsyncDelay):
    """Sleeps on the event loop, waking early when the token is cancelled."""

    async def delay(self, seconds: float, token: CancellationToken) -> None:
        token.raise_if_cancelled()
        if seconds <= 0:
            return

        try:
            await asyncio.wait_for(token.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return

        raise OperationCancelledError("Cancelled during backoff delay")


class UuidIdGenerator(IdGenerator):
    def new_id(self) -> str:
        return uuid.uuid4().hex
