"""
Seams between the pump and the outside world.

Time, waiting, item sources and sinks are separate injectable
collaborators so tests can simulate elapsed time without sleeping.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from datetime import datetime
from typing import Generic, TypeVar

from .cancellation import CancellationToken

T = TypeVar("T")


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class AsyncDelay(ABC):
    """Suspends for a duration, aborting when the token is cancelled."""

    @abstractmethod
    async def delay(self, seconds: float, token: CancellationToken) -> None:
        pass


class AsyncReader(ABC, Generic[T]):
    """Lazy, finite, non-restartable source of items."""

    @abstractmethod
    def read(self, token: CancellationToken) -> AsyncIterator[T]:
        pass


class AsyncWriter(ABC, Generic[T]):
    """Sink accepting one item per call."""

    @abstractmethod
    async def write(self, item: T, token: CancellationToken) -> None:
        pass


class BackoffPolicy(ABC):
    """Maps a retry attempt number (1-based) to a wait in seconds."""

    @abstractmethod
    def get_delay(self, attempt: int) -> float:
        pass


class IdGenerator(ABC):
    """Produces unique identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        pass
