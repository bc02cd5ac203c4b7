"""
Async pump with retry/backoff, its collaborator contracts and test doubles.
"""

from .adapters import CsvFileReader, IterableReader, RepositoryWriter
from .backoff import (
    ExponentialBackoffPolicy,
    LinearBackoffPolicy,
    create_backoff_policy,
)
from .cancellation import CancellationToken
from .contracts import (
    AsyncDelay,
    AsyncReader,
    AsyncWriter,
    BackoffPolicy,
    Clock,
    IdGenerator,
)
from .fakes import FakeClock, FakeDelay, FakeIdGenerator, FakeReader, FakeWriter
from .pump_service import PumpService
from .system import AsyncioDelay, SystemClock, UuidIdGenerator

__all__ = [
    "AsyncDelay",
    "AsyncReader",
    "AsyncWriter",
    "BackoffPolicy",
    "Clock",
    "IdGenerator",
    "CancellationToken",
    "ExponentialBackoffPolicy",
    "LinearBackoffPolicy",
    "create_backoff_policy",
    "PumpService",
    "SystemClock",
    "AsyncioDelay",
    "UuidIdGenerator",
    "FakeClock",
    "FakeDelay",
    "FakeIdGenerator",
    "FakeReader",
    "FakeWriter",
    "IterableReader",
    "CsvFileReader",
    "RepositoryWriter",
]
