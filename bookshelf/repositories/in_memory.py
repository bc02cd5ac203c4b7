"""
Dictionary-backed repository.
"""

from collections.abc import Callable, Hashable
from typing import TypeVar

from bookshelf.observability.metrics import MetricsCollector, default_collector

from .base import Repository

T = TypeVar("T")
TId = TypeVar("TId", bound=Hashable)


class InMemoryRepository(Repository[T, TId]):
    """
    Repository keeping entities in a dict, keyed by a caller-supplied id function.

    No I/O and fully deterministic, which makes it the default double for
    services under test.
    """

    backend = "memory"

    def __init__(
        self,
        id_selector: Callable[[T], TId],
        metrics: MetricsCollector | None = None,
    ):
        """
        Args:
            id_selector: Pure function extracting the identifier from an entity
            metrics: Metrics collector (defaults to the module collector)
        """
        if id_selector is None:
            raise ValueError("id_selector must not be None")

        self._id_selector = id_selector
        self._store: dict[TId, T] = {}
        self._metrics = metrics or default_collector
        self.operation_count = 0

    def add(self, entity: T) -> T:
        if entity is None:
            raise ValueError("entity must not be None")

        self._store[self._id_selector(entity)] = entity
        self.operation_count += 1
        self._metrics.record_repository_operation(self.backend, "add")
        return entity

    def get_by_id(self, entity_id: TId) -> T | None:
        self._metrics.record_repository_operation(self.backend, "get_by_id")
        return self._store.get(entity_id)

    def list_all(self) -> list[T]:
        self._metrics.record_repository_operation(self.backend, "list_all")
        return list(self._store.values())

    def update(self, entity: T) -> bool:
        if entity is None:
            raise ValueError("entity must not be None")

        self._metrics.record_repository_operation(self.backend, "update")
        entity_id = self._id_selector(entity)
        if entity_id not in self._store:
            return False

        self._store[entity_id] = entity
        self.operation_count += 1
        return True

    def remove(self, entity_id: TId) -> bool:
        self._metrics.record_repository_operation(self.backend, "remove")
        if entity_id not in self._store:
            return False

        del self._store[entity_id]
        self.operation_count += 1
        return True

    def exists(self, entity_id: TId) -> bool:
        return entity_id in self._store

    def count(self) -> int:
        return len(self._store)

    def clear(self) -> None:
        """Drop every entity (handy between test cases)."""
        self._store.clear()
