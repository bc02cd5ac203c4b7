"""
Generic keyed-store contracts.

Callers depend on these abstract classes only, never on a backend's
internals. The contracts carry no state, so each backend implements the
operations independently.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
TId = TypeVar("TId")


class ReadRepository(ABC, Generic[T, TId]):
    """Read-only side of a repository."""

    @abstractmethod
    def get_by_id(self, entity_id: TId) -> T | None:
        """
        Look up an entity by identifier.

        Returns:
            The entity, or None when absent
        """

    @abstractmethod
    def list_all(self) -> list[T]:
        """
        Return a snapshot of all entities.

        The returned list is a copy; mutating it never affects the store.
        """


class WriteRepository(ABC, Generic[T, TId]):
    """Mutating side of a repository."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """
        Insert the entity, replacing any entity with the same identifier.

        Returns:
            The entity that was stored
        """

    @abstractmethod
    def update(self, entity: T) -> bool:
        """
        Replace an existing entity.

        Returns:
            True if an entity with the same identifier existed and was replaced
        """

    @abstractmethod
    def remove(self, entity_id: TId) -> bool:
        """
        Delete an entity by identifier.

        Returns:
            True if an entity was removed
        """


class Repository(ReadRepository[T, TId], WriteRepository[T, TId]):
    """Full repository contract: read and write operations."""
