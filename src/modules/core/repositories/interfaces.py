"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that the item and
order repository interfaces extend.  Service-layer code depends on this
abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Item``, ``Order``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` if absent."""

    @abstractmethod
    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """List entities matching ``filters``.

        ``ordering`` uses Django syntax (``"-price"`` for descending);
        ``limit`` caps the number of rows returned.
        """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> T:
        """Persist a new entity and return it with its assigned id."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID; ``False`` when nothing was deleted."""
