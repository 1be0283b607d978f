"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
entity-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on pymongo directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``ProductDTO``).  Absence is reported through return values
    (``None`` / ``False``), never through exceptions.
    """

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity in store-native order."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by identifier, or ``None`` if absent."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Persist a new entity and return it with its assigned identifier."""

    @abstractmethod
    def update(self, id: str, entity: T) -> Optional[T]:
        """Replace the entity stored at ``id``; ``None`` if nothing matched."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Hard-delete the entity at ``id``; ``True`` if one was removed."""
