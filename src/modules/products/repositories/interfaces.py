"""Product repository interface.

Narrows ``IRepository[T]`` to the Product DTO.  This is the only
boundary between the catalog and the document store.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import List, Optional

from modules.core.repositories.interfaces import IRepository
from modules.products.dtos import ProductDTO


class IProductRepository(IRepository[ProductDTO]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def list(self) -> List[ProductDTO]:
        """Return all products."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[ProductDTO]:
        """Return the product stored at ``id``, or ``None``."""

    @abstractmethod
    def create(self, entity: ProductDTO) -> ProductDTO:
        """Insert ``entity`` and return it with the store-assigned ``id``."""

    @abstractmethod
    def update(self, id: str, entity: ProductDTO) -> Optional[ProductDTO]:
        """Fully replace the product at ``id``.  Never upserts."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Hard-delete the product at ``id``."""
