"""Product service layer (Use Cases).

Orchestrates the Product CRUD use-cases, delegating persistence to the
injected ``IProductRepository``.  DTOs arrive already validated, so the
service only translates repository absence (``None`` / ``False``) into
``ProductNotFound``.  ``StorageError`` from the repository propagates
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductDTO) -> ProductDTO:
        """Store a new product; the repository assigns its ``id``."""
        product = self._repo.create(dto.model_copy(update={"id": None}))
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    def update_product(self, id: str, dto: ProductDTO) -> ProductDTO:
        """Replace every field of an existing product except its ``id``.

        Raises:
            ProductNotFound: if no product is stored at ``id``.
        """
        product = self._repo.update(id, dto.model_copy(update={"id": id}))
        if product is None:
            raise ProductNotFound(f"Product with ID {id} not found")
        logger.info("product.updated", product_id=id)
        return product

    def delete_product(self, id: str) -> None:
        """Hard-delete a product.

        Raises:
            ProductNotFound: if no product is stored at ``id``.
        """
        if not self._repo.delete(id):
            raise ProductNotFound(f"Product with ID {id} not found")
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductDTO]:
        return self._repo.list()

    def get_product(self, id: str) -> ProductDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(f"Product with ID {id} not found")
        logger.info("product.retrieved", product_id=id)
        return product
