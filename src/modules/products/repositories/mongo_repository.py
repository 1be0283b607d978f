"""MongoDB implementation of the Product repository.

Satisfies ``IProductRepository`` on top of a single pymongo ``Collection``.
Absence follows the Null Object pattern: methods return ``None`` / ``False``
instead of raising, and the Service Layer decides how to translate a missing
record into an API response.  Driver failures surface as ``StorageError``
with the driver's message; nothing is retried.

Stored documents keep the catalog's historical layout::

    {"_id": ObjectId, "Name": str, "Price": Decimal128, "Description": str,
     "Category": str, "Stock": int, "ImageUrl": str}
"""

from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

import structlog
from bson import ObjectId
from bson.decimal128 import Decimal128
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from modules.core.exceptions import StorageError
from modules.products.dtos import ProductDTO, is_valid_object_id
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        logger.error("product.storage_error", operation=operation, error=str(exc))
        raise StorageError(str(exc)) from exc


def _decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal128):
        return value.to_decimal()
    # Older writers stored decimals as strings.
    return Decimal(str(value))


def to_document(product: ProductDTO) -> Dict[str, Any]:
    """Map a DTO to its stored form, without ``_id``."""
    return {
        "Name": product.name,
        "Price": Decimal128(product.price) if product.price is not None else None,
        "Description": product.description,
        "Category": product.category,
        "Stock": product.stock,
        "ImageUrl": product.image_url,
    }


def from_document(doc: Dict[str, Any]) -> ProductDTO:
    """Map a stored document back to a DTO.

    Uses ``model_construct`` so records written before a constraint existed
    are still readable.
    """
    return ProductDTO.model_construct(
        id=str(doc["_id"]),
        name=doc.get("Name"),
        price=_decimal(doc.get("Price")),
        description=doc.get("Description"),
        category=doc.get("Category"),
        stock=doc.get("Stock") or 0,
        image_url=doc.get("ImageUrl"),
    )


class ProductMongoRepository(IProductRepository):
    """Concrete Product repository backed by a MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def list(self) -> List[ProductDTO]:
        with _storage_errors("list"):
            return [from_document(doc) for doc in self._collection.find({})]

    def get_by_id(self, id: str) -> Optional[ProductDTO]:
        """Retrieve a product by ``_id``.

        Returns ``None`` for non-existent or malformed identifiers.
        """
        if not is_valid_object_id(id):
            return None
        with _storage_errors("get_by_id"):
            doc = self._collection.find_one({"_id": ObjectId(id)})
        return from_document(doc) if doc is not None else None

    def create(self, entity: ProductDTO) -> ProductDTO:
        with _storage_errors("create"):
            result = self._collection.insert_one(to_document(entity))
        product_id = str(result.inserted_id)
        logger.info("product.inserted", product_id=product_id)
        return entity.model_copy(update={"id": product_id})

    def update(self, id: str, entity: ProductDTO) -> Optional[ProductDTO]:
        """Replace the document at ``id`` in full.

        Returns ``None`` when no document matched; never upserts.
        """
        if not is_valid_object_id(id):
            return None
        with _storage_errors("update"):
            result = self._collection.replace_one(
                {"_id": ObjectId(id)}, to_document(entity), upsert=False
            )
        if result.matched_count == 0:
            return None
        logger.info("product.replaced", product_id=id)
        return entity.model_copy(update={"id": id})

    def delete(self, id: str) -> bool:
        """Hard-delete a product.

        Returns ``True`` if a document was removed, ``False`` otherwise.
        """
        if not is_valid_object_id(id):
            return False
        with _storage_errors("delete"):
            result = self._collection.delete_one({"_id": ObjectId(id)})
        if result.deleted_count == 0:
            return False
        logger.info("product.removed", product_id=id)
        return True
