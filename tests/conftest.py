from __future__ import annotations

from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from django.apps import apps
from rest_framework.test import APIClient

from modules.products.dtos import ProductDTO
from modules.products.repositories.interfaces import IProductRepository


class InMemoryProductRepository(IProductRepository):
    """Dict-backed repository with the same absence semantics as Mongo."""

    def __init__(self) -> None:
        self.records: Dict[str, ProductDTO] = {}

    def list(self) -> List[ProductDTO]:
        return list(self.records.values())

    def get_by_id(self, id: str) -> Optional[ProductDTO]:
        return self.records.get(id)

    def create(self, entity: ProductDTO) -> ProductDTO:
        product = entity.model_copy(update={"id": str(ObjectId())})
        self.records[product.id] = product
        return product

    def update(self, id: str, entity: ProductDTO) -> Optional[ProductDTO]:
        if id not in self.records:
            return None
        product = entity.model_copy(update={"id": id})
        self.records[id] = product
        return product

    def delete(self, id: str) -> bool:
        return self.records.pop(id, None) is not None


@pytest.fixture()
def product_repository(monkeypatch):
    """Swap the process-wide Mongo repository for an in-memory one."""
    repository = InMemoryProductRepository()
    monkeypatch.setattr(apps.get_app_config("products"), "repository", repository)
    return repository


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
