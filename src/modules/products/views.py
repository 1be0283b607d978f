"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet mounted at
``/api/product``.  Identifier format and request bodies are checked before
any storage call; domain exceptions are translated into 404s.  Any other
failure, storage errors included, becomes a 500 whose ``details`` carries
the original error text.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.apps import apps
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.products.dtos import is_valid_object_id, validate_product
from modules.products.exceptions import ProductNotFound
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

INVALID_ID_MESSAGE = "Invalid product ID format"


def _message(text: str, status_code: int) -> Response:
    return Response({"message": text}, status=status_code)


def _not_found(exc: ProductNotFound) -> Response:
    return _message(str(exc), status.HTTP_404_NOT_FOUND)


def _server_error(message: str, exc: Exception) -> Response:
    # Internal error text is returned to the client on purpose.
    logger.exception("product.request_failed", error=str(exc))
    return Response(
        {"message": message, "details": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _has_body(request: Request) -> bool:
    # An empty raw body also parses to {}; only a sent JSON object counts.
    if not isinstance(request.data, dict):
        return False
    try:
        return int(request.META.get("CONTENT_LENGTH") or 0) > 0
    except (ValueError, TypeError):
        return False


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the process-wide repository held by the
    ``products`` app config (DIP).  The lookup pattern accepts an empty
    segment so ``/api/product/`` is answered with a 400, not a routing 404.
    """

    lookup_value_regex = "[^/]*"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        repository = apps.get_app_config("products").repository
        self._service = ProductService(repository=repository)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/product"""
        try:
            products = self._service.list_products()
            return Response([product.to_response() for product in products])
        except APIException:
            raise
        except Exception as exc:
            return _server_error("Error retrieving products", exc)

    def retrieve(self, request: Request, pk: Optional[str] = None) -> Response:
        """GET /api/product/{pk}"""
        try:
            if not is_valid_object_id(pk):
                return _message(INVALID_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)
            product = self._service.get_product(pk)
            return Response(product.to_response())
        except ProductNotFound as exc:
            return _not_found(exc)
        except APIException:
            raise
        except Exception as exc:
            return _server_error(f"Error retrieving product {pk}", exc)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/product"""
        try:
            if not _has_body(request):
                return _message("Product data is required", status.HTTP_400_BAD_REQUEST)

            result = validate_product(request.data)
            if not result.valid:
                return Response(
                    {"message": "Validation failed", "errors": result.as_dict()},
                    status=status.HTTP_400_BAD_REQUEST,
                )

            product = self._service.create_product(result.product)
            location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
            return Response(
                product.to_response(),
                status=status.HTTP_201_CREATED,
                headers={"Location": location},
            )
        except APIException:
            raise
        except Exception as exc:
            return _server_error("Error creating product", exc)

    def update(self, request: Request, pk: Optional[str] = None) -> Response:
        """PUT /api/product/{pk}"""
        try:
            if not _has_body(request) or _is_blank(pk):
                return _message(
                    "Product data and ID are required", status.HTTP_400_BAD_REQUEST
                )
            if not is_valid_object_id(pk):
                return _message(INVALID_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)

            result = validate_product(request.data)
            if not result.valid:
                return Response(
                    {"message": "Validation failed", "errors": result.as_dict()},
                    status=status.HTTP_400_BAD_REQUEST,
                )

            product = self._service.update_product(pk, result.product)
            return Response(product.to_response())
        except ProductNotFound as exc:
            return _not_found(exc)
        except APIException:
            raise
        except Exception as exc:
            return _server_error(f"Error updating product {pk}", exc)

    def destroy(self, request: Request, pk: Optional[str] = None) -> Response:
        """DELETE /api/product/{pk}"""
        try:
            if _is_blank(pk):
                return _message("Product ID is required", status.HTTP_400_BAD_REQUEST)
            if not is_valid_object_id(pk):
                return _message(INVALID_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)

            self._service.delete_product(pk)
            return Response(status=status.HTTP_204_NO_CONTENT)
        except ProductNotFound as exc:
            return _not_found(exc)
        except APIException:
            raise
        except Exception as exc:
            return _server_error(f"Error deleting product {pk}", exc)
