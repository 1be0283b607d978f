"""Cross-module exceptions and the DRF exception handler.

``StorageError`` is raised by repositories when the document store is
unreachable or rejects an operation.  Views turn it (like any other
unexpected failure) into a 500 response carrying the original message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class StorageError(Exception):
    """The underlying document store failed or could not be reached."""


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Render DRF errors with the ``{"message": ...}`` body used across the API.

    Only ``APIException`` subclasses (parse errors, unsupported media type,
    method not allowed, ...) reach this handler; anything else is left to
    DRF, which re-raises it.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        body: Dict[str, Any] = {"message": str(data["detail"])}
    else:
        body = {"message": "Request could not be processed", "errors": data}

    logger.warning(
        "api_error",
        status_code=response.status_code,
        error=body["message"],
    )
    response.data = body
    return response
