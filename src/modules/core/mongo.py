"""Process-wide MongoDB client.

The client is created once, on first use, and shared by every request.
pymongo pools connections internally and connects lazily, so building
the client never blocks on the server.
"""

from __future__ import annotations

import threading
from typing import Optional

import structlog
from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection

logger = structlog.get_logger(__name__)

_client: Optional[MongoClient] = None
_lock = threading.Lock()


def get_client() -> MongoClient:
    global _client
    if _client is None:
        with _lock:
            if _client is None:
                _client = MongoClient(
                    settings.MONGO_URI,
                    serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
                    connectTimeoutMS=settings.MONGO_TIMEOUT_MS,
                )
                logger.info(
                    "mongo.client_created",
                    uri=settings.MONGO_URI,
                    database=settings.MONGO_DB_NAME,
                )
    return _client


def get_collection(name: str) -> Collection:
    """Return ``name`` from the configured catalog database."""
    return get_client()[settings.MONGO_DB_NAME][name]

