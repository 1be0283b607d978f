"""Product domain exceptions.

Raised by the Service Layer when a requested record is absent.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No product is stored under the requested identifier."""
