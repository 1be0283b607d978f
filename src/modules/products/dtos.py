"""Product DTOs and validation.

Framework-agnostic data transfer objects using Pydantic v2.
``ProductDTO`` is the single Product shape shared by the API layer,
the service layer and the repository.  It is immutable (``frozen=True``)
and validates every field constraint on construction.

- ``ProductDTO``: the Product entity (``id`` is ``None`` until stored).
- ``validate_product``: turns a raw request payload into either a
  ``ProductDTO`` or a list of ``FieldError`` entries.
- ``is_valid_object_id``: identifier-format check for path parameters.
"""

from __future__ import annotations

from decimal import Decimal, DecimalException
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId
from bson.decimal128 import Decimal128
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
CATEGORY_MAX_LENGTH = 50
STOCK_MAX = 2**31 - 1

_url_validator = URLValidator(schemes=["http", "https", "ftp"])


def is_valid_object_id(value: Optional[str]) -> bool:
    """Return ``True`` for a 24-character hexadecimal identifier."""
    return isinstance(value, str) and ObjectId.is_valid(value)


def _field_error(message: str) -> PydanticCustomError:
    return PydanticCustomError("product_field", message)


def _required_text(value: Optional[str], label: str, max_length: int) -> str:
    if value is None or not value.strip():
        raise _field_error(f"{label} is required")
    if len(value) > max_length:
        raise _field_error(f"{label} cannot exceed {max_length} characters")
    return value


# ---------------------------------------------------------------------------
# Entity DTO
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable Product record.

    Validates:
    - ``name`` is non-blank and at most 100 characters.
    - ``price`` is present, greater than zero and fits a Decimal128.
    - ``description`` is at most 500 characters.
    - ``category`` is non-blank and at most 50 characters.
    - ``stock`` is between 0 and ``STOCK_MAX``.
    - ``image_url``, when non-empty, is an http/https/ftp URL.

    Serialises with camelCase keys (``imageUrl``), matching the API.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    id: Optional[str] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    category: Optional[str] = None
    stock: int = 0
    image_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_is_required(cls, v: Optional[str]) -> str:
        return _required_text(v, "Product name", NAME_MAX_LENGTH)

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float(cls, v: Any) -> Any:
        # JSON numbers arrive as floats; go through str to keep 9.99 exact.
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Optional[Decimal]) -> Decimal:
        if v is None:
            raise _field_error("Price is required")
        if v <= 0:
            raise _field_error("Price must be greater than 0")
        try:
            Decimal128(v)
        except DecimalException:
            raise _field_error("Price has too many digits to be stored") from None
        return v

    @field_validator("description")
    @classmethod
    def description_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
            raise _field_error(
                f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
            )
        return v

    @field_validator("category")
    @classmethod
    def category_is_required(cls, v: Optional[str]) -> str:
        return _required_text(v, "Category", CATEGORY_MAX_LENGTH)

    @field_validator("stock")
    @classmethod
    def stock_in_range(cls, v: int) -> int:
        if v < 0:
            raise _field_error("Stock cannot be negative")
        if v > STOCK_MAX:
            raise _field_error(f"Stock cannot exceed {STOCK_MAX}")
        return v

    @field_validator("image_url")
    @classmethod
    def image_url_must_be_well_formed(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        try:
            _url_validator(v)
        except DjangoValidationError:
            raise _field_error("Invalid image URL") from None
        return v

    # ------------------------------------------------------------------
    # Construction / serialisation
    # ------------------------------------------------------------------

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ProductDTO:
        """Build a DTO from a request body, matching keys case-insensitively.

        ``Name``, ``name`` and ``NAME`` all map to ``name``; ``ImageUrl``,
        ``imageUrl`` and ``image_url`` all map to ``image_url``.  Unknown
        keys are dropped.

        Raises:
            pydantic.ValidationError: if any field constraint fails.
        """
        return cls.model_validate(_normalise_keys(data))

    def to_response(self) -> Dict[str, Any]:
        """Return the camelCase representation used in HTTP bodies."""
        return self.model_dump(by_alias=True)


_KEY_LOOKUP = {
    name.replace("_", "").lower(): name for name in ProductDTO.model_fields
}
_API_NAMES = {
    name: field.alias or name for name, field in ProductDTO.model_fields.items()
}


def _normalise_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    normalised: Dict[str, Any] = {}
    for key, value in data.items():
        field = _KEY_LOOKUP.get(str(key).replace("_", "").lower())
        if field is not None:
            normalised[field] = value
    return normalised


# ---------------------------------------------------------------------------
# Validation result
# ---------------------------------------------------------------------------


class FieldError(BaseModel):
    """A single failed constraint on one field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationResult(BaseModel):
    """Outcome of ``validate_product``: a product or its field errors."""

    model_config = ConfigDict(frozen=True)

    product: Optional[ProductDTO] = None
    errors: List[FieldError] = []

    @property
    def valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, List[str]]:
        """Group error messages by field, e.g. ``{"price": ["..."]}``."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


def validate_product(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw Product payload without touching storage.

    Every failing field is reported, keyed by its API (camelCase) name.
    """
    try:
        product = ProductDTO.from_payload(data)
    except ValidationError as exc:
        errors = [
            FieldError(
                field=".".join(
                    _API_NAMES.get(str(part), str(part)) for part in err["loc"]
                )
                or "product",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return ValidationResult(errors=errors)
    return ValidationResult(product=product)
