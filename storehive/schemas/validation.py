"""Explicit validators for create/update request bodies.

Each validator inspects an already-parsed request and returns a
ValidationResult. Routers call them before touching a service and turn an
invalid result into a 400 response.

Text limits are the widths of the columns the values are stored in.
"""

from dataclasses import dataclass, field

from storehive.schemas.hive import UpdateHiveRequest
from storehive.schemas.hive_section import UpdateHiveSectionRequest
from storehive.schemas.product import UpdateProductRequest
from storehive.schemas.product_category import UpdateProductCategoryRequest

NAME_MAX_LENGTH = 60
CODE_MAX_LENGTH = 5
ADDRESS_MAX_LENGTH = 300
DESCRIPTION_MAX_LENGTH = 300
MANUFACTURER_CODE_MAX_LENGTH = 10

# Identifiers are 32-bit signed integers in the database.
MAX_ID = 2_147_483_647

# Numeric(18, 2) leaves 16 digits before the decimal point.
PRICE_LIMIT = 10**16


@dataclass(frozen=True)
class FieldError:
    """A single rule violation."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating one request."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, message=message))

    def to_detail(self) -> list[dict[str, str]]:
        """Errors in the shape returned to API clients."""
        return [{"field": e.field, "message": e.message} for e in self.errors]


def _check_text(
    result: ValidationResult,
    field_name: str,
    value: str | None,
    max_length: int,
    required: bool = True,
) -> None:
    if not value:
        if required:
            result.add(field_name, "must not be empty")
    elif len(value) > max_length:
        result.add(field_name, f"must be at most {max_length} characters long")


def _check_reference(result: ValidationResult, field_name: str, value: int) -> None:
    if value < 1:
        result.add(field_name, "must be greater than zero")
    elif value > MAX_ID:
        result.add(field_name, f"must not exceed {MAX_ID}")


def validate_hive_request(request: UpdateHiveRequest) -> ValidationResult:
    result = ValidationResult()
    _check_text(result, "name", request.name, NAME_MAX_LENGTH)
    _check_text(result, "code", request.code, CODE_MAX_LENGTH)
    _check_text(result, "address", request.address, ADDRESS_MAX_LENGTH)
    return result


def validate_hive_section_request(request: UpdateHiveSectionRequest) -> ValidationResult:
    result = ValidationResult()
    _check_text(result, "name", request.name, NAME_MAX_LENGTH)
    _check_text(result, "code", request.code, CODE_MAX_LENGTH)
    _check_reference(result, "hiveId", request.hive_id)
    return result


def validate_product_category_request(request: UpdateProductCategoryRequest) -> ValidationResult:
    result = ValidationResult()
    _check_text(result, "name", request.name, NAME_MAX_LENGTH)
    _check_text(result, "code", request.code, CODE_MAX_LENGTH)
    _check_text(
        result, "description", request.description, DESCRIPTION_MAX_LENGTH, required=False
    )
    return result


def validate_product_request(request: UpdateProductRequest) -> ValidationResult:
    result = ValidationResult()
    _check_text(result, "name", request.name, NAME_MAX_LENGTH)
    _check_text(result, "code", request.code, CODE_MAX_LENGTH)
    _check_reference(result, "categoryId", request.category_id)
    _check_text(
        result, "description", request.description, DESCRIPTION_MAX_LENGTH, required=False
    )
    _check_text(
        result,
        "manufacturerCode",
        request.manufacturer_code,
        MANUFACTURER_CODE_MAX_LENGTH,
        required=False,
    )
    if request.price < 0:
        result.add("price", "must not be negative")
    elif request.price >= PRICE_LIMIT:
        result.add("price", f"must be less than {PRICE_LIMIT}")
    return result
