"""Pydantic schemas for request/response validation."""

from storehive.schemas.common import ApiModel, ErrorResponse, HealthResponse
from storehive.schemas.hive import Hive, HiveListItem, UpdateHiveRequest
from storehive.schemas.hive_section import (
    HiveSection,
    HiveSectionListItem,
    UpdateHiveSectionRequest,
)
from storehive.schemas.product import (
    Product,
    ProductCategoryProductListItem,
    ProductListItem,
    UpdateProductRequest,
)
from storehive.schemas.product_category import (
    ProductCategory,
    ProductCategoryListItem,
    UpdateProductCategoryRequest,
)
from storehive.schemas.validation import (
    FieldError,
    ValidationResult,
    validate_hive_request,
    validate_hive_section_request,
    validate_product_category_request,
    validate_product_request,
)

__all__ = [
    "ApiModel",
    "ErrorResponse",
    "HealthResponse",
    "Hive",
    "HiveListItem",
    "UpdateHiveRequest",
    "HiveSection",
    "HiveSectionListItem",
    "UpdateHiveSectionRequest",
    "Product",
    "ProductCategoryProductListItem",
    "ProductListItem",
    "UpdateProductRequest",
    "ProductCategory",
    "ProductCategoryListItem",
    "UpdateProductCategoryRequest",
    "FieldError",
    "ValidationResult",
    "validate_hive_request",
    "validate_hive_section_request",
    "validate_product_category_request",
    "validate_product_request",
]
