"""Domain services for hive and product catalogue management."""

from storehive.services.exceptions import (
    RequestedResourceHasConflictError,
    RequestedResourceNotFoundError,
    StoreHiveServiceError,
)
from storehive.services.hive_section_service import HiveSectionService
from storehive.services.hive_service import HiveService
from storehive.services.mapping import HiveManagementMapper, ProductManagementMapper
from storehive.services.product_catalogue_service import ProductCatalogueService
from storehive.services.product_category_service import ProductCategoryService

__all__ = [
    "HiveManagementMapper",
    "HiveSectionService",
    "HiveService",
    "ProductCatalogueService",
    "ProductCategoryService",
    "ProductManagementMapper",
    "RequestedResourceHasConflictError",
    "RequestedResourceNotFoundError",
    "StoreHiveServiceError",
]
