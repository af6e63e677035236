"""SQLAlchemy models for the hive and product catalogue stores."""

from storehive.models.base import AuditMixin, Base, SoftDeleteMixin
from storehive.models.hive import StoreHive
from storehive.models.hive_section import StoreHiveSection
from storehive.models.product import CatalogueProduct
from storehive.models.product_category import CatalogueProductCategory

__all__ = [
    "AuditMixin",
    "Base",
    "SoftDeleteMixin",
    "CatalogueProduct",
    "CatalogueProductCategory",
    "StoreHive",
    "StoreHiveSection",
]
