"""Entity <-> transfer object mappers.

Mappers are plain objects handed to each service at construction time,
so tests and callers can substitute their own.
"""

from decimal import Decimal

from storehive.models import (
    CatalogueProduct,
    CatalogueProductCategory,
    StoreHive,
    StoreHiveSection,
)
from storehive.schemas import (
    Hive,
    HiveListItem,
    HiveSection,
    HiveSectionListItem,
    Product,
    ProductCategory,
    ProductCategoryListItem,
    ProductCategoryProductListItem,
    ProductListItem,
    UpdateHiveRequest,
    UpdateHiveSectionRequest,
    UpdateProductCategoryRequest,
    UpdateProductRequest,
)


class HiveManagementMapper:
    """Maps hives and hive sections."""

    def to_hive_list_item(self, hive: StoreHive, section_count: int = 0) -> HiveListItem:
        return HiveListItem(
            id=hive.id,
            name=hive.name,
            code=hive.code,
            is_deleted=hive.is_deleted,
            hive_section_count=section_count,
        )

    def to_hive(self, hive: StoreHive) -> Hive:
        return Hive(
            id=hive.id,
            name=hive.name,
            code=hive.code,
            address=hive.address,
            is_deleted=hive.is_deleted,
            last_updated=hive.last_updated,
        )

    def to_hive_section_list_item(self, section: StoreHiveSection) -> HiveSectionListItem:
        return HiveSectionListItem(
            id=section.id,
            name=section.name,
            code=section.code,
            is_deleted=section.is_deleted,
        )

    def to_hive_section(self, section: StoreHiveSection) -> HiveSection:
        # The column is store_hive_id, the DTO field is hive_id.
        return HiveSection(
            id=section.id,
            name=section.name,
            code=section.code,
            hive_id=section.store_hive_id,
            is_deleted=section.is_deleted,
            last_updated=section.last_updated,
        )

    def apply_hive_request(self, request: UpdateHiveRequest, hive: StoreHive) -> None:
        hive.name = request.name
        hive.code = request.code
        hive.address = request.address

    def apply_hive_section_request(
        self, request: UpdateHiveSectionRequest, section: StoreHiveSection
    ) -> None:
        section.name = request.name
        section.code = request.code
        section.store_hive_id = request.hive_id


class ProductManagementMapper:
    """Maps product categories and catalogue products."""

    def to_category_list_item(
        self, category: CatalogueProductCategory, product_count: int = 0
    ) -> ProductCategoryListItem:
        return ProductCategoryListItem(
            id=category.id,
            name=category.name,
            code=category.code,
            is_deleted=category.is_deleted,
            product_count=product_count,
        )

    def to_category(self, category: CatalogueProductCategory) -> ProductCategory:
        return ProductCategory(
            id=category.id,
            name=category.name,
            code=category.code,
            description=category.description,
            is_deleted=category.is_deleted,
            last_updated=category.last_updated,
        )

    def to_product_list_item(self, product: CatalogueProduct) -> ProductListItem:
        return ProductListItem(
            id=product.id,
            name=product.name,
            code=product.code,
            is_deleted=product.is_deleted,
        )

    def to_category_product_list_item(
        self, product: CatalogueProduct
    ) -> ProductCategoryProductListItem:
        return ProductCategoryProductListItem(
            id=product.id,
            name=product.name,
            code=product.code,
            manufacturer_code=product.manufacturer_code,
            price=float(product.price),
        )

    def to_product(self, product: CatalogueProduct) -> Product:
        return Product(
            id=product.id,
            name=product.name,
            code=product.code,
            category_id=product.category_id,
            description=product.description,
            manufacturer_code=product.manufacturer_code,
            price=float(product.price),
            is_deleted=product.is_deleted,
            last_updated=product.last_updated,
        )

    def apply_category_request(
        self, request: UpdateProductCategoryRequest, category: CatalogueProductCategory
    ) -> None:
        category.name = request.name
        category.code = request.code
        category.description = request.description

    def apply_product_request(self, request: UpdateProductRequest, product: CatalogueProduct) -> None:
        product.name = request.name
        product.code = request.code
        product.category_id = request.category_id
        product.description = request.description
        product.manufacturer_code = request.manufacturer_code
        product.price = Decimal(str(request.price))
