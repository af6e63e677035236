"""Product catalogue service."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.core.user_context import UserContext
from storehive.models import CatalogueProduct, CatalogueProductCategory
from storehive.schemas import (
    Product,
    ProductCategoryProductListItem,
    ProductListItem,
    UpdateProductRequest,
)
from storehive.services.base_service import SoftDeleteEntityService
from storehive.services.mapping import ProductManagementMapper


class ProductCatalogueService(SoftDeleteEntityService[CatalogueProduct]):
    """Manages catalogue products and their category membership."""

    entity_type = CatalogueProduct
    entity_name = "Product"

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        mapper: ProductManagementMapper | None = None,
    ) -> None:
        super().__init__(session, user_context)
        self._mapper = mapper or ProductManagementMapper()

    async def get_products(self, start: int = 0, amount: int = 100) -> list[ProductListItem]:
        query = select(CatalogueProduct).order_by(CatalogueProduct.id).offset(start).limit(amount)
        products = (await self._session.execute(query)).scalars().all()
        return [self._mapper.to_product_list_item(p) for p in products]

    async def get_category_products(self, category_id: int) -> list[ProductCategoryProductListItem]:
        """Return the products of one category.

        Raises:
            RequestedResourceNotFoundError: If the category does not exist
        """
        await self._ensure_exists(CatalogueProductCategory, category_id, "Product category")

        query = (
            select(CatalogueProduct)
            .where(CatalogueProduct.category_id == category_id)
            .order_by(CatalogueProduct.id)
        )
        products = (await self._session.execute(query)).scalars().all()
        return [self._mapper.to_category_product_list_item(p) for p in products]

    async def get_product(self, product_id: int) -> Product:
        product = await self._get_or_raise(product_id)
        return self._mapper.to_product(product)

    async def create_product(self, request: UpdateProductRequest) -> Product:
        await self._ensure_code_is_free(request.code)
        await self._ensure_exists(CatalogueProductCategory, request.category_id, "Product category")

        product = CatalogueProduct()
        self._mapper.apply_product_request(request, product)
        await self._add(product)
        return self._mapper.to_product(product)

    async def update_product(self, product_id: int, request: UpdateProductRequest) -> Product:
        product = await self._get_or_raise(product_id)
        await self._ensure_code_is_free(request.code, exclude_id=product_id)
        await self._ensure_exists(CatalogueProductCategory, request.category_id, "Product category")

        self._mapper.apply_product_request(request, product)
        await self._save(product)
        return self._mapper.to_product(product)

    async def delete_product(self, product_id: int) -> None:
        await self._purge(product_id)
