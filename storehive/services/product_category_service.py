"""Product category management service."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.core.user_context import UserContext
from storehive.models import CatalogueProduct, CatalogueProductCategory
from storehive.schemas import (
    ProductCategory,
    ProductCategoryListItem,
    UpdateProductCategoryRequest,
)
from storehive.services.base_service import SoftDeleteEntityService
from storehive.services.mapping import ProductManagementMapper


class ProductCategoryService(SoftDeleteEntityService[CatalogueProductCategory]):
    """Lists, creates, updates, soft-deletes and purges product categories."""

    entity_type = CatalogueProductCategory
    entity_name = "Product category"

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        mapper: ProductManagementMapper | None = None,
    ) -> None:
        super().__init__(session, user_context)
        self._mapper = mapper or ProductManagementMapper()

    async def get_categories(self, start: int = 0, amount: int = 100) -> list[ProductCategoryListItem]:
        """Return one page of categories ordered by id, with product counts."""
        product_count = (
            select(func.count(CatalogueProduct.id))
            .where(CatalogueProduct.category_id == CatalogueProductCategory.id)
            .correlate(CatalogueProductCategory)
            .scalar_subquery()
        )
        result = await self._session.execute(
            select(CatalogueProductCategory, product_count)
            .order_by(CatalogueProductCategory.id)
            .offset(start)
            .limit(amount)
        )
        return [
            self._mapper.to_category_list_item(category, count)
            for category, count in result.all()
        ]

    async def get_category(self, category_id: int) -> ProductCategory:
        category = await self._get_or_raise(category_id)
        return self._mapper.to_category(category)

    async def create_category(self, request: UpdateProductCategoryRequest) -> ProductCategory:
        await self._ensure_code_is_free(request.code)

        category = CatalogueProductCategory()
        self._mapper.apply_category_request(request, category)
        await self._add(category)
        return self._mapper.to_category(category)

    async def update_category(
        self, category_id: int, request: UpdateProductCategoryRequest
    ) -> ProductCategory:
        category = await self._get_or_raise(category_id)
        await self._ensure_code_is_free(request.code, exclude_id=category_id)

        self._mapper.apply_category_request(request, category)
        await self._save(category)
        return self._mapper.to_category(category)

    async def delete_category(self, category_id: int) -> None:
        await self._purge(category_id)
