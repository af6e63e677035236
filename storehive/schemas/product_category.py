"""Product category transfer objects."""

from datetime import datetime

from pydantic import Field

from storehive.schemas.common import ApiModel


class ProductCategoryListItem(ApiModel):
    """Product category as shown in the category list."""

    id: int
    name: str
    code: str
    is_deleted: bool
    product_count: int = Field(default=0, description="Number of products in the category")


class ProductCategory(ApiModel):
    """Product category details."""

    id: int
    name: str
    code: str
    description: str | None = None
    is_deleted: bool
    last_updated: datetime


class UpdateProductCategoryRequest(ApiModel):
    """Request for creating and updating a product category."""

    name: str
    code: str
    description: str | None = None
