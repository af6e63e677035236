"""Catalogue product transfer objects."""

from datetime import datetime

from pydantic import Field

from storehive.schemas.common import ApiModel


class ProductListItem(ApiModel):
    """Product as shown in the product list."""

    id: int
    name: str
    code: str
    is_deleted: bool


class ProductCategoryProductListItem(ApiModel):
    """Product as shown in a category's product list."""

    id: int
    name: str
    code: str
    manufacturer_code: str | None = None
    price: float


class Product(ApiModel):
    """Product details."""

    id: int
    name: str
    code: str
    category_id: int
    description: str | None = None
    manufacturer_code: str | None = None
    price: float
    is_deleted: bool
    last_updated: datetime


class UpdateProductRequest(ApiModel):
    """Request for creating and updating a product."""

    name: str
    code: str
    category_id: int
    description: str | None = None
    manufacturer_code: str | None = None
    price: float = Field(default=0.0, allow_inf_nan=False)
