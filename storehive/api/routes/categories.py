"""Product category endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, Response, status

from storehive.api.deps import (
    ProductCatalogueServiceDep,
    ProductCategoryServiceDep,
    raise_for_invalid,
)
from storehive.config import settings
from storehive.schemas import (
    ProductCategory,
    ProductCategoryListItem,
    ProductCategoryProductListItem,
    UpdateProductCategoryRequest,
)
from storehive.schemas.validation import MAX_ID, validate_product_category_request
from storehive.services import RequestedResourceHasConflictError, RequestedResourceNotFoundError

router = APIRouter()

CategoryId = Annotated[int, Path(ge=1, le=MAX_ID, description="Product category identifier")]


@router.get("", response_model=list[ProductCategoryListItem])
async def get_product_categories(
    service: ProductCategoryServiceDep,
    start: Annotated[int, Query(ge=0, le=MAX_ID)] = 0,
    amount: Annotated[int, Query(ge=0, le=MAX_ID)] = 100,
) -> list[ProductCategoryListItem]:
    """Return one page of product categories."""
    return await service.get_categories(start, amount)


@router.get("/{category_id}", response_model=ProductCategory)
async def get_product_category(
    category_id: CategoryId, service: ProductCategoryServiceDep
) -> ProductCategory:
    try:
        return await service.get_category(category_id)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/{category_id}/products", response_model=list[ProductCategoryProductListItem])
async def get_category_products(
    category_id: CategoryId, service: ProductCatalogueServiceDep
) -> list[ProductCategoryProductListItem]:
    """Return the products of a category."""
    try:
        return await service.get_category_products(category_id)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.post("", response_model=ProductCategory, status_code=status.HTTP_201_CREATED)
async def add_product_category(
    create_request: UpdateProductCategoryRequest,
    response: Response,
    service: ProductCategoryServiceDep,
) -> ProductCategory:
    raise_for_invalid(validate_product_category_request(create_request))

    try:
        category = await service.create_category(create_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)

    response.headers["Location"] = f"{settings.api_prefix}/categories/{category.id}"
    return category


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product_category(
    category_id: CategoryId,
    update_request: UpdateProductCategoryRequest,
    service: ProductCategoryServiceDep,
) -> None:
    raise_for_invalid(validate_product_category_request(update_request))

    try:
        await service.update_category(category_id, update_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product_category(category_id: CategoryId, service: ProductCategoryServiceDep) -> None:
    try:
        await service.delete_category(category_id)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.put("/{category_id}/status/{deleted_status}", status_code=status.HTTP_204_NO_CONTENT)
async def set_product_category_status(
    category_id: CategoryId, deleted_status: bool, service: ProductCategoryServiceDep
) -> None:
    try:
        await service.set_status(category_id, deleted_status)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
