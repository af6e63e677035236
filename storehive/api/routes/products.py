"""Catalogue product endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, Response, status

from storehive.api.deps import ProductCatalogueServiceDep, raise_for_invalid
from storehive.config import settings
from storehive.schemas import Product, ProductListItem, UpdateProductRequest
from storehive.schemas.validation import MAX_ID, validate_product_request
from storehive.services import RequestedResourceHasConflictError, RequestedResourceNotFoundError

router = APIRouter()

ProductId = Annotated[int, Path(ge=1, le=MAX_ID, description="Product identifier")]


@router.get("", response_model=list[ProductListItem])
async def get_products(
    service: ProductCatalogueServiceDep,
    start: Annotated[int, Query(ge=0, le=MAX_ID)] = 0,
    amount: Annotated[int, Query(ge=0, le=MAX_ID)] = 100,
) -> list[ProductListItem]:
    """Return one page of products."""
    return await service.get_products(start, amount)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: ProductId, service: ProductCatalogueServiceDep) -> Product:
    try:
        return await service.get_product(product_id)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def add_product(
    create_request: UpdateProductRequest,
    response: Response,
    service: ProductCatalogueServiceDep,
) -> Product:
    """Create a new product in an existing category."""
    raise_for_invalid(validate_product_request(create_request))

    try:
        product = await service.create_product(create_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    response.headers["Location"] = f"{settings.api_prefix}/products/{product.id}"
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: ProductId,
    update_request: UpdateProductRequest,
    service: ProductCatalogueServiceDep,
) -> None:
    raise_for_invalid(validate_product_request(update_request))

    try:
        await service.update_product(product_id, update_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: ProductId, service: ProductCatalogueServiceDep) -> None:
    try:
        await service.delete_product(product_id)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.put("/{product_id}/status/{deleted_status}", status_code=status.HTTP_204_NO_CONTENT)
async def set_product_status(
    product_id: ProductId, deleted_status: bool, service: ProductCatalogueServiceDep
) -> None:
    try:
        await service.set_status(product_id, deleted_status)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
