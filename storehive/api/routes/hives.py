"""Hive endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Response, status

from storehive.api.deps import HiveSectionServiceDep, HiveServiceDep, raise_for_invalid
from storehive.config import settings
from storehive.schemas import Hive, HiveListItem, HiveSectionListItem, UpdateHiveRequest
from storehive.schemas.validation import MAX_ID, validate_hive_request
from storehive.services import RequestedResourceHasConflictError, RequestedResourceNotFoundError

router = APIRouter()

HiveId = Annotated[int, Path(ge=1, le=MAX_ID, description="Hive identifier")]


@router.get("", response_model=list[HiveListItem])
async def get_hives(service: HiveServiceDep) -> list[HiveListItem]:
    """Return a list of hives."""
    return await service.get_hives()


@router.get("/{hive_id}", response_model=Hive)
async def get_hive(hive_id: HiveId, service: HiveServiceDep) -> Hive:
    """Return a hive."""
    try:
        return await service.get_hive(hive_id)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/{hive_id}/sections", response_model=list[HiveSectionListItem])
async def get_hive_sections(
    hive_id: HiveId, service: HiveSectionServiceDep
) -> list[HiveSectionListItem]:
    """Return the sections of a hive."""
    try:
        return await service.get_hive_sections(hive_id)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.put("/{hive_id}/status/{deleted_status}", status_code=status.HTTP_204_NO_CONTENT)
async def set_hive_status(hive_id: HiveId, deleted_status: bool, service: HiveServiceDep) -> None:
    """Set the deleted status of an existing hive."""
    try:
        await service.set_status(hive_id, deleted_status)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.post("", response_model=Hive, status_code=status.HTTP_201_CREATED)
async def add_hive(
    create_request: UpdateHiveRequest, response: Response, service: HiveServiceDep
) -> Hive:
    """Create a new hive."""
    raise_for_invalid(validate_hive_request(create_request))

    try:
        hive = await service.create_hive(create_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)

    response.headers["Location"] = f"{settings.api_prefix}/hives/{hive.id}"
    return hive


@router.put("/{hive_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_hive(
    hive_id: HiveId, update_request: UpdateHiveRequest, service: HiveServiceDep
) -> None:
    """Update an existing hive."""
    raise_for_invalid(validate_hive_request(update_request))

    try:
        await service.update_hive(hive_id, update_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.delete("/{hive_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hive(hive_id: HiveId, service: HiveServiceDep) -> None:
    """Purge a hive that was previously marked deleted."""
    try:
        await service.delete_hive(hive_id)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
