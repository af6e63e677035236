"""Hive section endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Response, status

from storehive.api.deps import HiveSectionServiceDep, raise_for_invalid
from storehive.config import settings
from storehive.schemas import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest
from storehive.schemas.validation import MAX_ID, validate_hive_section_request
from storehive.services import RequestedResourceHasConflictError, RequestedResourceNotFoundError

router = APIRouter()

SectionId = Annotated[int, Path(ge=1, le=MAX_ID, description="Hive section identifier")]


@router.get("", response_model=list[HiveSectionListItem])
async def get_hive_sections(service: HiveSectionServiceDep) -> list[HiveSectionListItem]:
    """Return a list of all hive sections."""
    return await service.get_hive_sections()


@router.get("/{section_id}", response_model=HiveSection)
async def get_hive_section(section_id: SectionId, service: HiveSectionServiceDep) -> HiveSection:
    try:
        return await service.get_hive_section(section_id)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.put("/{section_id}/status/{deleted_status}", status_code=status.HTTP_204_NO_CONTENT)
async def set_hive_section_status(
    section_id: SectionId, deleted_status: bool, service: HiveSectionServiceDep
) -> None:
    try:
        await service.set_status(section_id, deleted_status)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.post("", response_model=HiveSection, status_code=status.HTTP_201_CREATED)
async def add_hive_section(
    create_request: UpdateHiveSectionRequest,
    response: Response,
    service: HiveSectionServiceDep,
) -> HiveSection:
    """Create a new section in an existing hive."""
    raise_for_invalid(validate_hive_section_request(create_request))

    try:
        section = await service.create_hive_section(create_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    response.headers["Location"] = f"{settings.api_prefix}/sections/{section.id}"
    return section


@router.put("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_hive_section(
    section_id: SectionId,
    update_request: UpdateHiveSectionRequest,
    service: HiveSectionServiceDep,
) -> None:
    raise_for_invalid(validate_hive_section_request(update_request))

    try:
        await service.update_hive_section(section_id, update_request)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hive_section(section_id: SectionId, service: HiveSectionServiceDep) -> None:
    try:
        await service.delete_hive_section(section_id)
    except RequestedResourceHasConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT)
    except RequestedResourceNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
