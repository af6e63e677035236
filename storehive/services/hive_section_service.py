"""Hive section management service."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.core.user_context import UserContext
from storehive.models import StoreHive, StoreHiveSection
from storehive.schemas import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest
from storehive.services.base_service import SoftDeleteEntityService
from storehive.services.mapping import HiveManagementMapper


class HiveSectionService(SoftDeleteEntityService[StoreHiveSection]):
    """Manages sections and enforces that each points at an existing hive."""

    entity_type = StoreHiveSection
    entity_name = "Hive section"

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        mapper: HiveManagementMapper | None = None,
    ) -> None:
        super().__init__(session, user_context)
        self._mapper = mapper or HiveManagementMapper()

    async def get_hive_sections(self, hive_id: int | None = None) -> list[HiveSectionListItem]:
        """Return all sections, or only those of ``hive_id``.

        Raises:
            RequestedResourceNotFoundError: If ``hive_id`` is given and unknown
        """
        query = select(StoreHiveSection).order_by(StoreHiveSection.id)
        if hive_id is not None:
            await self._ensure_exists(StoreHive, hive_id, "Hive")
            query = query.where(StoreHiveSection.store_hive_id == hive_id)

        sections = (await self._session.execute(query)).scalars().all()
        return [self._mapper.to_hive_section_list_item(s) for s in sections]

    async def get_hive_section(self, section_id: int) -> HiveSection:
        section = await self._get_or_raise(section_id)
        return self._mapper.to_hive_section(section)

    async def create_hive_section(self, request: UpdateHiveSectionRequest) -> HiveSection:
        await self._ensure_code_is_free(request.code)
        await self._ensure_exists(StoreHive, request.hive_id, "Hive")

        section = StoreHiveSection()
        self._mapper.apply_hive_section_request(request, section)
        await self._add(section)
        return self._mapper.to_hive_section(section)

    async def update_hive_section(
        self, section_id: int, request: UpdateHiveSectionRequest
    ) -> HiveSection:
        section = await self._get_or_raise(section_id)
        await self._ensure_code_is_free(request.code, exclude_id=section_id)
        await self._ensure_exists(StoreHive, request.hive_id, "Hive")

        self._mapper.apply_hive_section_request(request, section)
        await self._save(section)
        return self._mapper.to_hive_section(section)

    async def delete_hive_section(self, section_id: int) -> None:
        await self._purge(section_id)
