"""Hive management service."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.core.user_context import UserContext
from storehive.models import StoreHive, StoreHiveSection
from storehive.schemas import Hive, HiveListItem, UpdateHiveRequest
from storehive.services.base_service import SoftDeleteEntityService
from storehive.services.mapping import HiveManagementMapper


class HiveService(SoftDeleteEntityService[StoreHive]):
    """Lists, creates, updates, soft-deletes and purges hives."""

    entity_type = StoreHive
    entity_name = "Hive"

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        mapper: HiveManagementMapper | None = None,
    ) -> None:
        super().__init__(session, user_context)
        self._mapper = mapper or HiveManagementMapper()

    async def get_hives(self) -> list[HiveListItem]:
        """Return every hive, deleted ones included, with its section count."""
        section_count = (
            select(func.count(StoreHiveSection.id))
            .where(StoreHiveSection.store_hive_id == StoreHive.id)
            .correlate(StoreHive)
            .scalar_subquery()
        )
        result = await self._session.execute(
            select(StoreHive, section_count).order_by(StoreHive.id)
        )
        return [self._mapper.to_hive_list_item(hive, count) for hive, count in result.all()]

    async def get_hive(self, hive_id: int) -> Hive:
        hive = await self._get_or_raise(hive_id)
        return self._mapper.to_hive(hive)

    async def create_hive(self, request: UpdateHiveRequest) -> Hive:
        await self._ensure_code_is_free(request.code)

        hive = StoreHive()
        self._mapper.apply_hive_request(request, hive)
        await self._add(hive)
        return self._mapper.to_hive(hive)

    async def update_hive(self, hive_id: int, request: UpdateHiveRequest) -> Hive:
        hive = await self._get_or_raise(hive_id)
        await self._ensure_code_is_free(request.code, exclude_id=hive_id)

        self._mapper.apply_hive_request(request, hive)
        await self._save(hive)
        return self._mapper.to_hive(hive)

    async def delete_hive(self, hive_id: int) -> None:
        """Purge a soft-deleted hive. Its sections are left untouched."""
        await self._purge(hive_id)
