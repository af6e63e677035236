"""Shared create/update/status/purge protocol for soft-deletable entities.

Every management service follows the same rules:
- codes are unique across all rows of a type, deleted rows included
- a row may only be purged after it has been soft-deleted
- audit columns are stamped with the acting user on every write
"""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.core.user_context import UserContext
from storehive.infra.logging import get_logger
from storehive.models import AuditMixin, Base, SoftDeleteMixin
from storehive.services.exceptions import (
    RequestedResourceHasConflictError,
    RequestedResourceNotFoundError,
)

logger = get_logger(__name__)

EntityT = TypeVar("EntityT", bound=Base)


class SoftDeleteEntityService(Generic[EntityT]):
    """Base class for services managing one soft-deletable entity type.

    Subclasses set ``entity_type`` and ``entity_name`` and build their public
    operations from the protected helpers below.
    """

    entity_type: type[EntityT]
    entity_name: str = "entity"

    def __init__(self, session: AsyncSession, user_context: UserContext) -> None:
        if session is None:
            raise ValueError("session must not be None")
        if user_context is None:
            raise ValueError("user_context must not be None")
        self._session = session
        self._user_context = user_context

    async def _find(self, entity_id: int) -> EntityT | None:
        return await self._session.get(self.entity_type, entity_id)

    async def _get_or_raise(self, entity_id: int) -> EntityT:
        entity = await self._find(entity_id)
        if entity is None:
            logger.info(f"{self.entity_name} not found", entity_id=entity_id)
            raise RequestedResourceNotFoundError(
                f"{self.entity_name} with id {entity_id} does not exist"
            )
        return entity

    async def _ensure_code_is_free(self, code: str, exclude_id: int | None = None) -> None:
        """Raise a conflict if any other row of this type already uses ``code``."""
        query = select(self.entity_type.id).where(self.entity_type.code == code)
        if exclude_id is not None:
            query = query.where(self.entity_type.id != exclude_id)

        existing = (await self._session.execute(query.limit(1))).scalar_one_or_none()
        if existing is not None:
            logger.info(
                f"{self.entity_name} code conflict",
                code=code,
                conflicting_id=existing,
            )
            raise RequestedResourceHasConflictError(
                f"{self.entity_name} code '{code}' is already in use"
            )

    async def _ensure_exists(self, model: type[Base], entity_id: int, name: str) -> None:
        """Raise NotFound if the referenced parent row is missing."""
        if await self._session.get(model, entity_id) is None:
            logger.info(f"{name} not found", entity_id=entity_id)
            raise RequestedResourceNotFoundError(f"{name} with id {entity_id} does not exist")

    def _stamp(self, entity: AuditMixin, created: bool = False) -> None:
        if created:
            entity.created_by = self._user_context.user_id
        entity.last_updated_by = self._user_context.user_id
        entity.last_updated = datetime.now(timezone.utc)

    async def _add(self, entity: EntityT) -> EntityT:
        entity.is_deleted = False
        self._stamp(entity, created=True)
        self._session.add(entity)
        await self._session.flush()
        logger.info(
            f"{self.entity_name} created",
            entity_id=entity.id,
            code=entity.code,
            user_id=self._user_context.user_id,
        )
        return entity

    async def _save(self, entity: EntityT) -> EntityT:
        self._stamp(entity)
        await self._session.flush()
        logger.info(
            f"{self.entity_name} updated",
            entity_id=entity.id,
            code=entity.code,
            user_id=self._user_context.user_id,
        )
        return entity

    async def set_status(self, entity_id: int, deleted_status: bool) -> None:
        """Set the soft-delete flag."""
        entity: SoftDeleteMixin = await self._get_or_raise(entity_id)
        entity.is_deleted = deleted_status
        self._stamp(entity)
        await self._session.flush()
        logger.info(
            f"{self.entity_name} status changed",
            entity_id=entity_id,
            is_deleted=deleted_status,
            user_id=self._user_context.user_id,
        )

    async def _purge(self, entity_id: int) -> None:
        entity = await self._get_or_raise(entity_id)
        if not entity.is_deleted:
            logger.info(f"{self.entity_name} purge rejected, not soft-deleted", entity_id=entity_id)
            raise RequestedResourceHasConflictError(
                f"{self.entity_name} with id {entity_id} must be marked deleted before purge"
            )
        await self._session.delete(entity)
        await self._session.flush()
        logger.info(
            f"{self.entity_name} purged",
            entity_id=entity_id,
            user_id=self._user_context.user_id,
        )
