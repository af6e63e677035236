"""Tests for HiveService."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.core.user_context import UserContext
from storehive.models import StoreHive, StoreHiveSection
from storehive.schemas import UpdateHiveRequest
from storehive.services import (
    HiveManagementMapper,
    HiveService,
    RequestedResourceHasConflictError,
    RequestedResourceNotFoundError,
)


@pytest.fixture
def hive_service(session: AsyncSession, user_context: UserContext) -> HiveService:
    return HiveService(session, user_context)


@pytest.fixture
def create_request() -> UpdateHiveRequest:
    return UpdateHiveRequest(name="qwerty", code="D", address="Kuprevicha 1-1")


class TestConstruction:
    """Tests for constructor argument checks."""

    @pytest.fixture
    def mock_session(self) -> AsyncSession:
        return AsyncMock(spec=AsyncSession)

    def test_accepts_session_and_user_context(self, mock_session, user_context):
        assert HiveService(mock_session, user_context) is not None

    def test_rejects_missing_session(self, user_context):
        with pytest.raises(ValueError):
            HiveService(None, user_context)  # type: ignore[arg-type]

    def test_rejects_missing_user_context(self, mock_session):
        with pytest.raises(ValueError):
            HiveService(mock_session, None)  # type: ignore[arg-type]

    def test_uses_supplied_mapper(self, mock_session, user_context):
        mapper = HiveManagementMapper()
        service = HiveService(mock_session, user_context, mapper=mapper)
        assert service._mapper is mapper


class TestGetHives:
    """Tests for listing hives."""

    @pytest.mark.asyncio
    async def test_lists_every_hive_including_deleted(self, hive_service, store_hives):
        hives = await hive_service.get_hives()

        assert len(hives) == 3
        assert [h.code for h in hives] == ["A", "B", "C"]
        assert hives[0].is_deleted is True

    @pytest.mark.asyncio
    async def test_counts_sections_per_hive(self, hive_service, store_sections):
        hives = await hive_service.get_hives()

        assert [h.hive_section_count for h in hives] == [0, 2, 1]

    @pytest.mark.asyncio
    async def test_empty_store(self, hive_service):
        assert await hive_service.get_hives() == []


class TestGetHive:
    """Tests for fetching a single hive."""

    @pytest.mark.asyncio
    async def test_returns_matching_hive(self, hive_service, store_hives):
        expected = store_hives[1]

        hive = await hive_service.get_hive(expected.id)

        assert hive.id == expected.id
        assert hive.name == expected.name
        assert hive.address == expected.address
        assert hive.code == expected.code
        assert hive.is_deleted == expected.is_deleted

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, hive_service, store_hives):
        with pytest.raises(RequestedResourceNotFoundError):
            await hive_service.get_hive(123)

    @pytest.mark.asyncio
    async def test_empty_store_raises_not_found(self, hive_service):
        with pytest.raises(RequestedResourceNotFoundError):
            await hive_service.get_hive(1)


class TestCreateHive:
    """Tests for creating hives."""

    @pytest.mark.asyncio
    async def test_created_hive_can_be_fetched(self, hive_service, store_hives, create_request):
        created = await hive_service.create_hive(create_request)
        fetched = await hive_service.get_hive(created.id)

        assert created.id == max(h.id for h in store_hives) + 1
        assert created.is_deleted is False
        assert fetched.id == created.id
        assert fetched.name == "qwerty"
        assert fetched.address == "Kuprevicha 1-1"
        assert fetched.code == "D"
        assert fetched.is_deleted is False

    @pytest.mark.asyncio
    async def test_duplicate_code_raises_conflict(self, hive_service, store_hives):
        request = UpdateHiveRequest(name="qwerty", code="A", address="Kuprevicha 1-1")

        with pytest.raises(RequestedResourceHasConflictError):
            await hive_service.create_hive(request)

    @pytest.mark.asyncio
    async def test_code_comparison_is_case_sensitive(self, hive_service, store_hives):
        request = UpdateHiveRequest(name="qwerty", code="a", address="Kuprevicha 1-1")

        created = await hive_service.create_hive(request)

        assert created.code == "a"

    @pytest.mark.asyncio
    async def test_stamps_audit_columns(self, hive_service, session, create_request):
        created = await hive_service.create_hive(create_request)

        row = await session.get(StoreHive, created.id)
        assert row.created_by == 42
        assert row.last_updated_by == 42
        assert row.last_updated is not None


class TestUpdateHive:
    """Tests for updating hives."""

    @pytest.mark.asyncio
    async def test_overwrites_fields(self, hive_service, store_hives):
        request = UpdateHiveRequest(name="qwerty", code="12345", address="Kuprevicha 1-1")

        updated = await hive_service.update_hive(store_hives[1].id, request)
        fetched = await hive_service.get_hive(updated.id)

        assert fetched.id == store_hives[1].id
        assert fetched.name == "qwerty"
        assert fetched.code == "12345"
        assert fetched.address == "Kuprevicha 1-1"

    @pytest.mark.asyncio
    async def test_keeping_own_code_is_not_a_conflict(self, hive_service, store_hives):
        request = UpdateHiveRequest(name="Renamed", code="B", address="Elsewhere 2")

        updated = await hive_service.update_hive(store_hives[1].id, request)

        assert updated.code == "B"
        assert updated.name == "Renamed"

    @pytest.mark.asyncio
    async def test_code_of_other_hive_raises_conflict(self, hive_service, store_hives):
        request = UpdateHiveRequest(name="qwerty", code="A", address="Kuprevicha 1-1")

        with pytest.raises(RequestedResourceHasConflictError):
            await hive_service.update_hive(store_hives[1].id, request)

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, hive_service, store_hives, create_request):
        with pytest.raises(RequestedResourceNotFoundError):
            await hive_service.update_hive(123, create_request)


class TestSetStatus:
    """Tests for the soft-delete flag."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("deleted_status", [True, False])
    async def test_status_is_visible_on_get(self, hive_service, store_hives, deleted_status):
        await hive_service.set_status(store_hives[2].id, deleted_status)

        hive = await hive_service.get_hive(store_hives[2].id)
        assert hive.is_deleted is deleted_status

    @pytest.mark.asyncio
    async def test_restores_deleted_hive(self, hive_service, store_hives):
        await hive_service.set_status(store_hives[0].id, False)

        assert (await hive_service.get_hive(store_hives[0].id)).is_deleted is False

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, hive_service, store_hives):
        with pytest.raises(RequestedResourceNotFoundError):
            await hive_service.set_status(123, False)


class TestDeleteHive:
    """Tests for purging hives."""

    @pytest.mark.asyncio
    async def test_removes_soft_deleted_hive(self, hive_service, session, store_hives):
        deleted_id = store_hives[0].id

        await hive_service.delete_hive(deleted_id)

        codes = (await session.execute(select(StoreHive.code))).scalars().all()
        assert sorted(codes) == ["B", "C"]
        with pytest.raises(RequestedResourceNotFoundError):
            await hive_service.get_hive(deleted_id)

    @pytest.mark.asyncio
    async def test_active_hive_raises_conflict(self, hive_service, store_hives):
        with pytest.raises(RequestedResourceHasConflictError):
            await hive_service.delete_hive(store_hives[1].id)

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, hive_service, store_hives):
        with pytest.raises(RequestedResourceNotFoundError):
            await hive_service.delete_hive(123)

    @pytest.mark.asyncio
    async def test_sections_are_left_in_place(self, hive_service, session, store_sections):
        hive_id = store_sections[1].store_hive_id
        await hive_service.set_status(hive_id, True)

        await hive_service.delete_hive(hive_id)

        remaining = (await session.execute(select(StoreHiveSection))).scalars().all()
        assert len(remaining) == 3
