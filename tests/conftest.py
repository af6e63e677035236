"""Shared fixtures: in-memory database, services' collaborators, HTTP client."""

import os

# Settings are read at import time; keep tests off any on-disk database.
os.environ.setdefault("STOREHIVE_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STOREHIVE_ENVIRONMENT", "dev")

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storehive.api.deps import get_db
from storehive.core.user_context import UserContext
from storehive.infra.database import create_tables
from storehive.main import app
from storehive.models import (
    CatalogueProduct,
    CatalogueProductCategory,
    StoreHive,
    StoreHiveSection,
)


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def user_context() -> UserContext:
    return UserContext(user_id=42)


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with sessions drawn from the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# =============================================================================
# Row builders
# =============================================================================


def build_hive(code: str, name: str = "Hive", is_deleted: bool = False) -> StoreHive:
    return StoreHive(
        name=f"{name} {code}",
        code=code,
        address=f"Address {code}",
        is_deleted=is_deleted,
        created_by=1,
        last_updated_by=1,
    )


def build_section(
    code: str, hive_id: int, name: str = "Section", is_deleted: bool = False
) -> StoreHiveSection:
    return StoreHiveSection(
        name=f"{name} {code}",
        code=code,
        store_hive_id=hive_id,
        is_deleted=is_deleted,
        created_by=1,
        last_updated_by=1,
    )


def build_category(code: str, is_deleted: bool = False) -> CatalogueProductCategory:
    return CatalogueProductCategory(
        name=f"Category {code}",
        code=code,
        description=f"Description {code}",
        is_deleted=is_deleted,
        created_by=1,
        last_updated_by=1,
    )


def build_product(code: str, category_id: int, is_deleted: bool = False) -> CatalogueProduct:
    return CatalogueProduct(
        name=f"Product {code}",
        code=code,
        category_id=category_id,
        description=f"Description {code}",
        manufacturer_code=f"M-{code}",
        price=Decimal("10.50"),
        is_deleted=is_deleted,
        created_by=1,
        last_updated_by=1,
    )


@pytest_asyncio.fixture
async def store_hives(session: AsyncSession) -> list[StoreHive]:
    """Three hives with codes A, B, C; the first one soft-deleted."""
    hives = [build_hive("A", is_deleted=True), build_hive("B"), build_hive("C")]
    session.add_all(hives)
    await session.flush()
    return hives


@pytest_asyncio.fixture
async def store_sections(session: AsyncSession, store_hives: list[StoreHive]) -> list[StoreHiveSection]:
    """Three sections: two in hive B (one soft-deleted), one in hive C."""
    sections = [
        build_section("S1", store_hives[1].id, is_deleted=True),
        build_section("S2", store_hives[1].id),
        build_section("S3", store_hives[2].id),
    ]
    session.add_all(sections)
    await session.flush()
    return sections


@pytest_asyncio.fixture
async def categories(session: AsyncSession) -> list[CatalogueProductCategory]:
    """Two categories; the first one soft-deleted."""
    items = [build_category("K1", is_deleted=True), build_category("K2")]
    session.add_all(items)
    await session.flush()
    return items


@pytest_asyncio.fixture
async def products(
    session: AsyncSession, categories: list[CatalogueProductCategory]
) -> list[CatalogueProduct]:
    """Three products in category K2; the first one soft-deleted."""
    items = [
        build_product("P1", categories[1].id, is_deleted=True),
        build_product("P2", categories[1].id),
        build_product("P3", categories[1].id),
    ]
    session.add_all(items)
    await session.flush()
    return items
