#!/usr/bin/env python
"""Seed a local database with sample hives and catalogue data.

This script:
1. Creates missing tables
2. Inserts sample hives with sections, and categories with products,
   going through the management services so codes stay unique

Usage:
    # Seed the database configured by STOREHIVE_DATABASE_URL
    python scripts/seed_sample_data.py

    # Record a specific user in the audit columns
    python scripts/seed_sample_data.py --user-id 7
"""

import argparse
import asyncio

from storehive.core.user_context import UserContext
from storehive.infra.database import close_db_engine, create_tables, get_db_session
from storehive.infra.logging import get_logger, setup_logging
from storehive.schemas import (
    UpdateHiveRequest,
    UpdateHiveSectionRequest,
    UpdateProductCategoryRequest,
    UpdateProductRequest,
)
from storehive.services import (
    HiveSectionService,
    HiveService,
    ProductCatalogueService,
    ProductCategoryService,
    RequestedResourceHasConflictError,
)

setup_logging()
logger = get_logger(__name__)


SAMPLE_HIVES = [
    {
        "hive": UpdateHiveRequest(name="Central Hive", code="HV001", address="Kuprevicha 1-1"),
        "sections": [("Bikes", "SC001"), ("Skis", "SC002")],
    },
    {
        "hive": UpdateHiveRequest(name="North Hive", code="HV002", address="Surganova 57"),
        "sections": [("Tents", "SC003")],
    },
]

SAMPLE_CATEGORIES = [
    {
        "category": UpdateProductCategoryRequest(
            name="Bicycles", code="CT001", description="Road and mountain bicycles"
        ),
        "products": [("Road Bike", "PR001", "RB-2024", 899.0), ("Trail Bike", "PR002", "TB-2024", 1199.0)],
    },
    {
        "category": UpdateProductCategoryRequest(name="Camping", code="CT002"),
        "products": [("Two-person Tent", "PR003", "TT-2", 149.5)],
    },
]


async def seed_hives(user: UserContext) -> int:
    created = 0
    async with get_db_session() as session:
        hives = HiveService(session, user)
        sections = HiveSectionService(session, user)

        for sample in SAMPLE_HIVES:
            try:
                hive = await hives.create_hive(sample["hive"])
            except RequestedResourceHasConflictError:
                logger.info("Hive already present, skipping", code=sample["hive"].code)
                continue
            created += 1

            for name, code in sample["sections"]:
                await sections.create_hive_section(
                    UpdateHiveSectionRequest(name=name, code=code, hive_id=hive.id)
                )
    return created


async def seed_catalogue(user: UserContext) -> int:
    created = 0
    async with get_db_session() as session:
        categories = ProductCategoryService(session, user)
        products = ProductCatalogueService(session, user)

        for sample in SAMPLE_CATEGORIES:
            try:
                category = await categories.create_category(sample["category"])
            except RequestedResourceHasConflictError:
                logger.info("Category already present, skipping", code=sample["category"].code)
                continue
            created += 1

            for name, code, manufacturer_code, price in sample["products"]:
                await products.create_product(
                    UpdateProductRequest(
                        name=name,
                        code=code,
                        category_id=category.id,
                        manufacturer_code=manufacturer_code,
                        price=price,
                    )
                )
    return created


async def main(user_id: int) -> None:
    user = UserContext(user_id=user_id)
    try:
        await create_tables()
        hives = await seed_hives(user)
        categories = await seed_catalogue(user)
        logger.info("Seeding complete", hives_created=hives, categories_created=categories)
    finally:
        await close_db_engine()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed sample StoreHive data")
    parser.add_argument("--user-id", type=int, default=1, help="User id for audit columns")
    args = parser.parse_args()

    asyncio.run(main(args.user_id))
