"""FastAPI dependencies for dependency injection.

Provides:
- Database session per request
- Acting-user context
- Management services bound to both
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from storehive.config import settings
from storehive.core.user_context import UserContext
from storehive.infra.database import get_db_session
from storehive.infra.logging import get_logger
from storehive.schemas import ValidationResult
from storehive.schemas.validation import MAX_ID
from storehive.services import (
    HiveSectionService,
    HiveService,
    ProductCatalogueService,
    ProductCategoryService,
)

logger = get_logger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the duration of one request.

    Yields:
        AsyncSession committed after the route returns
    """
    async with get_db_session() as session:
        yield session


async def get_user_context(
    x_user_id: Annotated[int | None, Header(alias="X-User-Id", ge=1, le=MAX_ID)] = None,
) -> UserContext:
    """Build the user context from the X-User-Id header.

    Falls back to ``settings.default_user_id`` when the header is absent.
    """
    if x_user_id is None:
        logger.debug("No X-User-Id header, using default user", user_id=settings.default_user_id)
        return UserContext(user_id=settings.default_user_id)
    return UserContext(user_id=x_user_id)


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[UserContext, Depends(get_user_context)]


async def get_hive_service(session: DbSession, user: CurrentUser) -> HiveService:
    return HiveService(session, user)


async def get_hive_section_service(session: DbSession, user: CurrentUser) -> HiveSectionService:
    return HiveSectionService(session, user)


async def get_product_category_service(
    session: DbSession, user: CurrentUser
) -> ProductCategoryService:
    return ProductCategoryService(session, user)


async def get_product_catalogue_service(
    session: DbSession, user: CurrentUser
) -> ProductCatalogueService:
    return ProductCatalogueService(session, user)


HiveServiceDep = Annotated[HiveService, Depends(get_hive_service)]
HiveSectionServiceDep = Annotated[HiveSectionService, Depends(get_hive_section_service)]
ProductCategoryServiceDep = Annotated[ProductCategoryService, Depends(get_product_category_service)]
ProductCatalogueServiceDep = Annotated[
    ProductCatalogueService, Depends(get_product_catalogue_service)
]


def raise_for_invalid(result: ValidationResult) -> None:
    """Turn a failed request validation into a 400 response.

    Raises:
        HTTPException: 400 with the list of field errors
    """
    if not result.is_valid:
        logger.info("Request validation failed", errors=result.to_detail())
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.to_detail(),
        )
