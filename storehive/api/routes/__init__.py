"""API routes module."""

from storehive.api.routes.categories import router as categories_router
from storehive.api.routes.health import router as health_router
from storehive.api.routes.hives import router as hives_router
from storehive.api.routes.products import router as products_router
from storehive.api.routes.sections import router as sections_router

__all__ = [
    "categories_router",
    "health_router",
    "hives_router",
    "products_router",
    "sections_router",
]
