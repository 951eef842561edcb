"""API Routes for PromoCode Factory."""

from promocode_factory.infrastructure.api.routes.employees_router import router as employees_router
from promocode_factory.infrastructure.api.routes.roles_router import router as roles_router

__all__ = [
    "employees_router",
    "roles_router",
]
