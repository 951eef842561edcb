"""API Schemas for request/response validation."""

from promocode_factory.infrastructure.api.schemas.employee_schemas import (
    EmployeeRequest,
    EmployeeResponse,
    EmployeeShortResponse,
    RoleInUseErrorResponse,
)
from promocode_factory.infrastructure.api.schemas.role_schemas import (
    RoleItemResponse,
    RoleRequest,
)

__all__ = [
    "EmployeeRequest",
    "EmployeeResponse",
    "EmployeeShortResponse",
    "RoleInUseErrorResponse",
    "RoleItemResponse",
    "RoleRequest",
]
