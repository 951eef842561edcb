"""Employee API schemas for request/response validation."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from promocode_factory.infrastructure.api.schemas.role_schemas import RoleItemResponse


class EmployeeRequest(BaseModel):
    """Request schema for creating or replacing an employee.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        email: Contact email address.
        roles: IDs of catalog roles to assign, in order.
        applied_promocodes_count: Number of applied promo codes.
    """

    first_name: str
    last_name: str
    email: EmailStr
    roles: list[UUID] = Field(default_factory=list)
    applied_promocodes_count: int = Field(default=0, ge=0)


class EmployeeShortResponse(BaseModel):
    """Summary of an employee used in listings and blocked-deletion reports."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    full_name: str


class EmployeeResponse(BaseModel):
    """Full employee representation."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    first_name: str
    last_name: str
    full_name: str
    roles: list[RoleItemResponse]
    applied_promocodes_count: int


class RoleInUseErrorResponse(BaseModel):
    """Body detail returned when a role deletion is blocked.

    Attributes:
        error_message: Human-readable reason.
        employees: Employees still holding the role.
    """

    error_message: str
    employees: list[EmployeeShortResponse]
