"""Role API schemas for request/response validation."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class RoleRequest(BaseModel):
    """Request schema for creating or updating a role.

    Attributes:
        name: Role name (e.g., 'Admin', 'PartnerManager').
        description: Optional description of the role's purpose.
    """

    name: str
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        """Validate that name is not empty."""
        if not v or not v.strip():
            raise ValueError("Role name cannot be empty")
        return v.strip()


class RoleItemResponse(BaseModel):
    """Response schema for a role.

    Also used for the role copies embedded in employee responses.
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
