"""Role entity for employee administration.

Roles form a small catalog. Employees carry snapshot copies of the roles
they were assigned, so editing a role does not rewrite employees.
"""

from dataclasses import dataclass

from promocode_factory.domain.entities.base import Entity


@dataclass
class Role(Entity):
    """Role entity.

    Attributes:
        id: Unique identifier (UUID).
        name: Role name (e.g., 'Admin', 'PartnerManager').
        description: Optional human-readable description.
    """

    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate role data after initialization."""
        if not self.name:
            raise ValueError("Role name is required")
