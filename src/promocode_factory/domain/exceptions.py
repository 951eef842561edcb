"""Domain exceptions for employee and role administration.

These are expected, recoverable outcomes. The API layer maps each of them
to a distinct HTTP status.
"""

from collections.abc import Sequence
from uuid import UUID

from promocode_factory.domain.entities import Employee


class AdministrationError(Exception):
    """Base class for administration domain errors."""


class EntityNotFoundError(AdministrationError):
    """Raised when an operation targets an identifier that is not stored.

    Attributes:
        entity_name: Kind of entity that was looked up (e.g., 'Role').
        entity_id: Identifier that was not found.
    """

    def __init__(self, entity_name: str, entity_id: UUID) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID {entity_id} not found")


class EntityConflictError(AdministrationError):
    """Raised when creating an entity whose identifier is already used."""

    def __init__(self, entity_name: str, entity_id: UUID) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID {entity_id} already exists")


class RoleInUseError(AdministrationError):
    """Raised when deleting a role that employees still hold.

    Attributes:
        role_id: Role whose deletion was refused.
        employees: Employees holding the role, in store order.
    """

    def __init__(self, role_id: UUID, employees: Sequence[Employee]) -> None:
        self.role_id = role_id
        self.employees = list(employees)
        super().__init__(
            f"Role with ID {role_id} is assigned to {len(self.employees)} employee(s)"
        )
