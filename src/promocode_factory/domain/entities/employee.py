"""Employee entity.

Employees reference roles by value: each entry in ``roles`` is a copy of
the catalog role taken when the employee was created or last updated.
"""

from dataclasses import dataclass, field
from uuid import UUID

from promocode_factory.domain.entities.base import Entity
from promocode_factory.domain.entities.role import Role


@dataclass
class Employee(Entity):
    """Employee entity.

    Attributes:
        id: Unique identifier (UUID).
        email: Contact email address.
        first_name: Given name.
        last_name: Family name.
        roles: Ordered role snapshots held by the employee.
        applied_promocodes_count: Number of promo codes the employee has applied.
    """

    email: str
    first_name: str
    last_name: str
    roles: list[Role] = field(default_factory=list)
    applied_promocodes_count: int = 0

    def __post_init__(self) -> None:
        """Validate employee data after initialization."""
        if not self.email:
            raise ValueError("Email is required")
        if self.applied_promocodes_count < 0:
            raise ValueError("Applied promo code count cannot be negative")

    @property
    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"

    def has_role(self, role_id: UUID) -> bool:
        """Check whether any of the employee's role snapshots has ``role_id``."""
        return any(role.id == role_id for role in self.roles)
