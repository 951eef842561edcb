"""Store bundle shared by the domain services of one application instance."""

import asyncio
from dataclasses import dataclass, field

from promocode_factory.domain.entities import Employee, Role
from promocode_factory.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
)
from promocode_factory.infrastructure.persistence.seed_data import SeedData


@dataclass
class AdministrationStores:
    """Employee and role stores plus the lock guarding cross-store sequences.

    ``reference_lock`` must be held for any read-then-write sequence that
    depends on which employees hold which roles: resolving roles before
    writing an employee, and scanning employees before deleting a role.

    Attributes:
        employees: Employee store.
        roles: Role store.
        reference_lock: Lock shared by the cross-store sequences.
    """

    employees: InMemoryRepository[Employee]
    roles: InMemoryRepository[Role]
    reference_lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @classmethod
    def from_seed(cls, seed: SeedData | None = None) -> "AdministrationStores":
        """Create stores, optionally populated with seed data.

        Args:
            seed: Initial data. Empty stores are created when None.

        Returns:
            New store bundle.
        """
        seed = seed or SeedData()
        return cls(
            employees=InMemoryRepository("Employee", seed.employees),
            roles=InMemoryRepository("Role", seed.roles),
        )
