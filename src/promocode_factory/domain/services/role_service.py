"""Role service for business logic."""

import uuid
from collections.abc import Callable
from uuid import UUID

from promocode_factory.core.logging import get_logger
from promocode_factory.domain.entities import Employee, Role
from promocode_factory.domain.exceptions import EntityNotFoundError
from promocode_factory.domain.services.role_usage_guard import RoleUsageGuard
from promocode_factory.infrastructure.persistence.stores import AdministrationStores

logger = get_logger(__name__)


class RoleService:
    """Service for role catalog management.

    Editing a role does not touch the role copies held by employees.
    """

    def __init__(
        self,
        stores: AdministrationStores,
        id_factory: Callable[[], UUID] = uuid.uuid4,
    ) -> None:
        """Initialize the role service.

        Args:
            stores: Employee and role stores of the application.
            id_factory: Supplies identifiers for new roles.
        """
        self.role_repo = stores.roles
        self.guard = RoleUsageGuard(stores.employees, stores.roles, stores.reference_lock)
        self.id_factory = id_factory

    async def list_roles(self) -> list[Role]:
        """Get all roles in insertion order."""
        return await self.role_repo.list_all()

    async def get_role(self, role_id: UUID) -> Role:
        """Get a role by ID.

        Raises:
            EntityNotFoundError: If the role does not exist.
        """
        role = await self.role_repo.get_by_id(role_id)
        if role is None:
            raise EntityNotFoundError(self.role_repo.entity_name, role_id)
        return role

    async def create_role(self, name: str, description: str | None = None) -> Role:
        """Create a role with a generated ID.

        Raises:
            EntityConflictError: If the generated ID is already in use.
        """
        role = await self.role_repo.create(
            Role(id=self.id_factory(), name=name, description=description)
        )
        logger.info("Role created", role_id=str(role.id), role_name=role.name)
        return role

    async def update_role(self, role_id: UUID, name: str, description: str | None = None) -> Role:
        """Replace the name and description of a role.

        Raises:
            EntityNotFoundError: If the role does not exist.
        """
        role = await self.role_repo.update(Role(id=role_id, name=name, description=description))
        logger.info("Role updated", role_id=str(role_id))
        return role

    async def delete_role(self, role_id: UUID) -> Role:
        """Delete a role that no employee holds.

        Raises:
            RoleInUseError: If employees still hold the role.
            EntityNotFoundError: If the role does not exist.
        """
        role = await self.guard.delete_role(role_id)
        logger.info("Role deleted", role_id=str(role_id))
        return role

    async def list_role_employees(self, role_id: UUID) -> list[Employee]:
        """Get the employees holding a role.

        Raises:
            EntityNotFoundError: If the role is not in the catalog.
        """
        await self.get_role(role_id)
        return await self.guard.find_employees_with_role(role_id)
