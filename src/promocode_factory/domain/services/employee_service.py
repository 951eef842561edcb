"""Employee service for business logic.

Resolves the requested role IDs against the role catalog before any
employee is written, so an employee is never stored with unknown roles.
"""

import uuid
from collections.abc import Callable, Sequence
from uuid import UUID

from promocode_factory.core.logging import get_logger
from promocode_factory.domain.entities import Employee, Role
from promocode_factory.domain.exceptions import EntityNotFoundError
from promocode_factory.infrastructure.persistence.stores import AdministrationStores

logger = get_logger(__name__)


class EmployeeService:
    """Service for employee management business logic."""

    def __init__(
        self,
        stores: AdministrationStores,
        id_factory: Callable[[], UUID] = uuid.uuid4,
    ) -> None:
        """Initialize the employee service.

        Args:
            stores: Employee and role stores of the application.
            id_factory: Supplies identifiers for new employees.
        """
        self.employee_repo = stores.employees
        self.role_repo = stores.roles
        self.lock = stores.reference_lock
        self.id_factory = id_factory

    async def list_employees(self) -> list[Employee]:
        """Get all employees in insertion order."""
        return await self.employee_repo.list_all()

    async def get_employee(self, employee_id: UUID) -> Employee:
        """Get an employee by ID.

        Raises:
            EntityNotFoundError: If the employee does not exist.
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EntityNotFoundError(self.employee_repo.entity_name, employee_id)
        return employee

    async def resolve_roles(self, role_ids: Sequence[UUID]) -> list[Role]:
        """Copy catalog roles for the given IDs.

        Args:
            role_ids: Requested role IDs, in the order they should be held.

        Returns:
            Snapshot copies of the catalog roles.

        Raises:
            EntityNotFoundError: For the first ID missing from the catalog,
                with ``entity_name`` set to the role store's name.
        """
        resolved = []
        for role_id in role_ids:
            role = await self.role_repo.get_by_id(role_id)
            if role is None:
                logger.info("Role resolution failed: role not found", role_id=str(role_id))
                raise EntityNotFoundError(self.role_repo.entity_name, role_id)
            resolved.append(Role(id=role.id, name=role.name, description=role.description))
        return resolved

    async def create_employee(
        self,
        email: str,
        first_name: str,
        last_name: str,
        role_ids: Sequence[UUID] = (),
        applied_promocodes_count: int = 0,
    ) -> Employee:
        """Create a new employee with a generated ID.

        Returns:
            The created employee.

        Raises:
            EntityNotFoundError: If a role ID is not in the catalog. Nothing is stored.
            EntityConflictError: If the generated ID is already in use.
        """
        async with self.lock:
            roles = await self.resolve_roles(role_ids)
            employee = Employee(
                id=self.id_factory(),
                email=email,
                first_name=first_name,
                last_name=last_name,
                roles=roles,
                applied_promocodes_count=applied_promocodes_count,
            )
            created = await self.employee_repo.create(employee)

        logger.info("Employee created", employee_id=str(created.id), role_count=len(roles))
        return created

    async def update_employee(
        self,
        employee_id: UUID,
        email: str,
        first_name: str,
        last_name: str,
        role_ids: Sequence[UUID] = (),
        applied_promocodes_count: int = 0,
    ) -> Employee:
        """Replace every field of an existing employee.

        Roles are resolved first; the employee is looked up by the store
        update itself.

        Returns:
            The updated employee.

        Raises:
            EntityNotFoundError: If a role ID is unknown (``entity_name`` 'Role')
                or the employee does not exist.
        """
        async with self.lock:
            roles = await self.resolve_roles(role_ids)
            updated = await self.employee_repo.update(
                Employee(
                    id=employee_id,
                    email=email,
                    first_name=first_name,
                    last_name=last_name,
                    roles=roles,
                    applied_promocodes_count=applied_promocodes_count,
                )
            )

        logger.info("Employee updated", employee_id=str(employee_id))
        return updated

    async def delete_employee(self, employee_id: UUID) -> Employee:
        """Delete an employee.

        Raises:
            EntityNotFoundError: If the employee does not exist.
        """
        deleted = await self.employee_repo.delete(employee_id)
        logger.info("Employee deleted", employee_id=str(employee_id))
        return deleted
