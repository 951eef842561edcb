"""Referential integrity guard for role deletion.

A role may only be removed from the catalog once no employee holds a copy
of it. The scan and the delete run under one lock so that an employee
cannot be given the role in between.
"""

import asyncio
from uuid import UUID

from promocode_factory.core.logging import get_logger
from promocode_factory.domain.entities import Employee, Role
from promocode_factory.domain.exceptions import RoleInUseError
from promocode_factory.domain.repositories import Repository

logger = get_logger(__name__)


class RoleUsageGuard:
    """Blocks deletion of roles that are still assigned to employees."""

    def __init__(
        self,
        employees: Repository[Employee],
        roles: Repository[Role],
        lock: asyncio.Lock,
    ) -> None:
        """Initialize the guard.

        Args:
            employees: Employee store to scan for references.
            roles: Role store to delete from.
            lock: Lock shared with every writer of employee role lists.
        """
        self.employees = employees
        self.roles = roles
        self.lock = lock

    async def find_employees_with_role(self, role_id: UUID) -> list[Employee]:
        """Find employees holding a role.

        Args:
            role_id: Role ID to look for.

        Returns:
            Employees whose role list contains ``role_id``, in store order.
            Each employee appears once.
        """
        employees = await self.employees.list_all()
        return [employee for employee in employees if employee.has_role(role_id)]

    async def delete_role(self, role_id: UUID) -> Role:
        """Delete a role unless an employee still holds it.

        Args:
            role_id: Role ID.

        Returns:
            The deleted role.

        Raises:
            RoleInUseError: If at least one employee holds the role. The role
                store is left untouched.
            EntityNotFoundError: If the role does not exist.
        """
        async with self.lock:
            blockers = await self.find_employees_with_role(role_id)
            if blockers:
                logger.info(
                    "Role deletion blocked: role is assigned to employees",
                    role_id=str(role_id),
                    employee_ids=[str(employee.id) for employee in blockers],
                )
                raise RoleInUseError(role_id, blockers)

            return await self.roles.delete(role_id)
