"""FastAPI dependencies for the administration routes.

The stores live on ``app.state`` and are created once per application
instance by the app factory.
"""

from typing import Annotated

from fastapi import Depends, Request

from promocode_factory.domain.services import EmployeeService, RoleService
from promocode_factory.infrastructure.persistence import AdministrationStores


def get_stores(request: Request) -> AdministrationStores:
    """Get the store bundle from app state.

    Args:
        request: FastAPI request object.

    Returns:
        AdministrationStores: Stores of the running application.
    """
    return request.app.state.stores


def get_employee_service(
    stores: Annotated[AdministrationStores, Depends(get_stores)],
) -> EmployeeService:
    """Build an employee service bound to the application stores."""
    return EmployeeService(stores)


def get_role_service(
    stores: Annotated[AdministrationStores, Depends(get_stores)],
) -> RoleService:
    """Build a role service bound to the application stores."""
    return RoleService(stores)


# Type aliases for service dependency injection
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]
RoleServiceDep = Annotated[RoleService, Depends(get_role_service)]
