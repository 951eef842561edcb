"""Employees API routes.

Provides CRUD endpoints for employees. Role IDs in requests are resolved
against the role catalog before anything is written.
"""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, Response, status

from promocode_factory.core.logging import get_logger
from promocode_factory.domain.exceptions import EntityConflictError, EntityNotFoundError
from promocode_factory.infrastructure.api.dependencies import EmployeeServiceDep
from promocode_factory.infrastructure.api.schemas import (
    EmployeeRequest,
    EmployeeResponse,
    EmployeeShortResponse,
)

logger = get_logger(__name__)

router = APIRouter()


def _not_found(exc: EntityNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[EmployeeShortResponse],
)
async def list_employees(service: EmployeeServiceDep) -> list[EmployeeShortResponse]:
    """List all employees.

    Returns:
        Summaries of all employees in insertion order.
    """
    employees = await service.list_employees()
    logger.debug("Employees listed", count=len(employees))
    return [EmployeeShortResponse.model_validate(employee) for employee in employees]


@router.get(
    "/{employee_id}",
    status_code=status.HTTP_200_OK,
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee not found"},
    },
)
async def get_employee(employee_id: UUID, service: EmployeeServiceDep) -> EmployeeResponse:
    """Get an employee by ID.

    Args:
        employee_id: Employee ID.
        service: Employee service.

    Returns:
        Employee details including role copies.
    """
    try:
        employee = await service.get_employee(employee_id)
    except EntityNotFoundError as e:
        logger.info("Employee not found", employee_id=str(employee_id))
        raise _not_found(e) from e

    return EmployeeResponse.model_validate(employee)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Role not found in the role catalog"},
        409: {"description": "Employee with the generated ID already exists"},
    },
)
async def create_employee(
    employee_request: EmployeeRequest,
    request: Request,
    response: Response,
    service: EmployeeServiceDep,
) -> EmployeeResponse:
    """Create a new employee.

    The employee ID is generated by the service. Every role ID must exist
    in the role catalog.

    Args:
        employee_request: Employee creation request.
        request: FastAPI request object.
        response: Outgoing response, used for the Location header.
        service: Employee service.

    Returns:
        Created employee.
    """
    try:
        employee = await service.create_employee(
            email=employee_request.email,
            first_name=employee_request.first_name,
            last_name=employee_request.last_name,
            role_ids=employee_request.roles,
            applied_promocodes_count=employee_request.applied_promocodes_count,
        )
    except EntityNotFoundError as e:
        logger.info("Employee creation failed: role not found", role_id=str(e.entity_id))
        raise _not_found(e) from e
    except EntityConflictError as e:
        logger.info("Employee creation failed: ID already exists", employee_id=str(e.entity_id))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{employee.id}"
    return EmployeeResponse.model_validate(employee)


@router.put(
    "/{employee_id}",
    status_code=status.HTTP_200_OK,
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee or role not found"},
    },
)
async def update_employee(
    employee_id: UUID,
    employee_request: EmployeeRequest,
    service: EmployeeServiceDep,
) -> EmployeeResponse:
    """Replace all data of an employee.

    Args:
        employee_id: Employee ID.
        employee_request: New employee data.
        service: Employee service.

    Returns:
        Updated employee.
    """
    try:
        employee = await service.update_employee(
            employee_id,
            email=employee_request.email,
            first_name=employee_request.first_name,
            last_name=employee_request.last_name,
            role_ids=employee_request.roles,
            applied_promocodes_count=employee_request.applied_promocodes_count,
        )
    except EntityNotFoundError as e:
        logger.info(
            "Employee update failed: not found",
            employee_id=str(employee_id),
            missing=e.entity_name,
            missing_id=str(e.entity_id),
        )
        raise _not_found(e) from e

    return EmployeeResponse.model_validate(employee)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_200_OK,
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee not found"},
    },
)
async def delete_employee(employee_id: UUID, service: EmployeeServiceDep) -> EmployeeResponse:
    """Delete an employee.

    Returns:
        The removed employee.
    """
    try:
        employee = await service.delete_employee(employee_id)
    except EntityNotFoundError as e:
        logger.info("Employee deletion failed: not found", employee_id=str(employee_id))
        raise _not_found(e) from e

    return EmployeeResponse.model_validate(employee)
