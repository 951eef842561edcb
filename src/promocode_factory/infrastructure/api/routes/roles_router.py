"""Roles API routes.

Provides endpoints for the role catalog. Deleting a role that employees
still hold is refused with the list of those employees.
"""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, Response, status

from promocode_factory.core.logging import get_logger
from promocode_factory.domain.exceptions import (
    EntityConflictError,
    EntityNotFoundError,
    RoleInUseError,
)
from promocode_factory.infrastructure.api.dependencies import RoleServiceDep
from promocode_factory.infrastructure.api.schemas import (
    EmployeeShortResponse,
    RoleInUseErrorResponse,
    RoleItemResponse,
    RoleRequest,
)

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[RoleItemResponse],
)
async def list_roles(service: RoleServiceDep) -> list[RoleItemResponse]:
    """List all roles.

    Returns:
        All catalog roles in insertion order.
    """
    roles = await service.list_roles()
    logger.debug("Roles listed", count=len(roles))
    return [RoleItemResponse.model_validate(role) for role in roles]


@router.get(
    "/{role_id}",
    status_code=status.HTTP_200_OK,
    response_model=RoleItemResponse,
    responses={
        404: {"description": "Role not found"},
    },
)
async def get_role(role_id: UUID, service: RoleServiceDep) -> RoleItemResponse:
    """Get a role by ID.

    Args:
        role_id: Role ID.
        service: Role service.

    Returns:
        Role details.
    """
    try:
        role = await service.get_role(role_id)
    except EntityNotFoundError as e:
        logger.info("Role not found", role_id=str(role_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return RoleItemResponse.model_validate(role)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RoleItemResponse,
    responses={
        409: {"description": "Role with the generated ID already exists"},
    },
)
async def create_role(
    role_request: RoleRequest,
    request: Request,
    response: Response,
    service: RoleServiceDep,
) -> RoleItemResponse:
    """Create a new role.

    Args:
        role_request: Role creation request.
        request: FastAPI request object.
        response: Outgoing response, used for the Location header.
        service: Role service.

    Returns:
        Created role.
    """
    try:
        role = await service.create_role(role_request.name, role_request.description)
    except EntityConflictError as e:
        logger.info("Role creation failed: ID already exists", role_id=str(e.entity_id))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{role.id}"
    return RoleItemResponse.model_validate(role)


@router.put(
    "/{role_id}",
    status_code=status.HTTP_200_OK,
    response_model=RoleItemResponse,
    responses={
        404: {"description": "Role not found"},
    },
)
async def update_role(
    role_id: UUID,
    role_request: RoleRequest,
    service: RoleServiceDep,
) -> RoleItemResponse:
    """Update a role.

    Role copies already held by employees keep their previous values.

    Args:
        role_id: Role ID.
        role_request: New role data.
        service: Role service.

    Returns:
        Updated role.
    """
    try:
        role = await service.update_role(role_id, role_request.name, role_request.description)
    except EntityNotFoundError as e:
        logger.info("Role update failed: role not found", role_id=str(role_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return RoleItemResponse.model_validate(role)


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_200_OK,
    response_model=RoleItemResponse,
    responses={
        400: {
            "description": "Role is assigned to one or more employees",
            "model": RoleInUseErrorResponse,
        },
        404: {"description": "Role not found"},
    },
)
async def delete_role(role_id: UUID, service: RoleServiceDep) -> RoleItemResponse:
    """Delete a role.

    Args:
        role_id: Role ID.
        service: Role service.

    Returns:
        The removed role.
    """
    try:
        role = await service.delete_role(role_id)
    except RoleInUseError as e:
        detail = RoleInUseErrorResponse(
            error_message="The role is assigned to one or more employees",
            employees=[EmployeeShortResponse.model_validate(emp) for emp in e.employees],
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail.model_dump(mode="json"),
        ) from e
    except EntityNotFoundError as e:
        logger.info("Role deletion failed: role not found", role_id=str(role_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return RoleItemResponse.model_validate(role)


@router.get(
    "/{role_id}/employees",
    status_code=status.HTTP_200_OK,
    response_model=list[EmployeeShortResponse],
    responses={
        404: {"description": "Role not found"},
    },
)
async def list_role_employees(role_id: UUID, service: RoleServiceDep) -> list[EmployeeShortResponse]:
    """List the employees holding a role."""
    try:
        employees = await service.list_role_employees(role_id)
    except EntityNotFoundError as e:
        logger.info("Role not found", role_id=str(role_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return [EmployeeShortResponse.model_validate(employee) for employee in employees]
