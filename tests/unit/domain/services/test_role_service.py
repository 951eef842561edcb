"""Unit tests for RoleService."""

import uuid

import pytest

from promocode_factory.domain.exceptions import EntityNotFoundError, RoleInUseError
from promocode_factory.domain.services import RoleService
from tests.constants import ADMIN_ID, EMPLOYEE_X_ID, MANAGER_ID


@pytest.fixture
def role_service(stores) -> RoleService:
    return RoleService(stores)


@pytest.mark.asyncio
async def test_create_role_generates_id(stores):
    new_id = uuid.uuid4()
    service = RoleService(stores, id_factory=lambda: new_id)

    role = await service.create_role("Auditor", "Reads everything")

    assert role.id == new_id
    assert await stores.roles.get_by_id(new_id) == role


@pytest.mark.asyncio
async def test_update_role(role_service):
    role = await role_service.update_role(MANAGER_ID, "Lead", None)

    assert role.name == "Lead"
    assert role.description is None
    assert (await role_service.get_role(MANAGER_ID)).name == "Lead"


@pytest.mark.asyncio
async def test_update_missing_role(role_service):
    with pytest.raises(EntityNotFoundError):
        await role_service.update_role(uuid.uuid4(), "Ghost")


@pytest.mark.asyncio
async def test_delete_role_blocked_then_allowed_after_employee_removed(role_service, stores):
    with pytest.raises(RoleInUseError):
        await role_service.delete_role(ADMIN_ID)

    await stores.employees.delete(EMPLOYEE_X_ID)
    deleted = await role_service.delete_role(ADMIN_ID)

    assert deleted.id == ADMIN_ID
    assert [role.id for role in await role_service.list_roles()] == [MANAGER_ID]


@pytest.mark.asyncio
async def test_end_to_end_role_deletion_outcomes(role_service):
    with pytest.raises(RoleInUseError) as exc_info:
        await role_service.delete_role(ADMIN_ID)
    assert [e.id for e in exc_info.value.employees] == [EMPLOYEE_X_ID]

    await role_service.delete_role(MANAGER_ID)
    with pytest.raises(EntityNotFoundError):
        await role_service.get_role(MANAGER_ID)

    with pytest.raises(EntityNotFoundError):
        await role_service.delete_role(uuid.uuid4())


@pytest.mark.asyncio
async def test_list_role_employees(role_service):
    admins = await role_service.list_role_employees(ADMIN_ID)

    assert [e.id for e in admins] == [EMPLOYEE_X_ID]
    assert await role_service.list_role_employees(MANAGER_ID) == []


@pytest.mark.asyncio
async def test_list_role_employees_unknown_role(role_service):
    with pytest.raises(EntityNotFoundError):
        await role_service.list_role_employees(uuid.uuid4())
