"""Integration tests for the employees API."""

import uuid

import pytest

from promocode_factory.domain.services import EmployeeService
from promocode_factory.infrastructure.api.dependencies import get_employee_service
from tests.constants import ADMIN_ID, EMPLOYEE_X_ID, MANAGER_ID

EMPLOYEES_URL = "/api/v1/employees"


def employee_payload(**overrides):
    payload = {
        "first_name": "Anna",
        "last_name": "Petrova",
        "email": "anna@example.com",
        "roles": [str(MANAGER_ID)],
        "applied_promocodes_count": 4,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_list_employees(async_client):
    response = await async_client.get(EMPLOYEES_URL)

    assert response.status_code == 200
    assert response.json() == [
        {"id": str(EMPLOYEE_X_ID), "email": "x@example.com", "full_name": "Xavier Xu"}
    ]


@pytest.mark.asyncio
async def test_get_employee(async_client):
    response = await async_client.get(f"{EMPLOYEES_URL}/{EMPLOYEE_X_ID}")

    assert response.status_code == 200
    data = response.json()
    assert data["full_name"] == "Xavier Xu"
    assert data["applied_promocodes_count"] == 1
    assert data["roles"] == [
        {"id": str(ADMIN_ID), "name": "Admin", "description": "Administrator"}
    ]


@pytest.mark.asyncio
async def test_get_unknown_employee(async_client):
    response = await async_client.get(f"{EMPLOYEES_URL}/{uuid.uuid4()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_employee(async_client):
    response = await async_client.post(EMPLOYEES_URL, json=employee_payload())

    assert response.status_code == 201
    data = response.json()
    assert data["full_name"] == "Anna Petrova"
    assert data["roles"] == [{"id": str(MANAGER_ID), "name": "Manager", "description": "Manager"}]
    assert response.headers["Location"] == f"{EMPLOYEES_URL}/{data['id']}"

    fetched = await async_client.get(response.headers["Location"])
    assert fetched.status_code == 200
    assert fetched.json() == data


@pytest.mark.asyncio
async def test_create_employee_with_unknown_role_changes_nothing(async_client):
    before = (await async_client.get(EMPLOYEES_URL)).json()

    response = await async_client.post(
        EMPLOYEES_URL, json=employee_payload(roles=[str(ADMIN_ID), str(uuid.uuid4())])
    )

    assert response.status_code == 404
    assert "Role" in response.json()["detail"]
    assert (await async_client.get(EMPLOYEES_URL)).json() == before


@pytest.mark.asyncio
async def test_create_employee_with_negative_count_rejected(async_client):
    response = await async_client.post(
        EMPLOYEES_URL, json=employee_payload(applied_promocodes_count=-1)
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_employee_with_invalid_email_rejected(async_client):
    response = await async_client.post(EMPLOYEES_URL, json=employee_payload(email="nobody"))

    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["@", "a@", "@b", "a@@b", "a b@c"])
async def test_create_employee_with_malformed_email_rejected(async_client, stores, email):
    response = await async_client.post(EMPLOYEES_URL, json=employee_payload(email=email))

    assert response.status_code == 422
    assert await stores.employees.count() == 1


@pytest.mark.asyncio
async def test_create_employee_id_collision_conflicts(app, async_client, stores):
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(
        stores, id_factory=lambda: EMPLOYEE_X_ID
    )

    response = await async_client.post(EMPLOYEES_URL, json=employee_payload())

    assert response.status_code == 409
    assert await stores.employees.count() == 1


@pytest.mark.asyncio
async def test_update_employee(async_client):
    response = await async_client.put(
        f"{EMPLOYEES_URL}/{EMPLOYEE_X_ID}",
        json=employee_payload(roles=[str(MANAGER_ID), str(ADMIN_ID)]),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(EMPLOYEE_X_ID)
    assert data["email"] == "anna@example.com"
    assert [role["name"] for role in data["roles"]] == ["Manager", "Admin"]
    assert data["roles"][1]["description"] == "Administrator"
    assert data["applied_promocodes_count"] == 4


@pytest.mark.asyncio
async def test_update_employee_with_unknown_role(async_client):
    response = await async_client.put(
        f"{EMPLOYEES_URL}/{EMPLOYEE_X_ID}", json=employee_payload(roles=[str(uuid.uuid4())])
    )

    assert response.status_code == 404

    unchanged = await async_client.get(f"{EMPLOYEES_URL}/{EMPLOYEE_X_ID}")
    assert unchanged.json()["email"] == "x@example.com"


@pytest.mark.asyncio
async def test_update_unknown_employee(async_client):
    response = await async_client.put(f"{EMPLOYEES_URL}/{uuid.uuid4()}", json=employee_payload())

    assert response.status_code == 404
    assert "Employee" in response.json()["detail"]


@pytest.mark.asyncio
async def test_delete_employee_unblocks_role_deletion(async_client):
    response = await async_client.delete(f"{EMPLOYEES_URL}/{EMPLOYEE_X_ID}")

    assert response.status_code == 200
    assert response.json()["id"] == str(EMPLOYEE_X_ID)

    response = await async_client.delete(f"/api/v1/roles/{ADMIN_ID}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delete_unknown_employee(async_client):
    response = await async_client.delete(f"{EMPLOYEES_URL}/{uuid.uuid4()}")

    assert response.status_code == 404
