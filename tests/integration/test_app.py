"""Integration tests for the application factory and service endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from promocode_factory.core.config import Settings
from promocode_factory.infrastructure.api.app import create_app
from promocode_factory.infrastructure.api.dependencies import get_role_service


@pytest.mark.asyncio
async def test_health_check_endpoint(async_client):
    response = await async_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "PromoCode Factory"


@pytest.mark.asyncio
async def test_liveness_check_endpoint(async_client):
    response = await async_client.get("/live")

    assert response.status_code == 200
    assert response.json()["status"] == "alive"


@pytest.mark.asyncio
async def test_api_root(async_client):
    response = await async_client.get("/api/v1")

    assert response.status_code == 200
    assert response.json()["api_version"] == "v1"


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(async_client):
    response = await async_client.get("/health", headers={"X-Correlation-ID": "cid_test123"})

    assert response.headers["X-Correlation-ID"] == "cid_test123"


@pytest.mark.asyncio
async def test_correlation_id_is_generated(async_client):
    response = await async_client.get("/health")

    assert response.headers["X-Correlation-ID"].startswith("cid_")


@pytest.mark.asyncio
async def test_seeded_app_serves_sample_data():
    app = create_app(settings=Settings(environment="testing", seed_sample_data=True))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        roles = (await client.get("/api/v1/roles")).json()
        employees = (await client.get("/api/v1/employees")).json()

    assert [role["name"] for role in roles] == ["Admin", "PartnerManager"]
    assert [employee["full_name"] for employee in employees] == ["Ivan Sergeev", "Petr Andreev"]


@pytest.mark.asyncio
async def test_apps_do_not_share_stores():
    settings = Settings(environment="testing", seed_sample_data=True)
    first = create_app(settings=settings)
    second = create_app(settings=settings)

    async with AsyncClient(transport=ASGITransport(app=first), base_url="http://test") as client:
        employees = (await client.get("/api/v1/employees")).json()
        for employee in employees:
            await client.delete(f"/api/v1/employees/{employee['id']}")

    assert await first.state.stores.employees.count() == 0
    assert await second.state.stores.employees.count() == 2


@pytest.mark.asyncio
async def test_docs_disabled_outside_development(async_client):
    response = await async_client.get("/docs")

    assert response.status_code == 404


class FailingRoleService:
    async def list_roles(self):
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_unhandled_error_returns_500_with_correlation_id(app):
    app.dependency_overrides[get_role_service] = lambda: FailingRoleService()
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/roles", headers={"X-Correlation-ID": "cid_x"})

    assert response.status_code == 500
    assert response.json()["detail"] == "An unexpected error occurred"
    assert response.headers["X-Correlation-ID"] == "cid_x"
