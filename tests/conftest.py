"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from promocode_factory.core.config import Settings
from promocode_factory.domain.entities import Employee, Role
from promocode_factory.infrastructure.api.app import create_app
from promocode_factory.infrastructure.persistence import (
    AdministrationStores,
    SeedData,
    build_seed_data,
)
from tests.constants import ADMIN_ID, EMPLOYEE_X_ID, MANAGER_ID


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated test application."""
    return Settings(environment="testing", seed_sample_data=False, log_format="console")


@pytest.fixture
def stores() -> AdministrationStores:
    """Stores with roles Admin and Manager and one employee holding Admin."""
    admin = Role(id=ADMIN_ID, name="Admin", description="Administrator")
    manager = Role(id=MANAGER_ID, name="Manager", description="Manager")
    employee_x = Employee(
        id=EMPLOYEE_X_ID,
        email="x@example.com",
        first_name="Xavier",
        last_name="Xu",
        roles=[Role(id=admin.id, name=admin.name, description=admin.description)],
        applied_promocodes_count=1,
    )
    return AdministrationStores.from_seed(SeedData(roles=[admin, manager], employees=[employee_x]))


@pytest.fixture
def seeded_stores() -> AdministrationStores:
    """Stores filled with the bootstrap sample data."""
    return AdministrationStores.from_seed(build_seed_data())


@pytest.fixture
def app(test_settings, stores):
    """Fresh application serving the ``stores`` fixture."""
    return create_app(settings=test_settings, stores=stores)


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create an AsyncClient bound to the test application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
