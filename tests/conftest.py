"""Pytest configuration and fixtures.

Each test gets its own application built by ``create_app``, and with it
a fresh in-memory repository, so no state leaks between tests.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from software_engineers_api.app.core.config import Settings
from software_engineers_api.app.main import create_app
from software_engineers_api.app.repositories.software_engineer_repository import SoftwareEngineerRepository
from software_engineers_api.app.services.software_engineer_command_service import SoftwareEngineerCommandService
from software_engineers_api.app.services.software_engineer_query_service import SoftwareEngineerQueryService


@pytest.fixture
def repository() -> SoftwareEngineerRepository:
    """Fresh in-memory store per test."""
    return SoftwareEngineerRepository()


@pytest.fixture
def query_service(repository) -> SoftwareEngineerQueryService:
    return SoftwareEngineerQueryService(repository)


@pytest.fixture
def command_service(repository, query_service) -> SoftwareEngineerCommandService:
    return SoftwareEngineerCommandService(query_service, repository)


@pytest.fixture
def app():
    return create_app(Settings(seed_demo_data=False))


@pytest.fixture
def app_repository(app) -> SoftwareEngineerRepository:
    return app.state.software_engineer_repository


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
