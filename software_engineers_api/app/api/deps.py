"""
FastAPI dependencies shared by the v1 endpoints.

The repository lives on ``app.state`` (set up in ``create_app``).  The
services are cheap wrappers around it, so they are built per request.
"""

from fastapi import Depends, Request

from software_engineers_api.app.repositories.software_engineer_repository import SoftwareEngineerRepository
from software_engineers_api.app.services.software_engineer_command_service import SoftwareEngineerCommandService
from software_engineers_api.app.services.software_engineer_query_service import SoftwareEngineerQueryService


def get_repository(request: Request) -> SoftwareEngineerRepository:
    return request.app.state.software_engineer_repository


def get_query_service(
    repository: SoftwareEngineerRepository = Depends(get_repository),
) -> SoftwareEngineerQueryService:
    return SoftwareEngineerQueryService(repository)


def get_command_service(
    repository: SoftwareEngineerRepository = Depends(get_repository),
    query_service: SoftwareEngineerQueryService = Depends(get_query_service),
) -> SoftwareEngineerCommandService:
    return SoftwareEngineerCommandService(query_service, repository)
