"""
Software engineer endpoints for API v1.

These routes provide CRUD operations for software engineers.  Request
bodies are validated by the pydantic schemas before a handler runs;
missing engineers surface as ``EntityNotFoundError`` from the query
service and are rendered as 404 problem payloads by the handlers in
``core.exceptions``.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from software_engineers_api.app.api.deps import get_command_service, get_query_service
from software_engineers_api.app.schemas.software_engineer import (
    SoftwareEngineerCreate,
    SoftwareEngineerRead,
    SoftwareEngineerUpdate,
)
from software_engineers_api.app.services.software_engineer_command_service import SoftwareEngineerCommandService
from software_engineers_api.app.services.software_engineer_query_service import SoftwareEngineerQueryService

router = APIRouter()


@router.post("", response_model=SoftwareEngineerRead, status_code=status.HTTP_201_CREATED)
async def create_software_engineer(
    data: SoftwareEngineerCreate,
    request: Request,
    response: Response,
    command_service: SoftwareEngineerCommandService = Depends(get_command_service),
) -> SoftwareEngineerRead:
    """Create a software engineer.

    The response carries a ``Location`` header pointing at the new
    resource.
    """
    engineer = command_service.create(data)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{engineer.id}"
    return engineer


@router.get("", response_model=List[SoftwareEngineerRead])
async def list_software_engineers(
    query_service: SoftwareEngineerQueryService = Depends(get_query_service),
) -> List[SoftwareEngineerRead]:
    """Return all software engineers.  Ordering is not guaranteed."""
    return query_service.get_all()


@router.get("/{engineer_id}", response_model=SoftwareEngineerRead)
async def get_software_engineer(
    engineer_id: int,
    query_service: SoftwareEngineerQueryService = Depends(get_query_service),
) -> SoftwareEngineerRead:
    """Retrieve a single software engineer by id, or 404."""
    return query_service.get_by_id(engineer_id)


@router.put("/{engineer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_software_engineer(
    engineer_id: int,
    data: SoftwareEngineerUpdate,
    command_service: SoftwareEngineerCommandService = Depends(get_command_service),
) -> Response:
    """Replace name and tech stack of an existing engineer.

    The id is taken from the path.  Unknown ids yield 404 and nothing
    is created.
    """
    command_service.update(engineer_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{engineer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_software_engineer(
    engineer_id: int,
    command_service: SoftwareEngineerCommandService = Depends(get_command_service),
) -> Response:
    """Delete an existing engineer, or 404 if there is none."""
    command_service.delete(engineer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
