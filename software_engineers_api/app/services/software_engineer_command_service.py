"""
Mutating operations on software engineers.

Every mutation of an existing engineer first resolves it through
``SoftwareEngineerQueryService.get_by_id_or_throw``.  The repository's
``update`` would happily insert under any id, so this check is what
keeps ``PUT`` from creating engineers with client-chosen ids.
"""

import logging

from software_engineers_api.app.repositories.software_engineer_repository import SoftwareEngineerRepository
from software_engineers_api.app.schemas.software_engineer import (
    SoftwareEngineerCreate,
    SoftwareEngineerRead,
    SoftwareEngineerUpdate,
)
from software_engineers_api.app.services.software_engineer_mapper import to_read
from software_engineers_api.app.services.software_engineer_query_service import SoftwareEngineerQueryService

logger = logging.getLogger(__name__)


class SoftwareEngineerCommandService:
    """Service class for creating, replacing and deleting engineers."""

    def __init__(
        self,
        query_service: SoftwareEngineerQueryService,
        repository: SoftwareEngineerRepository,
    ) -> None:
        self.query_service = query_service
        self.repository = repository

    def create(self, data: SoftwareEngineerCreate) -> SoftwareEngineerRead:
        engineer = to_read(self.repository.create(data.name, data.tech_stack))
        logger.info("Created SoftwareEngineer: %s", engineer)
        return engineer

    def update(self, engineer_id: int, data: SoftwareEngineerUpdate) -> None:
        """Fully replace an existing engineer; the id is preserved."""
        self.query_service.get_by_id_or_throw(engineer_id)
        self.repository.update(engineer_id, data.name, data.tech_stack)
        logger.info("Updated SoftwareEngineer: id=%s", engineer_id)

    def delete(self, engineer_id: int) -> None:
        self.query_service.get_by_id_or_throw(engineer_id)
        self.repository.delete(engineer_id)
        logger.info("Deleted SoftwareEngineer: id=%s", engineer_id)
