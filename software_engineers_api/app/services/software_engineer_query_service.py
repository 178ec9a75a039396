"""
Read-only access to software engineers.

``get_by_id_or_throw`` is the single place where a missing engineer is
turned into an ``EntityNotFoundError``.  The command service and the API
handlers all go through it.
"""

import logging
from typing import List

from software_engineers_api.app.core.exceptions import EntityNotFoundError
from software_engineers_api.app.models.software_engineer import SoftwareEngineerEntity
from software_engineers_api.app.repositories.software_engineer_repository import SoftwareEngineerRepository
from software_engineers_api.app.schemas.software_engineer import SoftwareEngineerRead
from software_engineers_api.app.services.software_engineer_mapper import to_read

logger = logging.getLogger(__name__)


class SoftwareEngineerQueryService:
    """Service class for looking up software engineers."""

    def __init__(self, repository: SoftwareEngineerRepository) -> None:
        self.repository = repository

    def get_all(self) -> List[SoftwareEngineerRead]:
        """Return every stored engineer, in repository order."""
        engineers = [to_read(engineer) for engineer in self.repository.list()]
        logger.debug("Fetched %d engineers", len(engineers))
        return engineers

    def get_by_id(self, engineer_id: int) -> SoftwareEngineerRead:
        engineer = to_read(self.get_by_id_or_throw(engineer_id))
        logger.debug("Fetched engineer: %s", engineer)
        return engineer

    def get_by_id_or_throw(self, engineer_id: int) -> SoftwareEngineerEntity:
        """Return the stored entity or raise ``EntityNotFoundError``."""
        engineer = self.repository.find_by_id(engineer_id)
        if engineer is None:
            logger.warning("Engineer not found: id=%s", engineer_id)
            raise EntityNotFoundError(engineer_id)
        return engineer
