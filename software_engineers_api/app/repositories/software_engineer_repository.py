"""
In-memory storage for software engineers.

``SoftwareEngineerRepository`` is the only owner of the id → entity
mapping and of the id counter.  One instance is created by
``create_app`` and shared by the services through ``app.state``; there
is no module-level store.

The repository never raises domain errors.  ``find_by_id`` returns
``None`` for a missing id, ``update`` writes unconditionally and
``delete`` ignores unknown ids.  Existence checks belong to
``SoftwareEngineerQueryService.get_by_id_or_throw``.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from software_engineers_api.app.models.software_engineer import SoftwareEngineerEntity

logger = logging.getLogger(__name__)

DEMO_ENGINEERS = (
    ("Pawa", ("java", "spring")),
    ("Miha", ("java", "kotlin", "spring")),
)


class SoftwareEngineerRepository:
    """Dictionary backed store with a monotonically increasing id counter.

    Ids are never reused: neither ``delete`` nor ``clear`` rewinds the
    counter.  Iteration order of ``list`` follows insertion order of the
    underlying ``dict`` but callers should not depend on it.
    """

    def __init__(self) -> None:
        self._last_id = 0
        self._engineers: Dict[int, SoftwareEngineerEntity] = {}
        self._lock = threading.Lock()

    def create(self, name: str, tech_stack: Optional[Iterable[str]] = None) -> SoftwareEngineerEntity:
        with self._lock:
            self._last_id += 1
            engineer = SoftwareEngineerEntity.build(self._last_id, name, tech_stack)
            self._engineers[engineer.id] = engineer
        logger.info("Created software engineer: %s", engineer)
        return engineer

    def find_by_id(self, engineer_id: int) -> Optional[SoftwareEngineerEntity]:
        engineer = self._engineers.get(engineer_id)
        logger.debug("Found software engineer: %s with id: %s", engineer, engineer_id)
        return engineer

    def list(self) -> List[SoftwareEngineerEntity]:
        with self._lock:
            engineers = list(self._engineers.values())
        logger.debug("Got %d software engineers", len(engineers))
        return engineers

    def update(
        self,
        engineer_id: int,
        name: str,
        tech_stack: Optional[Iterable[str]] = None,
    ) -> SoftwareEngineerEntity:
        """Replace the engineer stored under ``engineer_id``.

        Inserts when the id is unknown; callers that must not create
        entities this way check existence first.
        """
        engineer = SoftwareEngineerEntity.build(engineer_id, name, tech_stack)
        with self._lock:
            self._engineers[engineer_id] = engineer
        logger.info("Updated software engineer: %s", engineer)
        return engineer

    def delete(self, engineer_id: int) -> None:
        with self._lock:
            removed = self._engineers.pop(engineer_id, None)
        logger.info("Deleted software engineer: %s", removed)

    def clear(self) -> None:
        """Remove every engineer.  Used to reset state between tests."""
        with self._lock:
            self._engineers.clear()
        logger.info("Cleared software engineer store")

    def count(self) -> int:
        return len(self._engineers)

    def seed_demo_data(self) -> List[SoftwareEngineerEntity]:
        return [self.create(name, stack) for name, stack in DEMO_ENGINEERS]
