"""
Internal record for a software engineer.

The entity is what the repository stores.  It is kept separate from the
pydantic schemas in ``schemas.software_engineer`` so that the storage
shape can change without touching the API contract.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class SoftwareEngineerEntity:
    """Immutable software engineer record keyed by ``id``.

    ``tech_stack`` is stored as a tuple: whatever sequence the caller
    passes in is copied, so later changes to the caller's list never
    reach the stored entity.
    """

    id: int
    name: str
    tech_stack: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, id: int, name: str, tech_stack: Optional[Iterable[str]] = None) -> "SoftwareEngineerEntity":
        return cls(id=id, name=name, tech_stack=tuple(tech_stack or ()))
