"""Conversion from ``SoftwareEngineerEntity`` to the API read schema."""

from software_engineers_api.app.models.software_engineer import SoftwareEngineerEntity
from software_engineers_api.app.schemas.software_engineer import SoftwareEngineerRead


def to_read(engineer: SoftwareEngineerEntity) -> SoftwareEngineerRead:
    return SoftwareEngineerRead(
        id=engineer.id,
        name=engineer.name,
        tech_stack=list(engineer.tech_stack),
    )
