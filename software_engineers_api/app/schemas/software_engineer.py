"""
Pydantic schemas for software engineers.

Three payload shapes are exchanged over the API:

* ``SoftwareEngineerCreate`` – request body for ``POST``.
* ``SoftwareEngineerUpdate`` – request body for ``PUT``.  It always
  carries the complete new state; there are no partial updates.
* ``SoftwareEngineerRead`` – response body, including the ``id``
  assigned by the repository.

The JSON field for the tech stack is ``techStack``; in Python it is
exposed as ``tech_stack``.  A missing or ``null`` tech stack becomes an
empty list.

Name constraints live in ``validate_name``.  The request schemas call it
from their field validators, so it runs while FastAPI parses the body
and an invalid name never reaches the service layer.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 10


def validate_name(name: str) -> str:
    """Return ``name`` unchanged if it is an acceptable engineer name.

    Raises ``ValueError`` when the name is blank or its length falls
    outside ``NAME_MIN_LENGTH``..``NAME_MAX_LENGTH``.
    """
    if not name.strip():
        raise ValueError("name must not be blank")
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"name length must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )
    return name


def normalize_tech_stack(tech_stack):
    # Fresh list so the caller's list is never shared; anything that is
    # not a list or tuple is left for pydantic to reject.
    if tech_stack is None:
        return []
    if isinstance(tech_stack, (list, tuple)):
        return list(tech_stack)
    return tech_stack


class SoftwareEngineerBase(BaseModel):
    name: str = Field(..., examples=["Pawa"])
    tech_stack: List[str] = Field(
        default_factory=list,
        alias="techStack",
        examples=[["Java", "Spring"]],
    )

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("tech_stack", mode="before")
    @classmethod
    def tech_stack_defaults_to_empty(cls, v):
        return normalize_tech_stack(v)


class SoftwareEngineerCreate(SoftwareEngineerBase):
    """Schema for creating a software engineer."""

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v)


class SoftwareEngineerUpdate(SoftwareEngineerBase):
    """Schema for fully replacing a software engineer.

    The target id comes from the URL path, never from the body.
    """

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v)


class SoftwareEngineerRead(SoftwareEngineerBase):
    """Schema for reading a software engineer from the API."""

    id: int = Field(..., examples=[1])

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
