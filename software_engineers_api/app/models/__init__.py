"""
Internal domain records.

These are the shapes held by the repositories.  They are plain frozen
dataclasses and never leave the service layer; API handlers only see
the pydantic schemas.
"""

from .software_engineer import SoftwareEngineerEntity

__all__ = ["SoftwareEngineerEntity"]
