"""
Storage layer.

Repositories own application state.  Services receive a repository
instance rather than reaching for module globals, which keeps every
test free to build its own isolated store.
"""

from .software_engineer_repository import SoftwareEngineerRepository

__all__ = ["SoftwareEngineerRepository"]
