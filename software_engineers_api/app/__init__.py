"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is layered: ``api`` holds the HTTP boundary,
``services`` the command/query orchestration, ``repositories`` the
in-memory store, ``models`` the stored records and ``schemas`` the
request/response payloads.  Versioning is handled by grouping routers
under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
