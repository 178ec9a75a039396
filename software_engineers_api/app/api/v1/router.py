"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import software_engineers

ENGINEERS_PREFIX = "/software-engineers"

router = APIRouter()

router.include_router(
    software_engineers.router,
    prefix=ENGINEERS_PREFIX,
    tags=["software-engineers"],
)
