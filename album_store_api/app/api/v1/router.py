"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under their path prefixes.
"""

from fastapi import APIRouter

from .endpoints import albums

router = APIRouter()

router.include_router(albums.router, prefix="/albums", tags=["albums"])
