"""
Top‑level API router.

Aggregates the domain routers that are mounted under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import addresses

router = APIRouter()

router.include_router(addresses.router, tags=["addresses"])
