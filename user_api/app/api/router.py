"""
Top‑level API router.

The user resource is mounted under ``/api/user``; the health check
sits at the root so load balancers can probe it without the API
prefix.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(users.router, prefix="/api/user", tags=["user"])
router.include_router(health.router, tags=["health"])
