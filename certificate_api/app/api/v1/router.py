"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a single object that
``main.py`` mounts.  Transfers live below ``/certificates/{id}`` and
share the certificates prefix.
"""

from fastapi import APIRouter

from .endpoints import certificates, health, transfers, users

router = APIRouter()

router.include_router(certificates.router, prefix="/certificates", tags=["certificates"])
router.include_router(transfers.router, prefix="/certificates", tags=["transfers"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, tags=["health"])
