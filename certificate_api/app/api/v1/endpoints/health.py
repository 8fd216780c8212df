"""Liveness check."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from certificate_api.app.api.deps import get_registry
from certificate_api.app.core.config import settings
from certificate_api.app.core.registry import Registry

router = APIRouter()


@router.get("/health")
async def health_check(registry: Registry = Depends(get_registry)) -> Dict[str, Any]:
    """Return 200 while the process is up, with registry sizes."""
    return {
        "status": "ok",
        "service": settings.project_name,
        "version": settings.api_version,
        "certificates": len(registry.certificates),
        "users": len(registry.users),
    }
