"""
User endpoints for API v1.

Users themselves are seeded at start‑up and not exposed; the only
route here lists the certificates a user owns.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from certificate_api.app.api.deps import get_certificate_service
from certificate_api.app.schemas.certificate import Certificate
from certificate_api.app.services.certificate_service import CertificateService

router = APIRouter()


@router.get("/{user_id}/certificates", response_model=Dict[str, Certificate])
async def list_user_certificates(
    user_id: str,
    service: CertificateService = Depends(get_certificate_service),
) -> Dict[str, Certificate]:
    """Return the certificates owned by the user, or ``{}`` if there are none."""
    return service.list_certificates(user_id)
