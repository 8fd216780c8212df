"""
Certificate endpoints for API v1.

Create, update and delete answer with the whole registry as a mapping
from certificate ID to certificate.  Failed preconditions are raised
by :class:`CertificateService` and rendered as plain‑text 400
responses by the global error handler.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from certificate_api.app.api.deps import get_certificate_service, json_body
from certificate_api.app.schemas.certificate import Certificate
from certificate_api.app.services.certificate_service import CertificateService

router = APIRouter()


@router.post("/{cert_id}", response_model=Dict[str, Certificate])
async def create_certificate(
    cert_id: str,
    payload: Certificate = Depends(json_body(Certificate)),
    service: CertificateService = Depends(get_certificate_service),
) -> Dict[str, Certificate]:
    """Create a certificate and return every stored certificate.

    The body's ``id`` is the key the certificate is stored under; the
    path ID is used only when the body leaves it empty.
    """
    return service.create_certificate(cert_id, payload)


@router.put("/{cert_id}", response_model=Dict[str, Certificate])
async def update_certificate(
    cert_id: str,
    payload: Certificate = Depends(json_body(Certificate)),
    service: CertificateService = Depends(get_certificate_service),
) -> Dict[str, Certificate]:
    """Replace an existing certificate and return every stored certificate."""
    return service.update_certificate(cert_id, payload)


@router.delete("/{cert_id}", response_model=Dict[str, Certificate])
async def delete_certificate(
    cert_id: str,
    service: CertificateService = Depends(get_certificate_service),
) -> Dict[str, Certificate]:
    """Delete a certificate and return the remaining ones.  Any body is ignored."""
    return service.delete_certificate(cert_id)


@router.get("/{cert_id}", response_model=Certificate)
async def get_certificate(
    cert_id: str,
    service: CertificateService = Depends(get_certificate_service),
) -> Certificate:
    return service.get_certificate(cert_id)
