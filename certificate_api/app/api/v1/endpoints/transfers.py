"""
Transfer endpoints for API v1.

``POST /certificates/{id}/transfers`` requests a transfer and returns
the updated certificate.  ``PUT`` on the same path accepts the pending
transfer and answers 200 with an empty body; the new owner is visible
through the certificate and listing endpoints.
"""

from fastapi import APIRouter, Depends, Response, status

from certificate_api.app.api.deps import get_transfer_service, json_body
from certificate_api.app.schemas.certificate import Certificate, TransferRequest
from certificate_api.app.services.transfer_service import TransferService

router = APIRouter()


@router.post("/{cert_id}/transfers", response_model=Certificate)
async def request_transfer(
    cert_id: str,
    data: TransferRequest = Depends(json_body(TransferRequest)),
    service: TransferService = Depends(get_transfer_service),
) -> Certificate:
    return service.request_transfer(cert_id, data)


@router.put("/{cert_id}/transfers", response_class=Response)
async def accept_transfer(
    cert_id: str,
    service: TransferService = Depends(get_transfer_service),
) -> Response:
    service.accept_transfer(cert_id)
    return Response(status_code=status.HTTP_200_OK)
