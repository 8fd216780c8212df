"""
Service layer for certificate ownership transfers.

A transfer moves a certificate from its owner to another user in two
steps.  The owner first requests it, naming the recipient by e‑mail;
the certificate's transfer record goes from idle to ``Requested``.
Accepting the transfer then makes the recipient the owner and resets
the transfer record to idle.

Only one transfer may be pending per certificate.  Every check runs
before anything is written, so a rejected request leaves the
certificate exactly as it was.
"""

from __future__ import annotations

import logging

from certificate_api.app.core.errors import (
    InvalidTargetError,
    NoActiveTransferError,
    TransferInProgressError,
    UnknownCertificateError,
)
from certificate_api.app.core.registry import Registry
from certificate_api.app.schemas.certificate import (
    Certificate,
    Transfer,
    TransferRequest,
    TransferStatus,
)

logger = logging.getLogger(__name__)


class TransferService:
    """Request and accept certificate transfers."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def request_transfer(self, cert_id: str, data: TransferRequest) -> Certificate:
        """Start a transfer of ``cert_id`` to the user with e‑mail ``data.to``.

        Returns the updated certificate.  Raises
        ``UnknownCertificateError`` for a missing certificate,
        ``TransferInProgressError`` when a transfer is already recorded
        and ``InvalidTargetError`` when no user has that e‑mail.
        """
        with self.registry.lock:
            cert = self.registry.certificates.get(cert_id)
            if cert is None:
                raise UnknownCertificateError(cert_id, "create transfer")
            if not cert.transfer.is_idle:
                raise TransferInProgressError(cert_id, cert.transfer.to)
            if self.registry.find_user_by_email(data.to) is None:
                raise InvalidTargetError(data.to)
            updated = cert.model_copy(
                update={"transfer": Transfer(to=data.to, status=TransferStatus.REQUESTED)}
            )
            self.registry.certificates[cert_id] = updated
            logger.info("Transfer of certificate %s to %s requested", cert_id, data.to)
            return updated

    def accept_transfer(self, cert_id: str) -> Certificate:
        """Complete the pending transfer of ``cert_id``.

        The recipient becomes the owner and the transfer record is
        cleared.  If the recipient's e‑mail no longer matches any user
        the transfer stays pending and ``InvalidTargetError`` is raised.
        """
        with self.registry.lock:
            cert = self.registry.certificates.get(cert_id)
            if cert is None:
                raise UnknownCertificateError(cert_id, "accept transfer")
            if not cert.transfer.is_pending:
                raise NoActiveTransferError(cert_id)
            recipient = self.registry.find_user_by_email(cert.transfer.to)
            if recipient is None:
                raise InvalidTargetError(cert.transfer.to)
            updated = cert.model_copy(update={"owner_id": recipient.id, "transfer": Transfer()})
            self.registry.certificates[cert_id] = updated
            logger.info(
                "Certificate %s transferred from user %s to user %s",
                cert_id,
                cert.owner_id,
                recipient.id,
            )
            return updated
