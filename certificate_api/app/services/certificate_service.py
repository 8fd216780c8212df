"""
Service layer for certificates.

Certificates are kept in the registry keyed by their ``id``.  Create
and update take the full record from the request body: the body's own
``id`` is the key, and the ID from the URL is only used when the body
leaves ``id`` empty.  Both check that ``ownerId`` names an existing
user before committing.  Update replaces the stored record as a whole
and never creates a missing one.

Create, update and delete return the whole registry after the change;
listing returns only the certificates owned by one user.
"""

from __future__ import annotations

import logging
from typing import Dict

from certificate_api.app.core.errors import (
    DuplicateCertificateError,
    InvalidOwnerError,
    UnknownCertificateError,
    UnknownUserError,
)
from certificate_api.app.core.registry import Registry
from certificate_api.app.schemas.certificate import Certificate

logger = logging.getLogger(__name__)


class CertificateService:
    """Create, update, delete, get and list certificates."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    @staticmethod
    def _keyed(path_id: str, payload: Certificate) -> Certificate:
        """Return ``payload`` with ``id`` filled from the path when empty."""
        if payload.id:
            return payload
        return payload.model_copy(update={"id": path_id})

    def create_certificate(self, path_id: str, payload: Certificate) -> Dict[str, Certificate]:
        """Insert a new certificate and return the whole registry.

        Raises ``DuplicateCertificateError`` if the ID is taken and
        ``InvalidOwnerError`` if the owner is unknown.
        """
        cert = self._keyed(path_id, payload)
        with self.registry.lock:
            if self.registry.has_certificate(cert.id):
                raise DuplicateCertificateError(cert.id)
            if not self.registry.has_user(cert.owner_id):
                raise InvalidOwnerError(cert.owner_id, "create certificate")
            self.registry.certificates[cert.id] = cert
            logger.info("Created certificate %s for user %s", cert.id, cert.owner_id)
            return self.registry.snapshot()

    def update_certificate(self, path_id: str, payload: Certificate) -> Dict[str, Certificate]:
        """Replace an existing certificate and return the whole registry."""
        cert = self._keyed(path_id, payload)
        with self.registry.lock:
            if not self.registry.has_certificate(cert.id):
                raise UnknownCertificateError(cert.id, "update certificate")
            if not self.registry.has_user(cert.owner_id):
                raise InvalidOwnerError(cert.owner_id, "update certificate")
            self.registry.certificates[cert.id] = cert
            logger.info("Updated certificate %s", cert.id)
            return self.registry.snapshot()

    def delete_certificate(self, cert_id: str) -> Dict[str, Certificate]:
        """Remove a certificate and return the remaining registry."""
        with self.registry.lock:
            if not self.registry.has_certificate(cert_id):
                raise UnknownCertificateError(cert_id, "delete certificate")
            del self.registry.certificates[cert_id]
            logger.info("Deleted certificate %s", cert_id)
            return self.registry.snapshot()

    def get_certificate(self, cert_id: str) -> Certificate:
        with self.registry.lock:
            cert = self.registry.certificates.get(cert_id)
            if cert is None:
                raise UnknownCertificateError(cert_id, "get certificate")
            return cert

    def list_certificates(self, user_id: str) -> Dict[str, Certificate]:
        """Return the certificates owned by ``user_id``, possibly none.

        Raises ``UnknownUserError`` if the user does not exist.
        """
        with self.registry.lock:
            if not self.registry.has_user(user_id):
                raise UnknownUserError(user_id)
            return {
                cert_id: cert
                for cert_id, cert in self.registry.certificates.items()
                if cert.owner_id == user_id
            }
