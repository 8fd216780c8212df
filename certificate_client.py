"""Certificate Registry API client.

This module defines a small client wrapper around the certificate
registry's REST API.  It uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`create_certificate` – store a new certificate.
* :meth:`update_certificate` – replace an existing certificate.
* :meth:`delete_certificate` – remove a certificate.
* :meth:`get_certificate` – fetch a single certificate.
* :meth:`list_certificates` – list the certificates a user owns.
* :meth:`request_transfer` – ask to move a certificate to another user.
* :meth:`accept_transfer` – complete a pending transfer.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON response (``None`` for empty bodies) and
``error`` is ``None``.  On failure ``data`` is ``None`` and ``error``
is a dictionary with keys ``status_code`` and ``message``; the server
reports rejections as plain text, which becomes ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class CertificateRegistryClient:
    """Client for interacting with the certificate registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``
                or ``http://localhost:8080/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.rstrip("\n") if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Certificate operations
    # ------------------------------------------------------------------
    def create_certificate(self, certificate: Dict[str, Any]) -> Result:
        """Create a certificate.

        Args:
            certificate: Full certificate record; its ``id`` is also
                used in the URL.
        Returns:
            A tuple ``(certificates, error)`` where ``certificates`` maps
            every stored ID to its certificate.
        """
        return self._request("POST", f"/certificates/{certificate['id']}", json_body=certificate)

    def update_certificate(self, certificate: Dict[str, Any]) -> Result:
        """Replace an existing certificate with ``certificate``."""
        return self._request("PUT", f"/certificates/{certificate['id']}", json_body=certificate)

    def delete_certificate(self, cert_id: str) -> Result:
        return self._request("DELETE", f"/certificates/{cert_id}")

    def get_certificate(self, cert_id: str) -> Result:
        return self._request("GET", f"/certificates/{cert_id}")

    def list_certificates(self, user_id: str) -> Result:
        """Return ``(certificates, error)`` for the certificates ``user_id`` owns."""
        return self._request("GET", f"/users/{user_id}/certificates")

    # ------------------------------------------------------------------
    # Transfer operations
    # ------------------------------------------------------------------
    def request_transfer(self, cert_id: str, recipient_email: str) -> Result:
        """Ask to transfer ``cert_id`` to the user with ``recipient_email``.

        Returns:
            A tuple ``(certificate, error)`` with the updated certificate.
        """
        body = {"to": recipient_email, "status": "Requested"}
        return self._request("POST", f"/certificates/{cert_id}/transfers", json_body=body)

    def accept_transfer(self, cert_id: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Accept the pending transfer of ``cert_id``.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("PUT", f"/certificates/{cert_id}/transfers")
        return error is None, error
