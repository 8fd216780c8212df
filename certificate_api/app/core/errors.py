"""
Error hierarchy for the certificate registry.

Every rejected request is a failed precondition: a duplicate or
missing key, an unknown user, or a transfer in the wrong state.  The
services raise one of the :class:`CertificateAPIError` subclasses
below and a single exception handler turns it into a plain‑text HTTP
response carrying ``message`` followed by a newline.

:class:`SeedDataError` is separate: it is only raised while loading
users at start‑up and never reaches a client.
"""

from fastapi import status


class CertificateAPIError(Exception):
    """Base class for errors reported back to API clients."""

    code = "CERTIFICATE_API_ERROR"

    def __init__(self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.http_status = http_status


class DuplicateCertificateError(CertificateAPIError):
    code = "DUPLICATE_ID"

    def __init__(self, cert_id: str):
        super().__init__(f"Certificate ID {cert_id} already exists. Cannot create certificate.")
        self.cert_id = cert_id


class UnknownCertificateError(CertificateAPIError):
    """Raised when a certificate ID is not in the registry.

    ``action`` completes the message, e.g. ``"update certificate"`` or
    ``"accept transfer"``.
    """

    code = "UNKNOWN_ID"

    def __init__(self, cert_id: str, action: str):
        super().__init__(f"Certificate ID {cert_id} doesn't exist. Cannot {action}.")
        self.cert_id = cert_id


class InvalidOwnerError(CertificateAPIError):
    code = "INVALID_OWNER"

    def __init__(self, owner_id: str, action: str):
        super().__init__(f"User ID {owner_id} is invalid. Cannot {action}.")
        self.owner_id = owner_id


class UnknownUserError(CertificateAPIError):
    code = "UNKNOWN_USER"

    def __init__(self, user_id: str):
        super().__init__(f"User ID {user_id} is invalid. Cannot list certificates.")
        self.user_id = user_id


class TransferInProgressError(CertificateAPIError):
    code = "TRANSFER_IN_PROGRESS"

    def __init__(self, cert_id: str, recipient: str):
        super().__init__(f"Certificate {cert_id} is already being transferred to {recipient}.")
        self.cert_id = cert_id


class InvalidTargetError(CertificateAPIError):
    code = "INVALID_TARGET"

    def __init__(self, recipient: str):
        super().__init__(f"Target {recipient} isn't valid.")
        self.recipient = recipient


class NoActiveTransferError(CertificateAPIError):
    code = "NO_ACTIVE_TRANSFER"

    def __init__(self, cert_id: str):
        super().__init__(f"No transfer has been requested for certificate {cert_id}.")
        self.cert_id = cert_id


class MalformedBodyError(CertificateAPIError):
    """The request body is not valid JSON or a field has the wrong type."""

    code = "MALFORMED_BODY"

    def __init__(self, details: str):
        super().__init__(f"Malformed request body: {details}.")


class SeedDataError(Exception):
    """The users seed file is missing or cannot be parsed."""
