"""
Pydantic schemas for certificates and their embedded transfer record.

JSON field names are camelCase (``createdAt``, ``ownerId``) while the
Python attributes are snake_case; models accept either form on input
and serialise with the camelCase aliases.  Every field has a zero
default so a partial body decodes to a record whose missing values are
empty strings, ``0`` and an idle transfer.  ``year`` must be a JSON
integer; a numeric string such as ``"2019"`` is rejected.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class TransferStatus(str, Enum):
    """State of a certificate's ownership transfer."""

    IDLE = ""
    REQUESTED = "Requested"


class Transfer(BaseModel):
    """Transfer sub‑record embedded in every certificate."""

    to: str = Field("", description="E‑mail address of the recipient", examples=["test12@test.com"])
    status: TransferStatus = TransferStatus.IDLE

    @property
    def is_idle(self) -> bool:
        return self.to == "" and self.status is TransferStatus.IDLE

    @property
    def is_pending(self) -> bool:
        return self.status is TransferStatus.REQUESTED


class Certificate(BaseModel):
    """A certificate record as stored in the registry and sent over the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field("", examples=["1"])
    title: str = Field("", examples=["first cert"])
    created_at: str = Field("", examples=["29 MAR 2019"])
    owner_id: str = Field("", examples=["10"])
    year: StrictInt = Field(0, examples=[2019])
    note: str = ""
    transfer: Transfer = Field(default_factory=Transfer)


class TransferRequest(BaseModel):
    """Body of ``POST /certificates/{id}/transfers``.

    ``status`` is accepted for compatibility with existing clients but
    the stored status is always ``Requested``.
    """

    to: str = ""
    status: TransferStatus = TransferStatus.REQUESTED
