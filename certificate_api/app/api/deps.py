"""
FastAPI dependency providers.

The registry lives on ``app.state`` and is injected into each request
through :func:`get_registry`; services are built per request on top of
it.  Tests build an application around their own registry with
``create_app(registry=...)``.

Request bodies are read by :func:`json_body` rather than declared as
body parameters, so a JSON body is decoded whatever ``Content-Type``
the client sends (``curl -d`` defaults to a form type, some clients
send none at all).
"""

from typing import Callable, Type

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from certificate_api.app.api.error_handlers import describe_validation_errors
from certificate_api.app.core.errors import MalformedBodyError
from certificate_api.app.core.registry import Registry
from certificate_api.app.services.certificate_service import CertificateService
from certificate_api.app.services.transfer_service import TransferService


def get_registry(request: Request) -> Registry:
    return request.app.state.registry


def get_certificate_service(registry: Registry = Depends(get_registry)) -> CertificateService:
    return CertificateService(registry)


def get_transfer_service(registry: Registry = Depends(get_registry)) -> TransferService:
    return TransferService(registry)


def json_body(model: Type[BaseModel]) -> Callable:
    """Build a dependency that decodes the request body into ``model``.

    An empty body yields ``model()`` with every field at its default.
    Bytes that are not UTF‑8, invalid JSON and fields of the wrong type
    raise :class:`MalformedBodyError`.
    """

    async def parse(request: Request) -> BaseModel:
        raw = await request.body()
        if not raw.strip():
            return model()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedBodyError("body is not valid UTF-8") from exc
        try:
            return model.model_validate_json(text)
        except ValidationError as exc:
            raise MalformedBodyError(describe_validation_errors(exc.errors())) from exc

    return parse
