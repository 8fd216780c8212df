"""
Application package initializer.

The service is split into a few small pieces: ``core`` holds settings,
logging, the error hierarchy and the in‑memory registry; ``schemas``
defines the JSON payloads; ``services`` implements the certificate and
transfer operations; ``api`` exposes them over HTTP.
"""

from .main import app  # noqa: F401
