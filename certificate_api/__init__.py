"""
Top‑level package for the Certificate Registry API.

This file makes ``certificate_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``certificate_api.app.main``.  The package provides no public exports;
all functionality lives in submodules under ``app``.
"""

__all__ = []
