"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one resource (certificates,
transfers, users).  The routers are aggregated in ``router.py``.
"""
