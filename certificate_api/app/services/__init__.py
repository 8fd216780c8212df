"""
Service layer.

Each service encapsulates the business rules for one part of the
domain and works against a :class:`~certificate_api.app.core.registry.Registry`
passed in by the caller, so the HTTP layer never touches the stores
directly.
"""
