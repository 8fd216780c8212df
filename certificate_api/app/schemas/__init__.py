"""
Pydantic schema definitions for API payloads.

Certificates, their embedded transfer record and users each have
their own module.
"""
