"""
Pydantic model for user data.

Users are seeded at start‑up and only read afterwards: certificate
operations check owner IDs against them and transfers look recipients
up by e‑mail.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    id: str = Field(..., examples=["10"])
    email: str = Field(..., examples=["test10@test.com"])
    name: str = Field("", examples=["Test User 10"])
