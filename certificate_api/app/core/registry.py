"""
In‑memory registries for certificates and users.

A :class:`Registry` holds both keyed stores and the lock that guards
them.  The application creates one instance at start‑up and hands it
to request handlers through a FastAPI dependency; nothing in the
package keeps registry state at module level.  Services hold
``registry.lock`` for the whole check‑then‑write sequence of an
operation, so concurrent requests cannot interleave between an
existence check and the write that depends on it.

Nothing is persisted: all certificate state is lost when the process
exits.  Users are seeded once by :func:`build_registry`, either from a
JSON file or from the built‑in demo users.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from certificate_api.app.core.errors import SeedDataError
from certificate_api.app.schemas.certificate import Certificate
from certificate_api.app.schemas.user import User

logger = logging.getLogger(__name__)

DEMO_USERS: List[User] = [
    User(id="10", email="test10@test.com", name="Test User 10"),
    User(id="11", email="test11@test.com", name="Test User 11"),
    User(id="12", email="test12@test.com", name="Test User 12"),
]

_users_adapter = TypeAdapter(List[User])


class Registry:
    """Certificate and user stores keyed by ID."""

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self.certificates: Dict[str, Certificate] = {}
        self.users: Dict[str, User] = {}
        self.lock = threading.RLock()
        for user in users or ():
            self.add_user(user)

    def add_user(self, user: User) -> None:
        with self.lock:
            self.users[user.id] = user

    def has_certificate(self, cert_id: str) -> bool:
        return cert_id in self.certificates

    def has_user(self, user_id: str) -> bool:
        return user_id in self.users

    def find_user_by_email(self, email: str) -> Optional[User]:
        """Return the first user whose e‑mail equals ``email``, or ``None``."""
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def snapshot(self) -> Dict[str, Certificate]:
        """Return a shallow copy of the certificate store."""
        with self.lock:
            return dict(self.certificates)


def load_users(path: str) -> List[User]:
    """Read users from a JSON file holding a list of user objects.

    Raises
    ------
    SeedDataError
        If the file cannot be read, is not valid JSON or does not
        describe a list of users.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise SeedDataError(f"Cannot read users file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"Users file {path} is not valid JSON: {exc}") from exc
    try:
        return _users_adapter.validate_python(raw)
    except ValidationError as exc:
        raise SeedDataError(f"Users file {path} has invalid entries: {exc}") from exc


def build_registry(users_file: str = "") -> Registry:
    """Create a registry seeded from ``users_file`` or the demo users."""
    if users_file:
        users = load_users(users_file)
        logger.info("Loaded %d users from %s", len(users), users_file)
    else:
        users = list(DEMO_USERS)
        logger.info("No users file configured; seeding %d demo users", len(users))
    return Registry(users)
