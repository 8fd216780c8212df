"""Shared fixtures.

Each test gets its own registry seeded with the demo users (10, 11 and
12) and, for route tests, an application built around that registry.
"""

import threading
from typing import Any, Callable, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from certificate_api.app.core.registry import DEMO_USERS, Registry
from certificate_api.app.main import create_app
from certificate_api.app.schemas.certificate import Certificate


def cert_json(cert_id: str = "1", owner_id: str = "10", **overrides: Any) -> Dict[str, Any]:
    """Certificate body as a client would send it."""
    body = {
        "id": cert_id,
        "title": "first cert",
        "createdAt": "29 MAR 2019",
        "ownerId": owner_id,
        "year": 2019,
        "note": "This is the first certificate",
        "transfer": {"to": "", "status": ""},
    }
    body.update(overrides)
    return body


def make_cert(cert_id: str = "1", owner_id: str = "10", **overrides: Any) -> Certificate:
    return Certificate.model_validate(cert_json(cert_id, owner_id, **overrides))


def race(workers: int, action: Callable[[int], Any]) -> List[Tuple[int, Any, Exception]]:
    """Run ``action(i)`` on ``workers`` threads released together.

    Returns one ``(i, result, error)`` tuple per thread.
    """
    barrier = threading.Barrier(workers)
    outcomes = []

    def run(i: int) -> None:
        barrier.wait()
        try:
            outcomes.append((i, action(i), None))
        except Exception as exc:  # noqa: BLE001
            outcomes.append((i, None, exc))

    threads = [threading.Thread(target=run, args=(i,)) for i in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return outcomes


@pytest.fixture
def registry() -> Registry:
    return Registry(DEMO_USERS)


@pytest.fixture
def client(registry: Registry):
    with TestClient(create_app(registry=registry)) as test_client:
        yield test_client
