"""Registry: tests for the in-memory stores and user seeding.

Tests cover:
    - Lookups by ID and by e-mail
    - snapshot() returns a copy in insertion order
    - load_users / build_registry seeding and its failure modes
"""

import json

import pytest

from certificate_api.app.core.errors import SeedDataError
from certificate_api.app.core.registry import (
    DEMO_USERS,
    Registry,
    build_registry,
    load_users,
)
from certificate_api.app.schemas.user import User

from conftest import make_cert


def test_new_registry_has_no_certificates(registry):
    assert registry.certificates == {}
    assert set(registry.users) == {"10", "11", "12"}


def test_has_user_and_has_certificate(registry):
    registry.certificates["1"] = make_cert("1")
    assert registry.has_user("10")
    assert not registry.has_user("100")
    assert registry.has_certificate("1")
    assert not registry.has_certificate("2")


def test_find_user_by_email(registry):
    assert registry.find_user_by_email("test12@test.com").id == "12"
    assert registry.find_user_by_email("test100@test.com") is None
    assert registry.find_user_by_email("") is None


def test_snapshot_is_a_copy_in_insertion_order(registry):
    registry.certificates["2"] = make_cert("2")
    registry.certificates["1"] = make_cert("1")
    snap = registry.snapshot()
    assert list(snap) == ["2", "1"]
    del snap["2"]
    assert registry.has_certificate("2")


def test_registries_do_not_share_state():
    first = Registry(DEMO_USERS)
    second = Registry(DEMO_USERS)
    first.certificates["1"] = make_cert("1")
    first.add_user(User(id="99", email="x@test.com"))
    assert second.certificates == {}
    assert not second.has_user("99")


# --- seeding ------------------------------------------------------------------

def test_build_registry_without_file_uses_demo_users():
    registry = build_registry("")
    assert [u.email for u in registry.users.values()] == [
        "test10@test.com",
        "test11@test.com",
        "test12@test.com",
    ]


def test_load_users_from_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps([
        {"id": "1", "email": "a@test.com", "name": "A"},
        {"id": "2", "email": "b@test.com"},
    ]), encoding="utf-8")

    users = load_users(str(path))

    assert [u.id for u in users] == ["1", "2"]
    assert users[1].name == ""
    assert build_registry(str(path)).find_user_by_email("b@test.com").id == "2"


def test_load_users_missing_file(tmp_path):
    with pytest.raises(SeedDataError, match="Cannot read users file"):
        load_users(str(tmp_path / "missing.json"))


def test_load_users_invalid_json(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SeedDataError, match="not valid JSON"):
        load_users(str(path))


def test_load_users_wrong_shape(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps([{"id": "1"}]), encoding="utf-8")
    with pytest.raises(SeedDataError, match="invalid entries"):
        load_users(str(path))
