"""CertificateRegistryClient: request building and (data, error) results.

The requests session is mocked; responses are real ``requests.Response``
objects so ``raise_for_status`` behaves as in production.
"""

from unittest.mock import MagicMock

import pytest
import requests

from certificate_client import CertificateRegistryClient

from conftest import cert_json


def make_response(status_code: int, body: bytes = b"") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    response.url = "http://test"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return CertificateRegistryClient(base_url="http://test/", session=session, timeout=5)


def test_create_certificate_posts_body(api, session):
    body = cert_json("1")
    session.request.return_value = make_response(200, b'{"1": {"id": "1"}}')

    data, error = api.create_certificate(body)

    assert error is None
    assert data == {"1": {"id": "1"}}
    session.request.assert_called_once_with(
        method="POST", url="http://test/certificates/1", json=body, timeout=5,
    )


def test_update_and_delete_paths(api, session):
    session.request.return_value = make_response(200, b"{}")

    api.update_certificate(cert_json("3"))
    api.delete_certificate("3")

    calls = [(c.kwargs["method"], c.kwargs["url"]) for c in session.request.call_args_list]
    assert calls == [
        ("PUT", "http://test/certificates/3"),
        ("DELETE", "http://test/certificates/3"),
    ]


def test_list_certificates(api, session):
    session.request.return_value = make_response(200, b"{}\n")

    data, error = api.list_certificates("11")

    assert (data, error) == ({}, None)
    assert session.request.call_args.kwargs["url"] == "http://test/users/11/certificates"


def test_error_message_comes_from_plain_text_body(api, session):
    session.request.return_value = make_response(
        400, b"User ID 100 is invalid. Cannot list certificates.\n",
    )

    data, error = api.list_certificates("100")

    assert data is None
    assert error == {
        "status_code": 400,
        "message": "User ID 100 is invalid. Cannot list certificates.",
    }


def test_request_transfer_sends_recipient(api, session):
    session.request.return_value = make_response(200, b'{"id": "1"}')

    data, error = api.request_transfer("1", "test12@test.com")

    assert data == {"id": "1"}
    assert session.request.call_args.kwargs["json"] == {
        "to": "test12@test.com",
        "status": "Requested",
    }


def test_accept_transfer_with_empty_body(api, session):
    session.request.return_value = make_response(200)

    assert api.accept_transfer("1") == (True, None)
    assert session.request.call_args.kwargs["method"] == "PUT"


def test_accept_transfer_failure(api, session):
    session.request.return_value = make_response(
        400, b"No transfer has been requested for certificate 2.\n",
    )

    ok, error = api.accept_transfer("2")

    assert not ok
    assert error["message"] == "No transfer has been requested for certificate 2."


def test_transport_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    data, error = api.get_certificate("1")

    assert data is None
    assert error == {"status_code": None, "message": "connection refused"}
