"""
StoreClient tests. The client talks to the real admin API through an adapter
that routes requests.Session-style calls into the Flask test client.
Run with: pytest tests/test_client.py -v
"""

from unittest.mock import MagicMock
from urllib.parse import urlsplit

import pytest
import requests

from folio.core.client import StoreClient
from folio.core.exceptions import NotFoundError, TransportError, ValidationError
from folio.core.sync import make_panel


class FlaskResponse:
    """Just enough of requests.Response"""

    def __init__(self, response):
        self.status_code = response.status_code
        self.text = response.get_data(as_text=True)
        self.reason = response.status
        self._json = response.get_json(silent=True)

    def json(self):
        if self._json is None:
            raise ValueError("No JSON body")
        return self._json


class FlaskSession:
    """requests.Session stand-in backed by a Flask test client"""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, timeout))
        path = urlsplit(url).path
        return FlaskResponse(self.test_client.open(path, method=method, **kwargs))


@pytest.fixture
def store_client(client):
    client.post("/admin/create-admin", json={"email": "admin@example.com", "password": "long-enough"})
    return StoreClient("http://folio.test/", timeout=5, session=FlaskSession(client))


# ---------------------------------------------------------------------------
# Over the admin API
# ---------------------------------------------------------------------------

def test_login(store_client):
    assert store_client.login("admin@example.com", "wrong-password") is False
    assert store_client.login("admin@example.com", "long-enough") is True


def test_requests_use_base_url_and_timeout(store_client):
    store_client.login("admin@example.com", "long-enough")
    store_client.collection("services").list()

    method, url, timeout = store_client.session.calls[-1]
    assert (method, url, timeout) == ("GET", "http://folio.test/admin/services/api/services", 5)


def test_collection_contract(store_client):
    store_client.login("admin@example.com", "long-enough")
    blogs = store_client.collection("blogs")

    b1 = blogs.create({"title": "Old", "content": "Body", "author": "Admin", "date": 1})
    assert blogs.get_by_id(b1["id"]) == b1

    updated = blogs.update(b1["id"], {"title": "New"})
    assert updated == dict(b1, title="New")

    assert blogs.delete(b1["id"]) == {"success": True, "deleted_id": b1["id"]}
    assert blogs.get_by_id(b1["id"]) is None
    assert blogs.list() == []


def test_errors_map_to_folio_errors(store_client):
    store_client.login("admin@example.com", "long-enough")
    services = store_client.collection("services")

    with pytest.raises(ValidationError):
        services.create({"title": "No description"})
    with pytest.raises(NotFoundError):
        services.update(404, {"title": "x"})
    with pytest.raises(NotFoundError):
        services.delete(404)


def test_without_login_requests_fail(store_client):
    with pytest.raises(TransportError):
        store_client.collection("projects").list()


def test_panel_driven_by_client(store_client):
    """An AdminPanel works the same over HTTP as against the local store."""
    store_client.login("admin@example.com", "long-enough")
    messages = []
    panel = make_panel("heroImages", store_client.collection("heroImages"), notify=messages.append)

    panel.refresh()
    assert panel.view()["is_fallback"] is True

    panel.add()
    panel.set_field("title", "Welcome")
    saved = panel.save()
    panel.refresh()

    assert panel.records == [saved]
    assert messages == []


def test_unknown_collection(store_client):
    with pytest.raises(ValueError):
        store_client.collection("comments")


# ---------------------------------------------------------------------------
# Transport failures
# ---------------------------------------------------------------------------

def test_connection_error_is_transport_error():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    client = StoreClient("http://folio.test", session=session)

    with pytest.raises(TransportError):
        client.collection("projects").list()
    assert session.request.call_count == 1, "no retries"


def test_server_error_is_transport_error():
    session = MagicMock()
    session.request.return_value = MagicMock(status_code=503, reason="Service Unavailable",
                                             json=MagicMock(return_value={"error": "store down"}))
    client = StoreClient("http://folio.test", session=session)

    with pytest.raises(TransportError) as exc:
        client.collection("blogs").get_by_id(1)
    assert "store down" in str(exc.value)
