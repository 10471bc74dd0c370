"""Pytest shared fixtures for platform service client tests."""
import json
import pathlib
import sys
from concurrent.futures import Future
from unittest.mock import Mock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from ibm_cloud_sdk_core.authenticators import NoAuthAuthenticator

from ibm_platform_services.core.client import DetailedResponse


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting live services.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(self, method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests.Session, "request", _refuse)


# ─────────────────────────────────────────────────────────────────────────────
# Service fixtures
# ─────────────────────────────────────────────────────────────────────────────
class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, headers=None, content=None, reason="OK", url="https://svc/x"):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        self.headers = CaseInsensitiveDict(headers or {})
        if content is None:
            content = b"" if payload is None else json.dumps(payload).encode()
            if payload is not None:
                self.headers.setdefault("Content-Type", "application/json")
        self.content = content
        self.text = content.decode("utf-8", errors="replace")

    def json(self):
        return json.loads(self.text)


@pytest.fixture()
def stub_response():
    return StubResponse


@pytest.fixture()
def make_service():
    """Build a façade whose transport records requests instead of sending them.

    Returns a factory; the façade's ``client.send`` is a Mock returning an
    already-resolved future.
    """
    created = []

    def _factory(service_cls, **kwargs):
        kwargs.setdefault("authenticator", NoAuthAuthenticator())
        service = service_cls(**kwargs)

        def _resolved(request):
            future = Future()
            future.set_result(DetailedResponse(result={}, status_code=200, status_text="OK"))
            return future

        service.client.send = Mock(side_effect=_resolved)
        created.append(service)
        return service

    yield _factory
    for service in created:
        service.close()


@pytest.fixture()
def sent_request():
    """Return a helper extracting the single RequestDescriptor handed to the transport."""

    def _sent(service):
        assert service.client.send.call_count == 1
        return service.client.send.call_args[0][0]

    return _sent
