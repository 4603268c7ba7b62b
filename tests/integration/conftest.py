"""Integration test fixtures: real client, canned HTTP responses."""

from unittest.mock import MagicMock

import httpx
import pytest

from travis_client import TravisClient

TEST_REPO_SLUG = "shuheiktgw/go-travis-test"


@pytest.fixture
def client():
    c = TravisClient(base_url="https://api.travis-ci.com/", token="test-token")
    yield c
    c.close()


@pytest.fixture
def serve(client):
    """Answer every request with ``body``; returns the list of sent requests."""

    def _serve(body, status_code=200):
        sent = []

        def _send(request, **_kw):
            sent.append(request)
            return httpx.Response(status_code, json=body, request=request)

        client._client.send = MagicMock(side_effect=_send)
        return sent

    return _serve


def request_path(request: httpx.Request) -> str:
    """Path as sent on the wire, percent-escapes intact."""
    return request.url.raw_path.decode().partition("?")[0]
