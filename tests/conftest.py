"""
Shared fixtures: a StripeClient whose requests go to an httpx.MockTransport.
"""
from urllib.parse import parse_qsl

import httpx
import pytest

from stripekit.clients import StripeAPIHandler, StripeClient
from stripekit.config import StripeConfig


@pytest.fixture
def config():
    return StripeConfig(api_key="sk_test_123")


@pytest.fixture
def sent():
    """Requests captured by the mock transport, in order."""
    return []


@pytest.fixture
def mock_http(sent):
    """
    Factory for an httpx.AsyncClient answering every request with one response.

    Pass ``payload`` for a JSON body or ``text`` for a raw body.
    """
    def factory(payload=None, *, status=200, text=None, headers=None):
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if text is not None:
                return httpx.Response(status, text=text, headers=headers)
            return httpx.Response(status, json=payload if payload is not None else {}, headers=headers)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def make_handler(config, mock_http):
    def factory(payload=None, **kwargs):
        return StripeAPIHandler(config, http_client=mock_http(payload, **kwargs))
    return factory


@pytest.fixture
def make_client(config, mock_http):
    def factory(payload=None, **kwargs):
        return StripeClient(config, http_client=mock_http(payload, **kwargs))
    return factory


@pytest.fixture
def form():
    """Decoder for the (key, value) pairs of a form-encoded request body."""
    def decode(request: httpx.Request) -> list:
        return parse_qsl(request.content.decode("utf-8"), keep_blank_values=True)
    return decode
