"""Pytest fixtures for the PayPal relay tests."""

import json

import httpx
import pytest

from paypal_relay.utils.config_loader import RelayConfig

def _build(canned):
    status, kwargs = canned
    return httpx.Response(status, **kwargs)


class FakePayPal:
    """Records every request and answers token / order calls with canned responses."""

    def __init__(self, token="A21AAF-test-token"):
        self.requests = []
        self.token = token
        self.token_response = None
        # (status, httpx.Response kwargs); built fresh per request
        self.order_response = (201, {"json": {"id": "5O190127TN364715T", "status": "CREATED"}})
        self.capture_response = (201, {"json": {"id": "5O190127TN364715T", "status": "COMPLETED"}})
        self.raise_on = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if self.raise_on and self.raise_on in path:
            raise httpx.ConnectError("connection refused", request=request)
        if path == "/v1/oauth2/token":
            if self.token_response is not None:
                return _build(self.token_response)
            return httpx.Response(200, json={"access_token": self.token, "token_type": "Bearer", "expires_in": 32400})
        if path.endswith("/capture"):
            return _build(self.capture_response)
        if path == "/v2/checkout/orders":
            return _build(self.order_response)
        return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls_to(self, fragment):
        return [r for r in self.requests if fragment in r.url.path]

    @staticmethod
    def json_body(request):
        return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def paypal():
    return FakePayPal()


@pytest.fixture
def relay_config():
    return RelayConfig(client_id="client-id", client_secret="client-secret", environment="sandbox")


@pytest.fixture
def cart():
    return [
        {"id": "SKU-1", "quantity": "2", "unit_amount": {"currency_code": "USD", "value": "100.00"}},
        {"id": "SKU-2", "quantity": "1", "unit_amount": {"currency_code": "EUR", "value": "5.00"}},
    ]
