import pytest
from fastapi.testclient import TestClient

from paypal_relay.api.main import create_app
from paypal_relay.integrations.clients.real_http.paypal_orders import PayPalOrdersClient
from paypal_relay.utils.config_loader import RelayConfig


@pytest.fixture
def client(relay_config, paypal):
    app = create_app(relay_config, orders_client=PayPalOrdersClient(relay_config, transport=paypal.transport))
    return TestClient(app)


@pytest.mark.parametrize("path", ["/api/orders", "/orders"])
def test_create_order_relays_status_and_body(client, cart, path):
    response = client.post(path, json={"cart": cart})

    assert response.status_code == 201
    assert response.json() == {"id": "5O190127TN364715T", "status": "CREATED"}


def test_create_order_round_trip_is_unchanged(client, paypal, cart):
    paypal.order_response = (201, {"json": {"id": "5O190127TN364715T"}})

    response = client.post("/api/orders", json={"cart": cart})

    assert response.status_code == 201
    assert response.json() == {"id": "5O190127TN364715T"}


def test_create_order_relays_provider_errors(client, paypal, cart):
    invalid = {"name": "INVALID_REQUEST", "details": [{"issue": "CURRENCY_NOT_SUPPORTED"}]}
    paypal.order_response = (400, {"json": invalid})

    response = client.post("/api/orders", json={"cart": cart})

    assert response.status_code == 400
    assert response.json() == invalid


def test_non_json_upstream_body_becomes_generic_500(client, paypal, cart):
    paypal.order_response = (200, {"text": "not json"})

    response = client.post("/api/orders", json={"cart": cart})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}


@pytest.mark.parametrize("body", [{}, {"cart": []}, {"cart": [{"quantity": "1"}]}, {"cart": None}])
def test_malformed_cart_becomes_generic_500(client, paypal, body):
    response = client.post("/api/orders", json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
    assert paypal.requests == []


def test_missing_credentials_fail_create_without_upstream_call(paypal, cart):
    cfg = RelayConfig()
    app = create_app(cfg, orders_client=PayPalOrdersClient(cfg, transport=paypal.transport))

    response = TestClient(app).post("/api/orders", json={"cart": cart})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
    assert paypal.requests == []


@pytest.mark.parametrize("path", ["/api/orders/5O190127TN364715T/capture", "/orders/5O190127TN364715T/capture"])
def test_capture_order_relays_status_and_body(client, paypal, path):
    response = client.post(path)

    assert response.status_code == 201
    assert response.json()["status"] == "COMPLETED"
    assert paypal.calls_to("/capture")[0].url.path == "/v2/checkout/orders/5O190127TN364715T/capture"


def test_capture_failure_becomes_generic_500(client, paypal):
    paypal.raise_on = "/capture"

    response = client.post("/api/orders/5O190127TN364715T/capture")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to capture order."}


def test_empty_upstream_body_is_relayed_without_content(client, paypal):
    paypal.capture_response = (204, {})

    response = client.post("/api/orders/5O190127TN364715T/capture")

    assert response.status_code == 204
    assert response.content == b""


def test_error_responses_hide_internal_detail(client, paypal, cart):
    paypal.raise_on = "/v2/checkout/orders"

    response = client.post("/api/orders", json={"cart": cart})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
    assert "connection refused" not in response.text


def test_health_check_never_calls_paypal(client, paypal):
    response = client.get("/test")

    assert response.status_code == 200
    assert response.json() == {"status": "running"}
    assert paypal.requests == []


def test_root_serves_checkout_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "paypal-button-container" in response.text


def test_static_client_assets_are_served(client):
    response = client.get("/app.js")

    assert response.status_code == 200
    assert "/api/orders" in response.text


def test_static_dir_can_be_relocated(tmp_path, paypal):
    (tmp_path / "shop.html").write_text("<html><body>shop</body></html>", encoding="utf-8")
    cfg = RelayConfig(client_id="id", client_secret="secret", static_dir=str(tmp_path), index_file="shop.html")
    app = create_app(cfg, orders_client=PayPalOrdersClient(cfg, transport=paypal.transport))

    response = TestClient(app).get("/")

    assert response.status_code == 200
    assert "shop" in response.text


def test_cors_allows_browser_origins(client):
    response = client.options(
        "/api/orders",
        headers={"Origin": "https://shop.example.com", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "https://shop.example.com")


def test_missing_body_becomes_generic_500(client, paypal):
    response = client.post("/api/orders")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
    assert paypal.requests == []


@pytest.mark.parametrize(
    "body",
    [
        {"cart": "abc"},
        {"cart": {"unit_amount": 1}},
        {"cart": {"unit_amount": {"currency_code": "USD", "value": "1.00"}}},
        ["not", "an", "object"],
        "just a string",
    ],
)
def test_cart_of_the_wrong_shape_becomes_generic_500(client, paypal, body):
    response = client.post("/api/orders", json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
    assert paypal.requests == []


def test_form_encoded_body_becomes_generic_500(client, paypal):
    response = client.post("/api/orders", data={"cart": "abc"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
    assert "detail" not in response.json()
    assert paypal.requests == []


@pytest.mark.parametrize("encoded_id", ["ABC%3Fx%3D1", "ABC%23frag", "ABC%20DEF"])
def test_capture_with_unsafe_order_id_becomes_generic_500(client, paypal, encoded_id):
    response = client.post(f"/api/orders/{encoded_id}/capture")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to capture order."}
    assert paypal.requests == []


def test_non_standard_json_from_paypal_becomes_generic_500(client, paypal, cart):
    paypal.order_response = (201, {"text": '{"id": "5O190127TN364715T", "amount": NaN}'})

    response = client.post("/api/orders", json={"cart": cart})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order."}
