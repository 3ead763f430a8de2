from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from paypal_relay.error_handler import ErrorHandler, MalformedInputError
from paypal_relay.integrations.clients.real_http.paypal_orders import PayPalOrdersClient
from paypal_relay.integrations.contracts.interfaces import UpstreamResponse

api = APIRouter()
orders_api = api

error_handler = ErrorHandler()

_NO_BODY_STATUSES = {204, 304}


def get_orders_client(request: Request) -> PayPalOrdersClient:
    return request.app.state.orders_client


def _relay(result: UpstreamResponse) -> Response:
    # 204 / 304 must not carry a body
    if result.status_code in _NO_BODY_STATUSES:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.parsed_body)


async def _read_cart(request: Request) -> Any:
    # The body is read by hand so that a missing or malformed one ends up as the generic 500.
    try:
        body = await request.json()
    except ValueError as exc:
        raise MalformedInputError(f"Request body is not JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise MalformedInputError("Request body must be a JSON object.")
    return body.get("cart")


@api.post("/orders", tags=["Orders"])
async def create_order(request: Request, client: PayPalOrdersClient = Depends(get_orders_client)):
    cart = None
    try:
        # use the cart sent by the storefront to build the order amount
        cart = await _read_cart(request)
        return _relay(await client.create_order(cart))
    except Exception as e:
        return error_handler.handle_exception(e, "Failed to create order.", context={"cart": cart})


@api.post("/orders/{order_id}/capture", tags=["Orders"])
async def capture_order(order_id: str, client: PayPalOrdersClient = Depends(get_orders_client)):
    try:
        return _relay(await client.capture_order(order_id))
    except Exception as e:
        return error_handler.handle_exception(e, "Failed to capture order.", context={"order_id": order_id})
