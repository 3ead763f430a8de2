"""
PayPal Orders v2 HTTP client.

Creates and captures orders on behalf of the storefront. Every call fetches a
fresh access token first and issues exactly one signed upstream request.
@see https://developer.paypal.com/docs/api/orders/v2/
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Sequence
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from paypal_relay.error_handler import MalformedInputError, TokenAcquisitionError, UpstreamNetworkError
from paypal_relay.integrations.clients.real_http.paypal_auth import PayPalTokenProvider
from paypal_relay.integrations.contracts.interfaces import CartLineItem, UpstreamResponse
from paypal_relay.integrations.policy.response_wrappers import normalize_upstream_response
from paypal_relay.utils.config_loader import RelayConfig

logger = logging.getLogger(__name__)

ORDERS_PATH = "/v2/checkout/orders"
MOCK_RESPONSE_HEADER = "PayPal-Mock-Response"

# PayPal order ids are alphanumeric; "-" and "_" are tolerated
_ORDER_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,64}")


def build_order_payload(cart: Sequence[Any]) -> Dict[str, Any]:
    """
    Build the create-order payload from the storefront cart.

    Only the first line item's unit_amount is used; further items are not
    aggregated.
    """
    if not isinstance(cart, (list, tuple)):
        raise MalformedInputError(f"Cart must be a list of line items, got {type(cart).__name__}.")
    if not cart:
        raise MalformedInputError("Cart is empty or missing.")

    first = cart[0]
    try:
        item = first if isinstance(first, CartLineItem) else CartLineItem.model_validate(first)
    except ValidationError as exc:
        raise MalformedInputError(f"Invalid cart line item: {exc}") from exc

    return {
        "intent": "CAPTURE",
        "purchase_units": [
            {
                "amount": {
                    "currency_code": item.unit_amount.currency_code,
                    "value": item.unit_amount.value,
                },
            },
        ],
    }


def capture_url(base_url: str, order_id: Any) -> str:
    """Capture endpoint for one order; the id must stay a single path segment."""
    if not isinstance(order_id, str) or not _ORDER_ID_RE.fullmatch(order_id):
        raise MalformedInputError(f"Invalid order id: {order_id!r}")
    return f"{base_url}{ORDERS_PATH}/{quote(order_id, safe='')}/capture"


class PayPalOrdersClient:
    def __init__(
        self,
        config: RelayConfig,
        token_provider: Optional[PayPalTokenProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.transport = transport
        self.token_provider = token_provider or PayPalTokenProvider(config, transport=transport)

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    async def _headers(self) -> Dict[str, str]:
        result = await self.token_provider.obtain_access_token()
        if not result.ok:
            raise TokenAcquisitionError("Could not obtain a PayPal access token.") from result.error
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {result.token}",
        }

    async def _post(self, url: str, headers: Dict[str, str], payload: Optional[Dict[str, Any]] = None) -> UpstreamResponse:
        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                if payload is None:
                    response = await client.post(url, headers=headers)
                else:
                    response = await client.post(url, json=payload, headers=headers)
        except httpx.RequestError as e:
            logger.error("Request error connecting to PayPal: %s", e)
            raise UpstreamNetworkError(f"Request error connecting to PayPal: {e}") from e

        return normalize_upstream_response(response)

    async def create_order(self, cart: Sequence[Any]) -> UpstreamResponse:
        """Create an order to start the transaction."""
        logger.info("Creating PayPal Order with cart: %s", cart)
        payload = build_order_payload(cart)

        headers = await self._headers()
        return await self._post(f"{self.config.base_url}{ORDERS_PATH}", headers, payload)

    async def capture_order(self, order_id: str) -> UpstreamResponse:
        """Capture payment for the created order to complete the transaction."""
        url = capture_url(self.config.base_url, order_id)

        headers = await self._headers()
        mock_response = self.config.effective_mock_response
        if mock_response:
            headers[MOCK_RESPONSE_HEADER] = mock_response

        logger.info("Capturing PayPal Order %s", order_id)
        return await self._post(url, headers)
