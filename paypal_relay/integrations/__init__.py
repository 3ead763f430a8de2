"""
Integrations layer.

This package contains all code used to communicate with PayPal:
- OAuth2 client-credentials token exchange
- Orders v2 create / capture calls
- Normalization of upstream responses

Key rule:
- Routers MUST NOT call PayPal directly.
- Routers call the clients under paypal_relay/integrations/clients.

Wiring:
- Clients are constructed in ONE place (paypal_relay/api/main.py) from a RelayConfig.
"""

from .contracts.interfaces import AccessTokenResult, CartLineItem, UnitAmount, UpstreamResponse
from .clients.real_http.paypal_auth import PayPalTokenProvider
from .clients.real_http.paypal_orders import PayPalOrdersClient

__all__ = [
    "AccessTokenResult",
    "CartLineItem",
    "UnitAmount",
    "UpstreamResponse",
    "PayPalTokenProvider",
    "PayPalOrdersClient",
]
