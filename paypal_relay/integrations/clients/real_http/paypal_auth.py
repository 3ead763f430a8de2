"""
PayPal OAuth2 token client.

Exchanges the configured client id / secret for a short-lived bearer token.
@see https://developer.paypal.com/api/rest/authentication/
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Optional

import httpx

from paypal_relay.error_handler import ConfigurationError, RelayError, UpstreamNetworkError
from paypal_relay.integrations.contracts.interfaces import AccessTokenResult
from paypal_relay.utils.config_loader import RelayConfig

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"


class PayPalTokenProvider:
    def __init__(
        self,
        config: RelayConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.transport = transport

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    def _basic_auth(self) -> str:
        raw = f"{self.config.client_id}:{self.config.client_secret}"
        return base64.b64encode(raw.encode("utf-8")).decode("ascii")

    async def obtain_access_token(self) -> AccessTokenResult:
        """
        Fetch a fresh access token.

        Never raises: failures are logged and returned on the result so the
        caller can stop before making a bearer-authorized call.
        """
        if not self.config.has_credentials:
            error = ConfigurationError("MISSING_API_CREDENTIALS")
            logger.error("Failed to generate Access Token: %s", error)
            return AccessTokenResult.failure(error)

        url = f"{self.config.base_url}{TOKEN_PATH}"
        headers = {"Authorization": f"Basic {self._basic_auth()}"}
        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.post(url, data={"grant_type": "client_credentials"}, headers=headers)
            data = response.json()
        except httpx.HTTPError as e:
            error = UpstreamNetworkError(f"Request error connecting to PayPal token endpoint: {e}")
            logger.error("Failed to generate Access Token: %s", error)
            return AccessTokenResult.failure(error)
        except ValueError as e:
            error = RelayError(f"Token endpoint returned a non-JSON body (status={response.status_code}): {e}")
            logger.error("Failed to generate Access Token: %s", error)
            return AccessTokenResult.failure(error)

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            error = RelayError(
                f"Token endpoint returned no access_token (status={response.status_code}, "
                f"error={data.get('error') if isinstance(data, dict) else None})"
            )
            logger.error("Failed to generate Access Token: %s", error)
            return AccessTokenResult.failure(error)

        return AccessTokenResult.success(token)
