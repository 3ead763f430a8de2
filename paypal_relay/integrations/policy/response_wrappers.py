from __future__ import annotations

import json
import logging

import httpx

from paypal_relay.error_handler import ResponseParseError
from paypal_relay.integrations.contracts.interfaces import UpstreamResponse

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN / Infinity cannot be relayed as JSON
    raise ValueError(f"Non-standard JSON constant {name}")


def normalize_upstream_response(response: httpx.Response) -> UpstreamResponse:
    """
    Turn a PayPal response into UpstreamResponse.

    An empty body becomes {}. The status code is relayed as-is, even when the
    body carries a PayPal error.
    """
    text = response.text
    logger.info("PayPal responded: status=%s", response.status_code)

    if not text:
        return UpstreamResponse(parsed_body={}, status_code=response.status_code)

    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ResponseParseError(
            f"Error parsing response: {exc}",
            status_code=response.status_code,
            body=text,
        ) from exc

    return UpstreamResponse(parsed_body=parsed, status_code=response.status_code)
