"""Error types and last-resort error responses for the checkout relay."""
from typing import Any, Dict, Optional
import logging

from fastapi import status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RelayError(Exception):
    """Base class for every error raised by the relay."""


class ConfigurationError(RelayError):
    """Required PayPal credentials are not configured."""


class UpstreamNetworkError(RelayError):
    """Transport failure while calling PayPal."""


class ResponseParseError(RelayError):
    """PayPal answered with a non-empty body that is not JSON."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedInputError(RelayError):
    """The storefront sent a cart without the fields an order needs."""


class TokenAcquisitionError(RelayError):
    """No access token could be obtained, so the signed call was not attempted."""


class ErrorHandler:
    def handle_exception(
        self,
        exc: Exception,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        logger.error("%s %s (context=%s)", message, exc, context or {}, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message},
        )
