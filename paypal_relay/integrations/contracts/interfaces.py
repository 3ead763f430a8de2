from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from paypal_relay.error_handler import RelayError


# ---------------------------------------------------------------------------
# Storefront cart
# ---------------------------------------------------------------------------

class UnitAmount(BaseModel):
    currency_code: str
    value: Union[str, int, float]   # relayed as sent; PayPal expects a decimal string


class CartLineItem(BaseModel):
    # quantity, sku, name... are accepted and ignored
    model_config = ConfigDict(extra="allow")

    unit_amount: UnitAmount


# ---------------------------------------------------------------------------
# Upstream results
# ---------------------------------------------------------------------------

class UpstreamResponse(BaseModel):
    parsed_body: Any = Field(default_factory=dict)
    status_code: int


@dataclass(frozen=True)
class AccessTokenResult:
    token: Optional[str] = None
    error: Optional[RelayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.token)

    @classmethod
    def success(cls, token: str) -> "AccessTokenResult":
        return cls(token=token)

    @classmethod
    def failure(cls, error: RelayError) -> "AccessTokenResult":
        return cls(error=error)
