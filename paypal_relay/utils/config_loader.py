"""
Configuration loader for the checkout relay
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

LIVE_BASE_URL = "https://api-m.paypal.com"
SANDBOX_BASE_URL = "https://api-m.sandbox.paypal.com"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "relay_config.yml"

# Environment variable -> RelayConfig field
_ENV_FIELDS = {
    "PAYPAL_CLIENT_ID": "client_id",
    "PAYPAL_CLIENT_SECRET": "client_secret",
    "PAYPAL_ENV": "environment",
    "PORT": "port",
    "PAYPAL_TIMEOUT_SECONDS": "timeout_seconds",
    "PAYPAL_MOCK_RESPONSE": "mock_response",
    "CLIENT_STATIC_DIR": "static_dir",
    "CLIENT_INDEX_FILE": "index_file",
}


class RelayConfig(BaseModel):
    """Process-wide PayPal relay settings. Built once at startup, never mutated."""

    model_config = ConfigDict(frozen=True)

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    environment: str = "sandbox"
    port: int = Field(default=8888, ge=1, le=65535)
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    # Sandbox negative testing, e.g. '{"mock_application_codes": "INSTRUMENT_DECLINED"}'
    mock_response: Optional[str] = None
    static_dir: str = "client"
    index_file: str = "checkout.html"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @property
    def is_live(self) -> bool:
        return self.environment.strip().lower() == "live"

    @property
    def base_url(self) -> str:
        return LIVE_BASE_URL if self.is_live else SANDBOX_BASE_URL

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)

    @property
    def effective_mock_response(self) -> Optional[str]:
        """Mock header value to send, never honoured against the live API."""
        if self.is_live or not self.mock_response:
            return None
        return self.mock_response

    def static_path(self) -> Path:
        path = Path(self.static_dir)
        if not path.is_absolute():
            path = Path(__file__).parent.parent.parent / path
        return path

    def index_path(self) -> Path:
        return self.static_path() / self.index_file


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_key, field_name in _ENV_FIELDS.items():
        value = env.get(env_key)
        if value is None or not value.strip():
            continue
        overrides[field_name] = value.strip()
    return overrides


def load_relay_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> RelayConfig:
    """
    Load and validate relay configuration.

    Args:
        config_path: Optional YAML file. Defaults to config/relay_config.yml when present.
        env: Mapping to read overrides from. Defaults to os.environ.

    Returns:
        Validated RelayConfig object

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If the merged settings don't match the schema
    """
    data: Dict[str, Any] = {}

    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Relay config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data.update(yaml.safe_load(f) or {})

    data.update(_env_overrides(os.environ if env is None else env))

    try:
        cfg = RelayConfig(**data)
    except ValidationError as e:
        logger.error("Relay config validation failed: %s", e)
        raise

    if not cfg.has_credentials:
        logger.warning("PAYPAL_CLIENT_ID / PAYPAL_CLIENT_SECRET are not set.")
    return cfg
