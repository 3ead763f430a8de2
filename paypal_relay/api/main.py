"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from paypal_relay import __version__
from paypal_relay.api.endpoints.orders import orders_api
from paypal_relay.integrations.clients.real_http.paypal_orders import PayPalOrdersClient
from paypal_relay.utils.config_loader import RelayConfig, load_relay_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(
    config: Optional[RelayConfig] = None,
    orders_client: Optional[PayPalOrdersClient] = None,
) -> FastAPI:
    """
    Build the relay application.

    The configuration is read once here and handed to every component; nothing
    below this function looks at the process environment.
    """
    cfg = config or load_relay_config()

    app = FastAPI(
        title="PayPal Checkout Relay",
        description="Creates and captures PayPal orders for the storefront without exposing credentials",
        version=__version__,
    )
    app.state.config = cfg
    app.state.orders_client = orders_client or PayPalOrdersClient(cfg)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register orders router
    app.include_router(orders_api, prefix="/api")
    app.include_router(orders_api)  # same routes without the /api prefix

    # ============================================================================
    # ENDPOINTS
    # ============================================================================
    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the checkout page."""
        return FileResponse(cfg.index_path(), media_type="text/html")

    @app.get("/test", tags=["Health"])
    async def health_check():
        """Liveness check; never calls PayPal."""
        return {"status": "running"}

    # ============================================================================
    # STARTUP/SHUTDOWN EVENTS
    # ============================================================================
    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting PayPal Checkout Relay...")
        logger.info("PayPal API base: %s (environment=%s)", cfg.base_url, cfg.environment)
        if cfg.effective_mock_response:
            logger.warning("PayPal-Mock-Response header enabled for captures: %s", cfg.effective_mock_response)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down PayPal Checkout Relay...")

    # Static assets are mounted last so the routes above take precedence.
    static_path = cfg.static_path()
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path), name="client")
    else:
        logger.warning("Static directory not found, client assets disabled: %s", static_path)

    return app


app = create_app()
