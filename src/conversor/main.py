"""
Conversor Main Application Entry Point

Startup creates the converter state, which triggers the one and only rate
fetch in the background; the API serves requests while it is pending.
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from conversor import __version__
from conversor.api import router
from conversor.config import get_settings
from conversor.providers import BaseRateSource, FxRatesApiClient
from conversor.state import ConverterState

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app(
    rate_source: BaseRateSource | None = None,
    converter: ConverterState | None = None
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        rate_source: Source used at startup (defaults to FxRatesApiClient)
        converter: Already running converter state; skips startup creation
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management."""
        logger.info(f"🚀 Starting Conversor v.{__version__}")

        created = False
        if getattr(app.state, "converter", None) is None:
            app.state.converter = ConverterState(rate_source or FxRatesApiClient())
            created = True
            logger.info("📥 Rate fetch scheduled")

        yield

        logger.info("🛑 Shutting down Conversor")
        if created:
            await app.state.converter.aclose()
            app.state.converter = None

    app = FastAPI(
        title="Conversor",
        description="Interactive currency converter",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json"
    )
    app.state.converter = converter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Conversor",
            "version": __version__,
            "description": "Interactive currency converter",
            "docs": "/docs",
            "api": {
                "converter": "/api/v1/converter",
                "source": "/api/v1/converter/source",
                "target": "/api/v1/converter/target",
                "amount": "/api/v1/converter/amount",
                "currencies": "/api/v1/currencies",
                "health": "/api/v1/health"
            }
        }

    return app


# Create application instance
app = create_app()


def main():
    """Main entry point for running the server."""
    settings = get_settings()

    logger.info(f"Starting Conversor server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "conversor.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
