"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from device_loans.api.error_handlers import register_error_handlers
from device_loans.api.v1 import device_loan_router, product_router
from device_loans.core.config import Settings, get_settings
from device_loans.core.observability import setup_logging
from device_loans.di.container import DIContainer

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Settings and the dependency container, stored on app.state
    - CORS middleware configuration
    - Error handlers producing the {success, error} envelope
    - API route registration

    Args:
        settings: Settings to use; read from the environment if omitted
        container: Prebuilt container; built from settings if omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    container = container or DIContainer(settings)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Device Loans API started (environment=%s)", settings.environment)
        yield
        await application.state.container.close()
        logger.info("Device Loans API stopped")

    application = FastAPI(
        title="Device Loans API",
        description="Device catalog and device loan management backed by Cosmos DB",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(product_router)
    application.include_router(device_loan_router, prefix="/loans")

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
