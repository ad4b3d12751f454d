"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from charge_rate_engine.api.routes import charge_rates_router, health_router
from charge_rate_engine.calculators.errors import (
    InvalidConfigurationError,
    NonPositiveBillableHoursError,
)
from charge_rate_engine.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Charge Rate Engine API",
        description="Apprentice host-employer charge rate calculations",
        version=settings.engine_version,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidConfigurationError)
    async def invalid_configuration_handler(
        request: Request, exc: InvalidConfigurationError
    ) -> JSONResponse:
        """Report every violated input constraint."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": str(exc),
                "code": "INVALID_CONFIGURATION",
                "context": {"errors": exc.errors},
            },
        )

    @app.exception_handler(NonPositiveBillableHoursError)
    async def non_positive_billable_hours_handler(
        request: Request, exc: NonPositiveBillableHoursError
    ) -> JSONResponse:
        """Explain which exclusions used up the billable weeks."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": str(exc),
                "code": "NON_POSITIVE_BILLABLE_HOURS",
                "context": {
                    "billable_hours": exc.billable_hours,
                    "weeks_per_year": exc.weeks_per_year,
                    "unbilled_weeks": exc.unbilled_weeks,
                    "excluded": exc.excluded,
                },
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(charge_rates_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
