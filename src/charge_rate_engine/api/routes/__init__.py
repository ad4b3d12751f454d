"""API routes."""

from charge_rate_engine.api.routes.charge_rates import router as charge_rates_router
from charge_rate_engine.api.routes.health import router as health_router

__all__ = ["charge_rates_router", "health_router"]
