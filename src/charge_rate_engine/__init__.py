"""Apprentice charge-rate cost engine."""

from charge_rate_engine.calculators import (
    BillableOptions,
    CalculationResult,
    CostConfig,
    InvalidConfigurationError,
    NonPositiveBillableHoursError,
    OnCosts,
    WorkConfig,
    calculate_charge_rate,
)

__version__ = "1.0.0"

__all__ = [
    "BillableOptions",
    "CalculationResult",
    "CostConfig",
    "InvalidConfigurationError",
    "NonPositiveBillableHoursError",
    "OnCosts",
    "WorkConfig",
    "calculate_charge_rate",
]
