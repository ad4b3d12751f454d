"""Charge-rate calculation engine."""

from charge_rate_engine.calculators.batch import BatchCalculationResult, BatchCalculator
from charge_rate_engine.calculators.engine import calculate_charge_rate, inputs_fingerprint
from charge_rate_engine.calculators.errors import (
    ChargeRateError,
    InvalidConfigurationError,
    NonPositiveBillableHoursError,
)
from charge_rate_engine.calculators.hours import billable_hours, total_annual_hours
from charge_rate_engine.calculators.oncosts import LEAVE_LOADING_HOURS_CAP, calculate_on_costs
from charge_rate_engine.calculators.types import (
    BillableOptions,
    CalculationResult,
    CostConfig,
    OnCosts,
    WorkConfig,
)

__all__ = [
    "BatchCalculationResult",
    "BatchCalculator",
    "BillableOptions",
    "CalculationResult",
    "ChargeRateError",
    "CostConfig",
    "InvalidConfigurationError",
    "LEAVE_LOADING_HOURS_CAP",
    "NonPositiveBillableHoursError",
    "OnCosts",
    "WorkConfig",
    "billable_hours",
    "calculate_charge_rate",
    "calculate_on_costs",
    "inputs_fingerprint",
    "total_annual_hours",
]
