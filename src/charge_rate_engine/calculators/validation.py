"""Input validation run before any derivation."""

from __future__ import annotations

import math

from charge_rate_engine.calculators.errors import InvalidConfigurationError
from charge_rate_engine.calculators.types import BillableOptions, CostConfig, WorkConfig

RATE_FIELDS = ("super_rate", "wc_rate", "payroll_tax_rate", "leave_loading", "admin_rate")
COST_AMOUNT_FIELDS = ("study_cost", "ppe_cost")
ABSENCE_FIELDS = ("annual_leave_days", "public_holidays", "sick_leave_days", "training_weeks")
BILLABLE_FLAGS = (
    "include_annual_leave",
    "include_public_holidays",
    "include_sick_leave",
    "include_training_time",
    "include_adverse_weather",
)


def is_finite_number(value: object) -> bool:
    """True for real, finite numbers. Booleans are rejected."""
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def cost_config_errors(cost: CostConfig) -> list[str]:
    """Return every constraint violated by a cost configuration."""
    errors: list[str] = []

    for name in RATE_FIELDS:
        value = getattr(cost, name)
        if not is_finite_number(value) or not 0 <= value <= 1:
            errors.append(f"{name} must be between 0 and 1, got {value!r}")

    for name in COST_AMOUNT_FIELDS:
        value = getattr(cost, name)
        if not is_finite_number(value) or value < 0:
            errors.append(f"{name} must be a non-negative amount, got {value!r}")

    if not is_finite_number(cost.default_margin) or cost.default_margin < 0:
        errors.append(f"default_margin must be non-negative, got {cost.default_margin!r}")

    days = cost.adverse_weather_days
    if not is_finite_number(days) or days < 0 or not float(days).is_integer():
        errors.append(f"adverse_weather_days must be a non-negative integer, got {days!r}")

    return errors


def work_config_errors(work: WorkConfig) -> list[str]:
    """Return every constraint violated by a work pattern."""
    errors: list[str] = []

    if not is_finite_number(work.hours_per_day) or work.hours_per_day <= 0:
        errors.append(f"hours_per_day must be positive, got {work.hours_per_day!r}")
    if not is_finite_number(work.days_per_week) or not 0 < work.days_per_week <= 7:
        errors.append(f"days_per_week must be in (0, 7], got {work.days_per_week!r}")
    if not is_finite_number(work.weeks_per_year) or not 0 < work.weeks_per_year <= 52:
        errors.append(f"weeks_per_year must be in (0, 52], got {work.weeks_per_year!r}")

    for name in ABSENCE_FIELDS:
        value = getattr(work, name)
        if not is_finite_number(value) or value < 0:
            errors.append(f"{name} must be non-negative, got {value!r}")

    return errors


def billable_options_errors(options: BillableOptions) -> list[str]:
    return [
        f"{name} must be a boolean, got {getattr(options, name)!r}"
        for name in BILLABLE_FLAGS
        if not isinstance(getattr(options, name), bool)
    ]


def validate_inputs(
    pay_rate: float,
    work: WorkConfig,
    cost: CostConfig,
    options: BillableOptions,
    margin: float,
) -> None:
    """Validate all calculation inputs.

    Raises:
        InvalidConfigurationError: listing every violated constraint
    """
    errors: list[str] = []

    if not is_finite_number(pay_rate) or pay_rate < 0:
        errors.append(f"pay_rate must be a non-negative amount, got {pay_rate!r}")
    if not is_finite_number(margin) or margin < 0:
        errors.append(f"margin must be non-negative, got {margin!r}")

    errors.extend(cost_config_errors(cost))
    errors.extend(work_config_errors(work))
    errors.extend(billable_options_errors(options))

    if errors:
        raise InvalidConfigurationError(errors)
