"""Domain errors raised by the charge-rate calculators."""

from __future__ import annotations


class ChargeRateError(Exception):
    """Base class for user-correctable calculation errors."""


class InvalidConfigurationError(ChargeRateError):
    """Raised when inputs violate their field constraints.

    Carries every violated constraint, not just the first one found.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))


class NonPositiveBillableHoursError(ChargeRateError):
    """Raised when unbilled time consumes all available weeks."""

    def __init__(
        self,
        billable_hours: float,
        weeks_per_year: float,
        unbilled_weeks: float,
        excluded: dict[str, float],
    ):
        self.billable_hours = billable_hours
        self.weeks_per_year = weeks_per_year
        self.unbilled_weeks = unbilled_weeks
        self.excluded = dict(excluded)
        breakdown = ", ".join(
            f"{name}={weeks:g}w" for name, weeks in self.excluded.items()
        )
        super().__init__(
            f"Billable hours must be positive, got {billable_hours:g}: "
            f"{unbilled_weeks:g} unbilled weeks of {weeks_per_year:g} available "
            f"({breakdown or 'no exclusions'})"
        )
