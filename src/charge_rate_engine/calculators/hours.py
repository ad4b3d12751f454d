"""Annual and billable hours derivation."""

from __future__ import annotations

from charge_rate_engine.calculators.errors import NonPositiveBillableHoursError
from charge_rate_engine.calculators.types import (
    BillableOptions,
    CostConfig,
    UnbilledTime,
    WorkConfig,
)


def total_annual_hours(work: WorkConfig) -> float:
    """Rostered hours for the year: hours/day x days/week x weeks/year."""
    return work.hours_per_day * work.days_per_week * work.weeks_per_year


def unbilled_time(
    work: WorkConfig, cost: CostConfig, options: BillableOptions
) -> UnbilledTime:
    """Work out how much time is removed from the billable denominator.

    A category counts as unbilled when its ``include_*`` flag is False.
    Day-denominated categories are converted to weeks using
    ``days_per_week``; training is already expressed in weeks.
    """
    day_categories = [
        ("annual_leave", options.include_annual_leave, work.annual_leave_days),
        ("public_holidays", options.include_public_holidays, work.public_holidays),
        ("sick_leave", options.include_sick_leave, work.sick_leave_days),
        ("adverse_weather", options.include_adverse_weather, cost.adverse_weather_days),
    ]

    excluded: dict[str, float] = {}
    unbilled_days = 0.0
    for name, included, days in day_categories:
        if not included:
            unbilled_days += days
            excluded[name] = days / work.days_per_week

    unbilled_weeks = unbilled_days / work.days_per_week

    if not options.include_training_time:
        unbilled_weeks += work.training_weeks
        excluded["training"] = float(work.training_weeks)

    return UnbilledTime(
        unbilled_days=unbilled_days,
        unbilled_weeks=unbilled_weeks,
        excluded=excluded,
    )


def billable_hours(
    work: WorkConfig, cost: CostConfig, options: BillableOptions
) -> float:
    """Hours across which the year's total cost is spread.

    Raises:
        NonPositiveBillableHoursError: If unbilled time uses up every week
    """
    unbilled = unbilled_time(work, cost, options)
    billable_weeks = work.weeks_per_year - unbilled.unbilled_weeks
    hours = work.hours_per_day * work.days_per_week * billable_weeks

    if hours <= 0:
        raise NonPositiveBillableHoursError(
            billable_hours=hours,
            weeks_per_year=work.weeks_per_year,
            unbilled_weeks=unbilled.unbilled_weeks,
            excluded=unbilled.excluded,
        )

    return hours
