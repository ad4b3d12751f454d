"""Type definitions for the charge-rate calculation pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class CostConfig:
    """Employer-side statutory and overhead assumptions.

    Rates are fractions (0.115 == 11.5%). ``study_cost`` and ``ppe_cost``
    are fixed annual dollar amounts.
    """

    super_rate: float = 0.115
    wc_rate: float = 0.047
    payroll_tax_rate: float = 0.0485
    leave_loading: float = 0.175
    study_cost: float = 850.0
    ppe_cost: float = 300.0
    admin_rate: float = 0.17
    default_margin: float = 0.15
    adverse_weather_days: int = 5

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return {k: repr(float(v)) for k, v in sorted(asdict(self).items())}


@dataclass(frozen=True)
class WorkConfig:
    """Nominal annual work pattern of an apprentice."""

    hours_per_day: float = 7.6
    days_per_week: float = 5
    weeks_per_year: float = 52
    annual_leave_days: float = 20
    public_holidays: float = 10
    sick_leave_days: float = 10
    training_weeks: float = 5  # weeks, not days

    @property
    def hours_per_week(self) -> float:
        return self.hours_per_day * self.days_per_week

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return {k: repr(float(v)) for k, v in sorted(asdict(self).items())}


@dataclass(frozen=True)
class BillableOptions:
    """Which categories of non-working time are spread across billable hours.

    A flag left ``False`` marks the category as unbilled: its time is taken
    out of the billable denominator and its cost is recovered through a
    higher rate on the remaining hours.
    """

    include_annual_leave: bool = False
    include_public_holidays: bool = False
    include_sick_leave: bool = False
    include_training_time: bool = False
    include_adverse_weather: bool = False

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return dict(sorted(asdict(self).items()))


def default_cost_config() -> CostConfig:
    """Fresh production default cost configuration."""
    return CostConfig()


def default_work_config() -> WorkConfig:
    """Fresh production default work pattern."""
    return WorkConfig()


def default_billable_options() -> BillableOptions:
    """Fresh default billing policy (every category unbilled)."""
    return BillableOptions()


@dataclass(frozen=True)
class OnCosts:
    """Employer on-costs for one apprentice-year, in dollars."""

    superannuation: float
    workers_comp: float
    payroll_tax: float
    leave_loading: float
    study_cost: float
    ppe_cost: float
    admin_cost: float

    @property
    def total(self) -> float:
        return (
            self.superannuation
            + self.workers_comp
            + self.payroll_tax
            + self.leave_loading
            + self.study_cost
            + self.ppe_cost
            + self.admin_cost
        )

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class UnbilledTime:
    """Breakdown of time taken out of the billable denominator."""

    unbilled_days: float
    unbilled_weeks: float
    # category name -> weeks removed from billable time
    excluded: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class CalculationResult:
    """Fully justified charge rate with every intermediate figure."""

    pay_rate: float
    total_hours: float
    billable_hours: float
    base_wage: float
    oncosts: OnCosts
    total_oncosts: float
    total_cost: float
    cost_per_hour: float
    margin: float
    charge_rate: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
