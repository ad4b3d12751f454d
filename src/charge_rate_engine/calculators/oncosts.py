"""Employer on-cost derivation."""

from __future__ import annotations

from charge_rate_engine.calculators.types import CostConfig, OnCosts

# Leave loading applies to at most 4 weeks of annual leave at 38 hours/week.
# Fixed, independent of WorkConfig.
LEAVE_LOADING_HOURS_CAP = 152


def calculate_on_costs(pay_rate: float, total_hours: float, cost: CostConfig) -> OnCosts:
    """Derive the employer's additional costs from the base wage.

    Amounts are full-precision floats; rounding is left to the caller.
    """
    base_wage = pay_rate * total_hours
    leave_hours = min(total_hours, LEAVE_LOADING_HOURS_CAP)

    return OnCosts(
        superannuation=base_wage * cost.super_rate,
        workers_comp=base_wage * cost.wc_rate,
        payroll_tax=base_wage * cost.payroll_tax_rate,
        leave_loading=pay_rate * leave_hours * cost.leave_loading,
        study_cost=cost.study_cost,
        ppe_cost=cost.ppe_cost,
        admin_cost=base_wage * cost.admin_rate,
    )
