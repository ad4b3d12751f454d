"""Charge-rate composer - main orchestrator."""

from __future__ import annotations

import hashlib
import json
import logging
import math

from charge_rate_engine.calculators.hours import billable_hours, total_annual_hours
from charge_rate_engine.calculators.oncosts import calculate_on_costs
from charge_rate_engine.calculators.types import (
    BillableOptions,
    CalculationResult,
    CostConfig,
    WorkConfig,
    default_billable_options,
    default_cost_config,
    default_work_config,
)
from charge_rate_engine.calculators.validation import validate_inputs

logger = logging.getLogger(__name__)


def calculate_charge_rate(
    pay_rate: float,
    work: WorkConfig | None = None,
    cost: CostConfig | None = None,
    options: BillableOptions | None = None,
    margin: float | None = None,
) -> CalculationResult:
    """Turn a base pay rate into a fully justified hourly charge rate.

    Calculation pipeline (stable order):
    1) Validate inputs
    2) Total annual hours
    3) Billable hours
    4) Base wage and on-costs
    5) Total cost = base wage + on-costs
    6) Cost per billable hour
    7) Charge rate = cost per hour x (1 + margin)

    Args:
        pay_rate: Base hourly pay rate in dollars
        work: Work pattern (defaults applied when None)
        cost: Cost configuration (defaults applied when None)
        options: Billing policy (defaults applied when None)
        margin: Profit margin; ``cost.default_margin`` when None

    Returns:
        CalculationResult with every intermediate value populated

    Raises:
        InvalidConfigurationError: If any input violates its constraints
        NonPositiveBillableHoursError: If unbilled time uses up every week
        OverflowError: If the arithmetic leaves the finite range
    """
    work = work if work is not None else default_work_config()
    cost = cost if cost is not None else default_cost_config()
    options = options if options is not None else default_billable_options()
    margin = margin if margin is not None else cost.default_margin

    validate_inputs(pay_rate, work, cost, options, margin)

    logger.debug(
        "Calculating charge rate: pay_rate=%s work=%s cost=%s options=%s margin=%s",
        pay_rate,
        work,
        cost,
        options,
        margin,
    )

    total_hours = total_annual_hours(work)
    billable = billable_hours(work, cost, options)
    base_wage = pay_rate * total_hours
    oncosts = calculate_on_costs(pay_rate, total_hours, cost)
    total_oncosts = oncosts.total
    total_cost = base_wage + total_oncosts
    cost_per_hour = total_cost / billable
    charge_rate = cost_per_hour * (1 + margin)

    if not math.isfinite(charge_rate):
        raise OverflowError(
            f"Charge rate for pay rate {pay_rate!r} is not a finite number"
        )

    logger.info(
        "Charge rate %.4f for pay rate %.4f (billable hours %.2f, margin %.4f)",
        charge_rate,
        pay_rate,
        billable,
        margin,
    )

    return CalculationResult(
        pay_rate=pay_rate,
        total_hours=total_hours,
        billable_hours=billable,
        base_wage=base_wage,
        oncosts=oncosts,
        total_oncosts=total_oncosts,
        total_cost=total_cost,
        cost_per_hour=cost_per_hour,
        margin=margin,
        charge_rate=charge_rate,
    )


def inputs_fingerprint(
    pay_rate: float,
    work: WorkConfig,
    cost: CostConfig,
    options: BillableOptions,
    margin: float,
) -> str:
    """Compute fingerprint of all inputs used in a calculation."""
    data = {
        "pay_rate": repr(float(pay_rate)),
        "margin": repr(float(margin)),
        "work": work.to_canonical_dict(),
        "cost": cost.to_canonical_dict(),
        "options": options.to_canonical_dict(),
    }
    json_str = json.dumps(data, sort_keys=True)
    return hashlib.sha256(json_str.encode()).hexdigest()[:32]
