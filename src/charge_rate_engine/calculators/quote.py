"""Host employer quote pricing built on calculated charge rates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from charge_rate_engine.calculators.types import CalculationResult

if TYPE_CHECKING:
    from charge_rate_engine.profiles import ApprenticeProfile, HostEmployerRates

logger = logging.getLogger(__name__)

QUOTE_WEEKS = 52
QUOTE_VALIDITY_DAYS = 30


@dataclass(frozen=True)
class QuoteLine:
    """Annual placement price for one apprentice."""

    profile_id: str
    description: str
    quantity: int  # weeks
    unit: str
    weekly_hours: float
    rate_per_hour: float
    weekly_price: float
    total_price: float
    calculation: CalculationResult


@dataclass(frozen=True)
class Quote:
    """Priced quote for placing apprentices with a host employer."""

    quote_date: date
    valid_until: date
    lines: list[QuoteLine]
    total_amount: float

    @property
    def apprentice_count(self) -> int:
        return len(self.lines)


def build_quote(
    host: HostEmployerRates,
    profiles: list[ApprenticeProfile],
    quote_date: date | None = None,
) -> Quote:
    """Price a year's placement of each apprentice with a host employer.

    The host's negotiated margin and admin rate override each profile's
    cost configuration. Unlike batch calculation, any failing apprentice
    fails the whole quote.

    Raises:
        ValueError: If no profiles are given
        InvalidConfigurationError: If any profile's inputs are invalid
        NonPositiveBillableHoursError: If any profile has no billable time
    """
    if not profiles:
        raise ValueError("At least one apprentice profile must be provided")

    quote_date = quote_date or date.today()
    lines: list[QuoteLine] = []

    for profile in profiles:
        cost = host.apply(profile.cost_config)
        result = profile.calculate(cost.default_margin, cost=cost)

        weekly_hours = profile.work_config.hours_per_week
        weekly_price = result.charge_rate * weekly_hours
        lines.append(
            QuoteLine(
                profile_id=profile.id,
                description=f"{profile.name} - Year {profile.year}",
                quantity=QUOTE_WEEKS,
                unit="week",
                weekly_hours=weekly_hours,
                rate_per_hour=result.charge_rate,
                weekly_price=weekly_price,
                total_price=weekly_price * QUOTE_WEEKS,
                calculation=result,
            )
        )

    total_amount = sum(line.total_price for line in lines)
    logger.info(
        "Built quote for %d apprentices totalling %.2f", len(lines), total_amount
    )

    return Quote(
        quote_date=quote_date,
        valid_until=quote_date + timedelta(days=QUOTE_VALIDITY_DAYS),
        lines=lines,
        total_amount=total_amount,
    )
