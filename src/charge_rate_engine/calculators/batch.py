"""Batch charge-rate calculation across many apprentices."""

from __future__ import annotations

import hashlib
import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from charge_rate_engine.calculators.engine import inputs_fingerprint
from charge_rate_engine.calculators.errors import (
    ChargeRateError,
    InvalidConfigurationError,
)
from charge_rate_engine.calculators.types import CalculationResult
from charge_rate_engine.config import get_settings

if TYPE_CHECKING:
    from charge_rate_engine.profiles import ApprenticeProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileCalculation:
    """Result of calculating the charge rate for one apprentice."""

    profile_id: str
    calculation_id: UUID | None
    result: CalculationResult | None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.result is not None and not self.errors


@dataclass
class BatchCalculationResult:
    """Result of calculating a batch of apprentices."""

    calculations: dict[str, ProfileCalculation]  # profile_id -> calculation
    success_count: int = 0
    error_count: int = 0


class BatchCalculator:
    """Calculates charge rates for many apprentices independently.

    A failure for one apprentice is recorded against that apprentice and
    never aborts the rest of the batch.
    """

    def __init__(self, engine_version: str | None = None):
        self.engine_version = engine_version or get_settings().engine_version

    def calculate_all(self, profiles: list[ApprenticeProfile]) -> BatchCalculationResult:
        """Calculate every profile, collecting per-apprentice errors.

        Raises:
            ValueError: If two profiles share an id
        """
        counts = Counter(profile.id for profile in profiles)
        duplicates = sorted(pid for pid, n in counts.items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate apprentice ids: {', '.join(duplicates)}")

        batch = BatchCalculationResult(calculations={})

        for profile in profiles:
            calculation = self.calculate_profile(profile)
            batch.calculations[profile.id] = calculation
            if calculation.success:
                batch.success_count += 1
            else:
                batch.error_count += 1

        logger.info(
            "Calculated %d apprentice charge rates (%d errors)",
            len(profiles),
            batch.error_count,
        )
        return batch

    def calculate_profile(self, profile: ApprenticeProfile) -> ProfileCalculation:
        """Calculate one profile without raising for user-correctable errors."""
        try:
            result = profile.calculate()
        except InvalidConfigurationError as e:
            logger.warning("Invalid configuration for apprentice %s: %s", profile.id, e)
            return ProfileCalculation(
                profile_id=profile.id, calculation_id=None, result=None, errors=e.errors
            )
        except (ChargeRateError, ArithmeticError) as e:
            logger.warning("Charge rate failed for apprentice %s: %s", profile.id, e)
            return ProfileCalculation(
                profile_id=profile.id, calculation_id=None, result=None, errors=[str(e)]
            )

        fingerprint = inputs_fingerprint(
            profile.base_pay_rate,
            profile.work_config,
            profile.cost_config,
            profile.billable_options,
            result.margin,
        )
        return ProfileCalculation(
            profile_id=profile.id,
            calculation_id=self._generate_calculation_id(profile.id, fingerprint),
            result=result,
        )

    def _generate_calculation_id(self, profile_id: str, fingerprint: str) -> UUID:
        """Generate deterministic calculation ID."""
        data = {
            "profile_id": profile_id,
            "engine_version": self.engine_version,
            "inputs_fingerprint": fingerprint,
        }
        json_str = json.dumps(data, sort_keys=True)
        hash_bytes = hashlib.sha256(json_str.encode()).digest()
        return UUID(bytes=hash_bytes[:16])
