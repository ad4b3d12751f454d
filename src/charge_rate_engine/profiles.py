"""Apprentice profiles, host employer overrides, and profile export/import."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from pydantic import TypeAdapter, ValidationError

from charge_rate_engine.calculators.engine import calculate_charge_rate
from charge_rate_engine.calculators.errors import InvalidConfigurationError
from charge_rate_engine.calculators.types import (
    BillableOptions,
    CalculationResult,
    CostConfig,
    WorkConfig,
)
from charge_rate_engine.calculators.validation import (
    billable_options_errors,
    cost_config_errors,
    is_finite_number,
    work_config_errors,
)

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0.0"

# Typical hourly base rate by apprenticeship year
DEFAULT_YEAR_RATES: dict[int, float] = {
    1: 20.50,
    2: 24.75,
    3: 28.90,
    4: 33.25,
}


@dataclass(frozen=True)
class ApprenticeProfile:
    """An apprentice's base rate together with the configs used to price them."""

    id: str
    name: str
    year: int
    base_pay_rate: float
    cost_config: CostConfig = field(default_factory=CostConfig)
    work_config: WorkConfig = field(default_factory=WorkConfig)
    billable_options: BillableOptions = field(default_factory=BillableOptions)
    custom_settings: bool = False

    def calculate(
        self, margin: float | None = None, cost: CostConfig | None = None
    ) -> CalculationResult:
        """Price this apprentice.

        ``cost`` stands in for the profile's own cost configuration, as when
        a host employer's negotiated rates apply.

        Raises:
            InvalidConfigurationError: If the profile or its configs are invalid
            NonPositiveBillableHoursError: If unbilled time uses up every week
        """
        cost = cost if cost is not None else self.cost_config
        errors = profile_errors(replace(self, cost_config=cost))
        if errors:
            raise InvalidConfigurationError(errors)

        return calculate_charge_rate(
            self.base_pay_rate,
            self.work_config,
            cost,
            self.billable_options,
            margin,
        )


@dataclass(frozen=True)
class HostEmployerRates:
    """Negotiated rates a host employer may carry.

    Either override falls back to the profile's own configuration when None.
    """

    custom_margin_rate: float | None = None
    custom_admin_rate: float | None = None

    def apply(self, cost: CostConfig) -> CostConfig:
        """Return a fresh cost configuration with the overrides applied."""
        changes: dict[str, float] = {}
        if self.custom_margin_rate is not None:
            changes["default_margin"] = self.custom_margin_rate
        if self.custom_admin_rate is not None:
            changes["admin_rate"] = self.custom_admin_rate
        return replace(cost, **changes)


def default_apprentice_profiles() -> list[ApprenticeProfile]:
    """One default profile for each apprenticeship year."""
    return [
        ApprenticeProfile(
            id=f"default-year-{year}",
            name=f"Year {year} Apprentice",
            year=year,
            base_pay_rate=rate,
        )
        for year, rate in DEFAULT_YEAR_RATES.items()
    ]


# ============================================================================
# Export / import
# ============================================================================


class ProfileImportError(ValueError):
    """Raised when an exported profile document cannot be read back."""


@dataclass(frozen=True)
class ProfileExport:
    """Document written by :func:`export_profiles`."""

    apprentices: list[ApprenticeProfile]
    export_date: str
    version: str = EXPORT_VERSION


_export_adapter = TypeAdapter(ProfileExport)


def profile_errors(profile: ApprenticeProfile) -> list[str]:
    """Return every problem that would stop a profile from being priced."""
    errors: list[str] = []
    if not profile.id:
        errors.append("Apprentice ID is missing")
    if not profile.name:
        errors.append("Apprentice name is missing")
    if profile.year not in DEFAULT_YEAR_RATES:
        errors.append(f"Invalid apprentice year {profile.year}, must be between 1 and 4")
    if not is_finite_number(profile.base_pay_rate) or profile.base_pay_rate <= 0:
        errors.append("Base pay rate must be greater than 0")
    errors.extend(cost_config_errors(profile.cost_config))
    errors.extend(work_config_errors(profile.work_config))
    errors.extend(billable_options_errors(profile.billable_options))
    return errors


def export_profiles(
    profiles: list[ApprenticeProfile], exported_at: datetime | None = None
) -> str:
    """Serialize profiles to a JSON export document.

    Raises:
        ValueError: If any profile is invalid
    """
    invalid = [(p, profile_errors(p)) for p in profiles]
    invalid = [(p, errs) for p, errs in invalid if errs]
    if invalid:
        first, errs = invalid[0]
        raise ValueError(
            f"Found {len(invalid)} invalid apprentice profiles. "
            f"First error ({first.id or '<no id>'}): {errs[0]}"
        )

    exported_at = exported_at or datetime.now(timezone.utc)
    document = ProfileExport(apprentices=list(profiles), export_date=exported_at.isoformat())
    return _export_adapter.dump_json(document, indent=2).decode()


def import_profiles(text: str | bytes) -> list[ApprenticeProfile]:
    """Read profiles back from an export document.

    Raises:
        ProfileImportError: Describing the first problem found
    """
    try:
        document = _export_adapter.validate_json(text)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "document"
        raise ProfileImportError(f"Invalid export file at {location}: {first['msg']}") from e

    for profile in document.apprentices:
        errors = profile_errors(profile)
        if errors:
            raise ProfileImportError(f"Invalid apprentice profile {profile.id!r}: {errors[0]}")

    logger.info(
        "Imported %d apprentice profiles (export version %s, exported %s)",
        len(document.apprentices),
        document.version,
        document.export_date,
    )
    return document.apprentices
