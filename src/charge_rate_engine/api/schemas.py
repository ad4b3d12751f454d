"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from charge_rate_engine.calculators.types import (
    BillableOptions,
    CalculationResult,
    CostConfig,
    WorkConfig,
)
from charge_rate_engine.profiles import ApprenticeProfile, HostEmployerRates


# ============================================================================
# Configuration schemas
# ============================================================================


class CostConfigValues(BaseModel):
    """Employer cost assumptions, type-checked only.

    Ranges are checked by the calculators so that each apprentice in a
    batch gets its own errors.
    """

    model_config = ConfigDict(from_attributes=True)

    super_rate: float = 0.115
    wc_rate: float = 0.047
    payroll_tax_rate: float = 0.0485
    leave_loading: float = 0.175
    study_cost: float = 850.0
    ppe_cost: float = 300.0
    admin_rate: float = 0.17
    default_margin: float = 0.15
    adverse_weather_days: int = 5

    def to_config(self) -> CostConfig:
        return CostConfig(**self.model_dump())


class CostConfigSchema(CostConfigValues):
    """Employer cost assumptions. Rates are fractions."""

    super_rate: float = Field(0.115, ge=0, le=1)
    wc_rate: float = Field(0.047, ge=0, le=1)
    payroll_tax_rate: float = Field(0.0485, ge=0, le=1)
    leave_loading: float = Field(0.175, ge=0, le=1)
    study_cost: float = Field(850.0, ge=0)
    ppe_cost: float = Field(300.0, ge=0)
    admin_rate: float = Field(0.17, ge=0, le=1)
    default_margin: float = Field(0.15, ge=0)
    adverse_weather_days: int = Field(5, ge=0)


class WorkConfigValues(BaseModel):
    """Annual work pattern, type-checked only."""

    model_config = ConfigDict(from_attributes=True)

    hours_per_day: float = 7.6
    days_per_week: float = 5
    weeks_per_year: float = 52
    annual_leave_days: float = 20
    public_holidays: float = 10
    sick_leave_days: float = 10
    training_weeks: float = 5

    def to_config(self) -> WorkConfig:
        return WorkConfig(**self.model_dump())


class WorkConfigSchema(WorkConfigValues):
    """Annual work pattern."""

    hours_per_day: float = Field(7.6, gt=0)
    days_per_week: float = Field(5, gt=0, le=7)
    weeks_per_year: float = Field(52, gt=0, le=52)
    annual_leave_days: float = Field(20, ge=0)
    public_holidays: float = Field(10, ge=0)
    sick_leave_days: float = Field(10, ge=0)
    training_weeks: float = Field(5, ge=0)


class BillableOptionsSchema(BaseModel):
    """Billing policy flags."""

    model_config = ConfigDict(from_attributes=True)

    include_annual_leave: bool = False
    include_public_holidays: bool = False
    include_sick_leave: bool = False
    include_training_time: bool = False
    include_adverse_weather: bool = False

    def to_options(self) -> BillableOptions:
        return BillableOptions(**self.model_dump())


class DefaultsResponse(BaseModel):
    """Default configurations used when a request omits them."""

    cost_config: CostConfigSchema
    work_config: WorkConfigSchema
    billable_options: BillableOptionsSchema


# ============================================================================
# Calculation schemas
# ============================================================================


class ChargeRateRequest(BaseModel):
    """Schema for a single charge-rate calculation."""

    pay_rate: float = Field(ge=0)
    cost_config: CostConfigSchema = Field(default_factory=CostConfigSchema)
    work_config: WorkConfigSchema = Field(default_factory=WorkConfigSchema)
    billable_options: BillableOptionsSchema = Field(default_factory=BillableOptionsSchema)
    margin: float | None = Field(None, ge=0)


class OnCostsResponse(BaseModel):
    """On-cost breakdown in dollars."""

    superannuation: float
    workers_comp: float
    payroll_tax: float
    leave_loading: float
    study_cost: float
    ppe_cost: float
    admin_cost: float


class CalculationResponse(BaseModel):
    """Charge rate with every intermediate figure."""

    pay_rate: float
    total_hours: float
    billable_hours: float
    base_wage: float
    oncosts: OnCostsResponse
    total_oncosts: float
    total_cost: float
    cost_per_hour: float
    margin: float
    charge_rate: float
    inputs_fingerprint: str | None = None

    @classmethod
    def from_result(
        cls, result: CalculationResult, fingerprint: str | None = None
    ) -> CalculationResponse:
        return cls(**result.as_dict(), inputs_fingerprint=fingerprint)


# ============================================================================
# Profile and batch schemas
# ============================================================================


class ApprenticeProfileSchema(BaseModel):
    """Schema for an apprentice profile.

    Only field types are checked here. Year, pay rate and config ranges are
    reported by the calculators, per apprentice.
    """

    id: str
    name: str
    year: int
    base_pay_rate: float
    cost_config: CostConfigValues = Field(default_factory=CostConfigValues)
    work_config: WorkConfigValues = Field(default_factory=WorkConfigValues)
    billable_options: BillableOptionsSchema = Field(default_factory=BillableOptionsSchema)
    custom_settings: bool = False

    def to_profile(self) -> ApprenticeProfile:
        return ApprenticeProfile(
            id=self.id,
            name=self.name,
            year=self.year,
            base_pay_rate=self.base_pay_rate,
            cost_config=self.cost_config.to_config(),
            work_config=self.work_config.to_config(),
            billable_options=self.billable_options.to_options(),
            custom_settings=self.custom_settings,
        )


class BatchRequest(BaseModel):
    """Schema for calculating many apprentices at once."""

    profiles: list[ApprenticeProfileSchema]

    @field_validator("profiles")
    @classmethod
    def _unique_ids(
        cls, profiles: list[ApprenticeProfileSchema]
    ) -> list[ApprenticeProfileSchema]:
        seen: set[str] = set()
        for profile in profiles:
            if profile.id in seen:
                raise ValueError(f"Duplicate apprentice id {profile.id!r}")
            seen.add(profile.id)
        return profiles


class BatchItemResponse(BaseModel):
    """Per-apprentice outcome within a batch."""

    profile_id: str
    calculation_id: UUID | None = None
    success: bool
    result: CalculationResponse | None = None
    errors: list[str] = []


class BatchResponse(BaseModel):
    """Schema for batch calculation response."""

    items: list[BatchItemResponse]
    success_count: int
    error_count: int


# ============================================================================
# Quote schemas
# ============================================================================


class HostEmployerRatesSchema(BaseModel):
    """Negotiated host employer overrides."""

    custom_margin_rate: float | None = Field(None, ge=0)
    custom_admin_rate: float | None = Field(None, ge=0, le=1)

    def to_rates(self) -> HostEmployerRates:
        return HostEmployerRates(
            custom_margin_rate=self.custom_margin_rate,
            custom_admin_rate=self.custom_admin_rate,
        )


class QuoteRequest(BaseModel):
    """Schema for pricing a host employer quote."""

    host: HostEmployerRatesSchema = Field(default_factory=HostEmployerRatesSchema)
    profiles: list[ApprenticeProfileSchema] = Field(min_length=1)
    quote_date: date | None = None


class QuoteLineResponse(BaseModel):
    """Schema for a quote line."""

    profile_id: str
    description: str
    quantity: int
    unit: str
    weekly_hours: float
    rate_per_hour: float
    weekly_price: float
    total_price: float


class QuoteResponse(BaseModel):
    """Schema for quote response."""

    quote_date: date
    valid_until: date
    apprentice_count: int
    lines: list[QuoteLineResponse]
    total_amount: float


# ============================================================================
# Health and error schemas
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    engine_version: str


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
    context: dict[str, Any] | None = None
