"""Charge rate API endpoints."""

from fastapi import APIRouter, status

from charge_rate_engine.api.dependencies import Calculator
from charge_rate_engine.api.schemas import (
    BatchItemResponse,
    BatchRequest,
    BatchResponse,
    BillableOptionsSchema,
    CalculationResponse,
    ChargeRateRequest,
    CostConfigSchema,
    DefaultsResponse,
    ErrorResponse,
    QuoteLineResponse,
    QuoteRequest,
    QuoteResponse,
    WorkConfigSchema,
)
from charge_rate_engine.calculators.engine import calculate_charge_rate, inputs_fingerprint
from charge_rate_engine.calculators.quote import build_quote
from charge_rate_engine.calculators.types import (
    default_billable_options,
    default_cost_config,
    default_work_config,
)

router = APIRouter(prefix="/charge-rates", tags=["charge-rates"])


@router.get("/defaults", response_model=DefaultsResponse)
async def get_defaults() -> DefaultsResponse:
    """Return the default cost, work and billing configurations."""
    return DefaultsResponse(
        cost_config=CostConfigSchema.model_validate(default_cost_config()),
        work_config=WorkConfigSchema.model_validate(default_work_config()),
        billable_options=BillableOptionsSchema.model_validate(default_billable_options()),
    )


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def calculate(payload: ChargeRateRequest) -> CalculationResponse:
    """Calculate a charge rate without saving it."""
    work = payload.work_config.to_config()
    cost = payload.cost_config.to_config()
    options = payload.billable_options.to_options()

    result = calculate_charge_rate(payload.pay_rate, work, cost, options, payload.margin)
    fingerprint = inputs_fingerprint(payload.pay_rate, work, cost, options, result.margin)
    return CalculationResponse.from_result(result, fingerprint)


@router.post(
    "/batch",
    response_model=BatchResponse,
    status_code=status.HTTP_200_OK,
)
async def calculate_batch(payload: BatchRequest, calculator: Calculator) -> BatchResponse:
    """Calculate many apprentices, reporting failures per apprentice."""
    profiles = [p.to_profile() for p in payload.profiles]
    batch = calculator.calculate_all(profiles)

    items = [
        BatchItemResponse(
            profile_id=calc.profile_id,
            calculation_id=calc.calculation_id,
            success=calc.success,
            result=CalculationResponse.from_result(calc.result) if calc.result else None,
            errors=calc.errors,
        )
        for calc in batch.calculations.values()
    ]
    return BatchResponse(
        items=items,
        success_count=batch.success_count,
        error_count=batch.error_count,
    )


@router.post(
    "/quote",
    response_model=QuoteResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def create_quote(payload: QuoteRequest) -> QuoteResponse:
    """Price a year's placement of apprentices with a host employer."""
    quote = build_quote(
        payload.host.to_rates(),
        [p.to_profile() for p in payload.profiles],
        payload.quote_date,
    )

    return QuoteResponse(
        quote_date=quote.quote_date,
        valid_until=quote.valid_until,
        apprentice_count=quote.apprentice_count,
        lines=[
            QuoteLineResponse(
                profile_id=line.profile_id,
                description=line.description,
                quantity=line.quantity,
                unit=line.unit,
                weekly_hours=line.weekly_hours,
                rate_per_hour=line.rate_per_hour,
                weekly_price=line.weekly_price,
                total_price=line.total_price,
            )
            for line in quote.lines
        ],
        total_amount=quote.total_amount,
    )
