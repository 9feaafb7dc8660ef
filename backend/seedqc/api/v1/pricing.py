"""Pricing-related API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from seedqc.api import deps
from seedqc.models.pricing import BillingFrequency, CombinedFeeResult
from seedqc.schemas.pricing import (
    CombinedFeeRead,
    EffectivePricingConfigRead,
    PricingCalculateRequest,
    PricingConfig,
    PricingDisplayRead,
    QuoteLineItemRead,
    QuoteLineItemsRead,
)
from seedqc.services import pricing_service
from seedqc.services.pricing_config_service import resolve_pricing_config

router = APIRouter(prefix="/pricing", tags=["pricing"])

AdminConfig = Annotated[PricingConfig | None, Depends(deps.get_pricing_config)]


def _price(
    payload: PricingCalculateRequest, admin_config: PricingConfig | None
) -> CombinedFeeResult:
    config = (
        payload.pricing_config if payload.pricing_config is not None else admin_config
    )
    return pricing_service.calculate_quote_pricing(
        payload.input,
        config,
        as_of_month=deps.resolve_as_of_month(payload.as_of_month),
    )


@router.post(
    "/calculate",
    response_model=CombinedFeeRead,
    summary="Calculate quote fees",
)
async def calculate_pricing(
    payload: PricingCalculateRequest,
    admin_config: AdminConfig,
) -> CombinedFeeRead:
    result = _price(payload, admin_config)
    return CombinedFeeRead.model_validate(result)


@router.post(
    "/display",
    response_model=PricingDisplayRead,
    summary="Calculate quote totals for display",
)
async def display_pricing(
    payload: PricingCalculateRequest,
    admin_config: AdminConfig,
) -> PricingDisplayRead:
    display = pricing_service.to_ui_pricing(_price(payload, admin_config))
    return PricingDisplayRead.model_validate(display)


@router.post(
    "/line-items",
    response_model=QuoteLineItemsRead,
    summary="Break a quote into billable line items",
)
async def quote_line_items(
    payload: PricingCalculateRequest,
    admin_config: AdminConfig,
) -> QuoteLineItemsRead:
    result = _price(payload, admin_config)
    items = pricing_service.build_line_items(result)
    return QuoteLineItemsRead(
        items=[QuoteLineItemRead.model_validate(item) for item in items],
        monthly_total=sum(
            item.amount for item in items if item.billing is BillingFrequency.MONTHLY
        ),
        setup_total=sum(
            item.amount for item in items if item.billing is BillingFrequency.ONE_TIME
        ),
        snapshot=result.to_snapshot(),
    )


@router.get(
    "/config",
    response_model=EffectivePricingConfigRead,
    summary="Effective pricing configuration",
)
async def effective_pricing_config(
    admin_config: AdminConfig,
) -> EffectivePricingConfigRead:
    effective = resolve_pricing_config(admin_config)
    return EffectivePricingConfigRead.model_validate(effective)
