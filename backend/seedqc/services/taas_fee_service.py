"""Tax-as-a-Service fee calculation."""

from __future__ import annotations

from decimal import Decimal

from seedqc.models.pricing import FeeResult, TaasBreakdown, ZERO_FEE
from seedqc.schemas.pricing import QuotePricingInput
from seedqc.services import service_inclusion
from seedqc.services.pricing_config_service import EffectivePricingConfig
from seedqc.services.pricing_constants import (
    INDUSTRY_MULTIPLIERS,
    NEUTRAL_INDUSTRY,
    TAAS_AVERAGE_MONTHLY_REVENUE,
    TAAS_BASE_FEE,
    TAAS_DEFAULT_AVERAGE_MONTHLY_REVENUE,
    TAAS_ENTITY_THRESHOLD,
    TAAS_ENTITY_UPCHARGE_PER_ENTITY,
    TAAS_INTERNATIONAL_UPCHARGE,
    TAAS_MAX_ADDITIONAL_STATES,
    TAAS_MESSY_BOOKKEEPING_QUALITY,
    TAAS_MESSY_BOOKKEEPING_UPCHARGE,
    TAAS_OWNER_THRESHOLD,
    TAAS_OWNER_UPCHARGE_PER_OWNER,
    TAAS_PERSONAL_1040_PER_OWNER,
    TAAS_PRIOR_YEAR_SETUP_FEE,
    TAAS_REVENUE_TIERS,
    TAAS_STATE_UPCHARGE_PER_STATE,
    TAAS_TOP_REVENUE_MULTIPLIER,
    round_up_to_step,
)


def _has_required_fields(data: QuotePricingInput) -> bool:
    return bool(
        service_inclusion.includes_taas(data)
        and data.monthly_revenue_range
        and data.industry
        and data.num_entities
        and data.states_filed
        and data.num_business_owners
        and data.international_filing is not None
        and data.include_1040s is not None
    )


def taas_revenue_multiplier(revenue_band: str | None) -> tuple[int, Decimal]:
    """Map a revenue band to its average monthly revenue and TaaS multiplier."""

    average = TAAS_AVERAGE_MONTHLY_REVENUE.get(
        revenue_band or "", TAAS_DEFAULT_AVERAGE_MONTHLY_REVENUE
    )
    for upper_bound, multiplier in TAAS_REVENUE_TIERS:
        if average <= upper_bound:
            return average, multiplier
    return average, TAAS_TOP_REVENUE_MULTIPLIER


def calculate_taas_fees(
    data: QuotePricingInput, config: EffectivePricingConfig
) -> FeeResult:
    """Compute the TaaS monthly fee and prior-year backfill setup fee."""

    if not _has_required_fields(data):
        return ZERO_FEE

    entities = data.custom_num_entities or data.num_entities or 0
    states = data.custom_states_filed or data.states_filed or 0
    owners = data.custom_num_business_owners or data.num_business_owners or 0

    entity_upcharge = (
        max(entities - TAAS_ENTITY_THRESHOLD, 0) * TAAS_ENTITY_UPCHARGE_PER_ENTITY
    )
    additional_states = min(max(states - 1, 0), TAAS_MAX_ADDITIONAL_STATES)
    state_upcharge = additional_states * TAAS_STATE_UPCHARGE_PER_STATE
    international_upcharge = (
        TAAS_INTERNATIONAL_UPCHARGE if data.international_filing else 0
    )
    owner_upcharge = (
        max(owners - TAAS_OWNER_THRESHOLD, 0) * TAAS_OWNER_UPCHARGE_PER_OWNER
    )
    quality_upcharge = (
        TAAS_MESSY_BOOKKEEPING_UPCHARGE
        if data.bookkeeping_quality == TAAS_MESSY_BOOKKEEPING_QUALITY
        else 0
    )
    personal_1040 = owners * TAAS_PERSONAL_1040_PER_OWNER if data.include_1040s else 0

    before_multipliers = (
        TAAS_BASE_FEE
        + entity_upcharge
        + state_upcharge
        + international_upcharge
        + owner_upcharge
        + quality_upcharge
        + personal_1040
    )
    industry = INDUSTRY_MULTIPLIERS.get(data.industry or "", NEUTRAL_INDUSTRY)
    average_revenue, revenue_multiplier = taas_revenue_multiplier(
        data.monthly_revenue_range
    )
    after_multipliers = before_multipliers * industry.monthly * revenue_multiplier
    monthly_fee = round_up_to_step(after_multipliers, config.monthly_step)

    prior_years = max(data.prior_years_unfiled or 0, 0)
    setup_fee = prior_years * TAAS_PRIOR_YEAR_SETUP_FEE

    breakdown = TaasBreakdown(
        base=TAAS_BASE_FEE,
        entity_upcharge=entity_upcharge,
        state_upcharge=state_upcharge,
        international_upcharge=international_upcharge,
        owner_upcharge=owner_upcharge,
        bookkeeping_quality_upcharge=quality_upcharge,
        personal_1040_upcharge=personal_1040,
        before_multipliers=before_multipliers,
        industry_multiplier=industry.monthly,
        average_monthly_revenue=average_revenue,
        revenue_multiplier=revenue_multiplier,
        after_multipliers=after_multipliers,
        rounding_step=config.monthly_step,
        monthly_fee=monthly_fee,
        prior_years_unfiled=prior_years,
        setup_fee=setup_fee,
    )
    return FeeResult(monthly_fee=monthly_fee, setup_fee=setup_fee, breakdown=breakdown)
