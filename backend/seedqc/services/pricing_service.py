"""Combined quote pricing across every service line."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from datetime import date

from seedqc.models.pricing import (
    BillingFrequency,
    BookkeepingBreakdown,
    CombinedFeeResult,
    FeeResult,
    PricingDisplay,
    QuoteLineItem,
    ZERO_FEE,
)
from seedqc.schemas.pricing import PricingConfig, QuotePricingInput
from seedqc.services import service_inclusion
from seedqc.services.ancillary_fee_service import (
    calculate_agent_of_service_fee,
    calculate_ap_fee,
    calculate_ar_fee,
    calculate_cfo_advisory_fees,
    calculate_cleanup_project_fee,
    calculate_payroll_fee,
    calculate_prior_year_filings_fee,
)
from seedqc.services.bookkeeping_fee_service import calculate_bookkeeping_fees
from seedqc.services.pricing_config_service import (
    EffectivePricingConfig,
    resolve_pricing_config,
)
from seedqc.services.pricing_constants import SERVICE_PRODUCTS, round_up_to_step
from seedqc.services.taas_fee_service import calculate_taas_fees

logger = logging.getLogger(__name__)

# The tier fee table is configurable but not billed yet.
SERVICE_TIER_FEES_ACTIVE = False


def _service_tier_fee(data: QuotePricingInput, config: EffectivePricingConfig) -> int:
    if not (SERVICE_TIER_FEES_ACTIVE and config.service_tier_enabled):
        return 0
    return config.service_tier_fees.get(data.service_tier or "", 0)


def _apply_bundle_discount(
    bookkeeping: FeeResult, config: EffectivePricingConfig
) -> FeeResult:
    before = bookkeeping.monthly_fee
    after = round_up_to_step(before * config.bookkeeping_with_taas_pct, config.monthly_step)
    breakdown = bookkeeping.breakdown
    if isinstance(breakdown, BookkeepingBreakdown):
        breakdown = replace(
            breakdown,
            discount_applied=True,
            discount_pct=config.bookkeeping_with_taas_pct,
            monthly_fee_before_discount=before,
            monthly_fee_after_discount=after,
        )
    return replace(bookkeeping, monthly_fee=after, breakdown=breakdown)


def calculate_combined_fees(
    data: QuotePricingInput,
    config: EffectivePricingConfig,
    *,
    as_of_month: int,
) -> CombinedFeeResult:
    """Price every included service and total the quote.

    A service is included when one of its input toggles is set and the
    configuration has not disabled it. Services that are not included are
    never evaluated, so their missing inputs cannot affect the result.
    """

    includes_monthly_bookkeeping = (
        service_inclusion.includes_monthly_bookkeeping(data) and config.bookkeeping_enabled
    )
    includes_cleanup = service_inclusion.includes_cleanup(data) and config.cleanup_enabled
    includes_taas = service_inclusion.includes_taas(data) and config.taas_enabled
    includes_prior_year_filings = (
        service_inclusion.includes_prior_year_filings(data)
        and config.prior_year_filings_enabled
    )
    includes_cfo_advisory = (
        service_inclusion.includes_cfo_advisory(data) and config.cfo_advisory_enabled
    )
    includes_payroll = service_inclusion.includes_payroll(data) and config.payroll_enabled
    includes_ap = service_inclusion.includes_ap(data) and config.ap_enabled
    includes_ar = service_inclusion.includes_ar(data) and config.ar_enabled
    includes_agent_of_service = (
        service_inclusion.includes_agent_of_service(data)
        and config.agent_of_service_enabled
    )

    bookkeeping = (
        calculate_bookkeeping_fees(data, config, as_of_month=as_of_month)
        if includes_monthly_bookkeeping
        else ZERO_FEE
    )
    taas = calculate_taas_fees(data, config) if includes_taas else ZERO_FEE
    cleanup = calculate_cleanup_project_fee(data, config) if includes_cleanup else ZERO_FEE
    prior_years = (
        calculate_prior_year_filings_fee(data, config)
        if includes_prior_year_filings
        else ZERO_FEE
    )
    cfo = calculate_cfo_advisory_fees(data) if includes_cfo_advisory else None
    payroll = calculate_payroll_fee(data) if includes_payroll else ZERO_FEE
    ap = calculate_ap_fee(data) if includes_ap else ZERO_FEE
    ar = calculate_ar_fee(data) if includes_ar else ZERO_FEE
    agent = (
        calculate_agent_of_service_fee(data) if includes_agent_of_service else ZERO_FEE
    )

    if includes_monthly_bookkeeping and includes_taas and bookkeeping.monthly_fee > 0:
        bookkeeping = _apply_bundle_discount(bookkeeping, config)

    qbo_fee = (
        config.qbo_monthly_fee
        if includes_monthly_bookkeeping and data.qbo_subscription and config.qbo_enabled
        else 0
    )
    service_tier_fee = _service_tier_fee(data, config)
    cfo_fee = cfo.fee if cfo is not None else 0

    monthly_total = (
        bookkeeping.monthly_fee
        + taas.monthly_fee
        + payroll.monthly_fee
        + ap.monthly_fee
        + ar.monthly_fee
        + qbo_fee
        + service_tier_fee
    )
    setup_total = (
        bookkeeping.setup_fee
        + taas.setup_fee
        + cleanup.setup_fee
        + prior_years.setup_fee
        + cfo_fee
        + agent.setup_fee
    )

    logger.debug(
        "Priced quote: monthly=%s setup=%s month=%s", monthly_total, setup_total, as_of_month
    )

    return CombinedFeeResult(
        bookkeeping=bookkeeping,
        taas=taas,
        combined=FeeResult(monthly_fee=monthly_total, setup_fee=setup_total),
        includes_bookkeeping=includes_monthly_bookkeeping or includes_cleanup,
        includes_monthly_bookkeeping=includes_monthly_bookkeeping,
        includes_bookkeeping_cleanup_only=includes_cleanup and not includes_monthly_bookkeeping,
        includes_taas=includes_taas,
        includes_cleanup=includes_cleanup,
        includes_prior_year_filings=includes_prior_year_filings,
        includes_cfo_advisory=includes_cfo_advisory,
        includes_payroll=includes_payroll,
        includes_ap=includes_ap,
        includes_ar=includes_ar,
        includes_agent_of_service=includes_agent_of_service,
        cleanup_project_fee=cleanup.setup_fee,
        prior_year_filings_fee=prior_years.setup_fee,
        cfo_advisory_fee=cfo_fee,
        cfo_advisory_hubspot_product_id=cfo.hubspot_product_id if cfo is not None else None,
        payroll_fee=payroll.monthly_fee,
        ap_fee=ap.monthly_fee,
        ar_fee=ar.monthly_fee,
        agent_of_service_fee=agent.setup_fee,
        service_tier_fee=service_tier_fee,
        qbo_fee=qbo_fee,
    )


def calculate_quote_pricing(
    data: QuotePricingInput,
    config: PricingConfig | EffectivePricingConfig | None = None,
    *,
    as_of_month: int | None = None,
) -> CombinedFeeResult:
    """Resolve configuration and pricing month, then price the quote."""

    effective = (
        config
        if isinstance(config, EffectivePricingConfig)
        else resolve_pricing_config(config)
    )
    month = as_of_month if as_of_month is not None else date.today().month
    if not 1 <= month <= 12:
        raise ValueError(f"as_of_month must be between 1 and 12, got {month}")
    return calculate_combined_fees(data, effective, as_of_month=month)


def to_ui_pricing(result: CombinedFeeResult) -> PricingDisplay:
    package_discount = None
    breakdown = result.bookkeeping.breakdown
    if (
        isinstance(breakdown, BookkeepingBreakdown)
        and breakdown.monthly_fee_before_discount is not None
        and breakdown.monthly_fee_after_discount is not None
    ):
        package_discount = max(
            breakdown.monthly_fee_before_discount - breakdown.monthly_fee_after_discount, 0
        )
    values = {f.name: getattr(result, f.name) for f in fields(CombinedFeeResult)}
    return PricingDisplay(
        **values,
        total_monthly_fee=result.combined.monthly_fee,
        total_setup_fee=result.combined.setup_fee,
        package_discount_monthly=package_discount,
    )


def calculate_pricing_display(
    data: QuotePricingInput,
    config: PricingConfig | EffectivePricingConfig | None = None,
    *,
    as_of_month: int | None = None,
) -> PricingDisplay:
    return to_ui_pricing(calculate_quote_pricing(data, config, as_of_month=as_of_month))


def build_line_items(result: CombinedFeeResult) -> list[QuoteLineItem]:
    """Break a priced quote into billable lines.

    Bookkeeping is listed at its list price with the bundle discount as a
    separate negative line, so monthly lines always add up to the combined
    monthly fee and one-time lines to the combined setup fee.
    """

    list_price = result.bookkeeping.monthly_fee
    breakdown = result.bookkeeping.breakdown
    if isinstance(breakdown, BookkeepingBreakdown) and breakdown.discount_applied:
        list_price = breakdown.monthly_fee_before_discount or 0

    monthly = BillingFrequency.MONTHLY
    one_time = BillingFrequency.ONE_TIME
    candidates = [
        (
            "bookkeeping",
            "Monthly bookkeeping",
            list_price,
            monthly,
            SERVICE_PRODUCTS["bookkeeping"],
        ),
        (
            "bookkeeping",
            "Bookkeeping + TaaS package discount",
            result.bookkeeping.monthly_fee - list_price,
            monthly,
            None,
        ),
        ("taas", "Tax as a Service", result.taas.monthly_fee, monthly, SERVICE_PRODUCTS["taas"]),
        ("qbo", "QuickBooks Online subscription", result.qbo_fee, monthly, None),
        ("payroll", "Payroll service", result.payroll_fee, monthly, SERVICE_PRODUCTS["payroll"]),
        ("ap", "Accounts payable service", result.ap_fee, monthly, SERVICE_PRODUCTS["ap"]),
        ("ar", "Accounts receivable service", result.ar_fee, monthly, SERVICE_PRODUCTS["ar"]),
        ("service_tier", "Service tier", result.service_tier_fee, monthly, None),
        (
            "bookkeeping",
            "Bookkeeping setup",
            result.bookkeeping.setup_fee,
            one_time,
            SERVICE_PRODUCTS["bookkeeping"],
        ),
        ("taas", "TaaS prior years", result.taas.setup_fee, one_time, SERVICE_PRODUCTS["taas"]),
        (
            "cleanup",
            "Bookkeeping cleanup project",
            result.cleanup_project_fee,
            one_time,
            SERVICE_PRODUCTS["cleanup"],
        ),
        (
            "prior_year_filings",
            "Prior-year filings",
            result.prior_year_filings_fee,
            one_time,
            SERVICE_PRODUCTS["prior_year_filings"],
        ),
        (
            "cfo_advisory",
            "CFO advisory",
            result.cfo_advisory_fee,
            one_time,
            result.cfo_advisory_hubspot_product_id,
        ),
        (
            "agent_of_service",
            "Registered agent service",
            result.agent_of_service_fee,
            one_time,
            SERVICE_PRODUCTS["agent_of_service"],
        ),
    ]
    return [
        QuoteLineItem(
            service=service,
            description=description,
            amount=amount,
            billing=billing,
            product_id=product_id,
        )
        for service, description, amount, billing, product_id in candidates
        if amount
    ]


__all__ = [
    "SERVICE_TIER_FEES_ACTIVE",
    "build_line_items",
    "calculate_combined_fees",
    "calculate_pricing_display",
    "calculate_quote_pricing",
    "to_ui_pricing",
]
