"""Fee calculators for the smaller add-on services.

Every calculator here is total: incomplete input prices as zero rather than
raising, because the quote form asks for a price on every keystroke.
"""

from __future__ import annotations

from decimal import Decimal

from seedqc.models.pricing import (
    AccountsServiceBreakdown,
    AccountsServiceTier,
    AgentOfServiceBreakdown,
    CfoAdvisoryBreakdown,
    CfoAdvisoryResult,
    CfoAdvisoryType,
    CleanupBreakdown,
    FeeResult,
    PayrollBreakdown,
    PriorYearFilingsBreakdown,
)
from seedqc.schemas.pricing import QuotePricingInput
from seedqc.services.pricing_config_service import EffectivePricingConfig
from seedqc.services.pricing_constants import (
    ACCOUNTS_ADVANCED_MULTIPLIER,
    ACCOUNTS_COUNTERPARTY_UPCHARGE,
    ACCOUNTS_INCLUDED_COUNTERPARTIES,
    ACCOUNTS_VOLUME_FEES,
    AGENT_OF_SERVICE_BASE_FEE,
    AGENT_OF_SERVICE_COMPLEX_CASE_FEE,
    AGENT_OF_SERVICE_PER_STATE_FEE,
    CFO_BUNDLES,
    CFO_PAY_AS_YOU_GO_FEE,
    CFO_PAY_AS_YOU_GO_HOURS,
    CFO_PAY_AS_YOU_GO_PRODUCT_ID,
    CFO_PAY_AS_YOU_GO_RATE,
    PAYROLL_BASE_FEE,
    PAYROLL_EMPLOYEE_UPCHARGE,
    PAYROLL_INCLUDED_EMPLOYEES,
    PAYROLL_INCLUDED_STATES,
    PAYROLL_STATE_UPCHARGE,
    round_half_up,
)


def _count(value: int | None, default: int = 0) -> int:
    if value is None:
        return default
    return max(value, 0)


def calculate_cleanup_project_fee(
    data: QuotePricingInput, config: EffectivePricingConfig
) -> FeeResult:
    """One-time cleanup fee: months being cleaned up x per-month rate."""

    if data.cleanup_periods:
        periods = len(data.cleanup_periods)
    else:
        periods = _count(data.cleanup_months)
    fee = periods * config.cleanup_per_month
    return FeeResult(
        setup_fee=fee,
        breakdown=CleanupBreakdown(periods=periods, fee_per_month=config.cleanup_per_month),
    )


def calculate_prior_year_filings_fee(
    data: QuotePricingInput, config: EffectivePricingConfig
) -> FeeResult:
    years = len(data.prior_year_filings or [])
    fee = years * config.prior_year_filing_per_year
    return FeeResult(
        setup_fee=fee,
        breakdown=PriorYearFilingsBreakdown(
            years=years, fee_per_year=config.prior_year_filing_per_year
        ),
    )


def calculate_cfo_advisory_fees(data: QuotePricingInput) -> CfoAdvisoryResult:
    """Price CFO advisory by billing structure.

    Pay-as-you-go is an eight hour deposit at the standard rate. Bundles are
    prepaid blocks of hours at a lower rate; an unknown bundle size prices
    as zero. Each option maps to its own HubSpot product.
    """

    if data.cfo_advisory_type == CfoAdvisoryType.PAY_AS_YOU_GO:
        return CfoAdvisoryResult(
            fee=CFO_PAY_AS_YOU_GO_FEE,
            hubspot_product_id=CFO_PAY_AS_YOU_GO_PRODUCT_ID,
            breakdown=CfoAdvisoryBreakdown(
                advisory_type=CfoAdvisoryType.PAY_AS_YOU_GO.value,
                hours=CFO_PAY_AS_YOU_GO_HOURS,
                hourly_rate=CFO_PAY_AS_YOU_GO_RATE,
            ),
        )
    if data.cfo_advisory_type == CfoAdvisoryType.BUNDLED:
        bundle = CFO_BUNDLES.get(data.cfo_advisory_bundle_hours or 0)
        if bundle is None:
            return CfoAdvisoryResult()
        rate, total, product_id = bundle
        return CfoAdvisoryResult(
            fee=total,
            hubspot_product_id=product_id,
            breakdown=CfoAdvisoryBreakdown(
                advisory_type=CfoAdvisoryType.BUNDLED.value,
                hours=data.cfo_advisory_bundle_hours or 0,
                hourly_rate=rate,
            ),
        )
    return CfoAdvisoryResult()


def calculate_payroll_fee(data: QuotePricingInput) -> FeeResult:
    employees = _count(data.payroll_employee_count, default=1)
    states = _count(data.payroll_state_count, default=1)
    employee_upcharge = (
        max(employees - PAYROLL_INCLUDED_EMPLOYEES, 0) * PAYROLL_EMPLOYEE_UPCHARGE
    )
    state_upcharge = max(states - PAYROLL_INCLUDED_STATES, 0) * PAYROLL_STATE_UPCHARGE
    return FeeResult(
        monthly_fee=PAYROLL_BASE_FEE + employee_upcharge + state_upcharge,
        breakdown=PayrollBreakdown(
            base=PAYROLL_BASE_FEE,
            employee_count=employees,
            employee_upcharge=employee_upcharge,
            state_count=states,
            state_upcharge=state_upcharge,
        ),
    )


def _resolve_tier(explicit: str | None, legacy_advanced: bool | None) -> AccountsServiceTier:
    if explicit:
        try:
            return AccountsServiceTier(explicit.lower())
        except ValueError:
            return AccountsServiceTier.LITE
    if legacy_advanced:
        return AccountsServiceTier.ADVANCED
    return AccountsServiceTier.LITE


def _accounts_service_fee(
    band: str | None,
    count: int | None,
    custom_count: int | None,
    tier: AccountsServiceTier,
) -> FeeResult:
    band_fee = ACCOUNTS_VOLUME_FEES.get(band or "")
    if band_fee is None:
        return FeeResult()

    counterparties = custom_count if custom_count else _count(count, default=1)
    upcharge = (
        max(counterparties - ACCOUNTS_INCLUDED_COUNTERPARTIES, 0)
        * ACCOUNTS_COUNTERPARTY_UPCHARGE
    )
    subtotal = band_fee + upcharge
    multiplier = (
        ACCOUNTS_ADVANCED_MULTIPLIER
        if tier is AccountsServiceTier.ADVANCED
        else Decimal("1")
    )
    return FeeResult(
        monthly_fee=round_half_up(subtotal * multiplier),
        breakdown=AccountsServiceBreakdown(
            volume_band=band or "",
            band_fee=band_fee,
            counterparty_count=counterparties,
            counterparty_upcharge=upcharge,
            subtotal=subtotal,
            tier=tier,
            tier_multiplier=multiplier,
        ),
    )


def calculate_ap_fee(data: QuotePricingInput) -> FeeResult:
    """Accounts payable: bill volume band plus vendors beyond the first five."""

    return _accounts_service_fee(
        data.ap_vendor_bills_band,
        data.ap_vendor_count,
        data.custom_ap_vendor_count,
        _resolve_tier(data.ap_service_tier, data.service_ap_advanced),
    )


def calculate_ar_fee(data: QuotePricingInput) -> FeeResult:
    """Accounts receivable: invoice volume band plus customers beyond the first five."""

    return _accounts_service_fee(
        data.ar_customer_invoices_band,
        data.ar_customer_count,
        data.custom_ar_customer_count,
        _resolve_tier(data.ar_service_tier, data.service_ar_advanced),
    )


def calculate_agent_of_service_fee(data: QuotePricingInput) -> FeeResult:
    additional_states = _count(data.agent_of_service_additional_states)
    state_fee = additional_states * AGENT_OF_SERVICE_PER_STATE_FEE
    complex_fee = (
        AGENT_OF_SERVICE_COMPLEX_CASE_FEE if data.agent_of_service_complex_case else 0
    )
    return FeeResult(
        setup_fee=AGENT_OF_SERVICE_BASE_FEE + state_fee + complex_fee,
        breakdown=AgentOfServiceBreakdown(
            base=AGENT_OF_SERVICE_BASE_FEE,
            additional_states=additional_states,
            additional_state_fee=state_fee,
            complex_case_fee=complex_fee,
        ),
    )


__all__ = [
    "calculate_agent_of_service_fee",
    "calculate_ap_fee",
    "calculate_ar_fee",
    "calculate_cfo_advisory_fees",
    "calculate_cleanup_project_fee",
    "calculate_payroll_fee",
    "calculate_prior_year_filings_fee",
]
