"""Pricing schema definitions."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from seedqc.models.pricing import BillingFrequency


class QuotePricingInput(BaseModel):
    """Snapshot of quote form state fed to the pricing engine.

    Every field is optional: the form calls the engine while it is still
    being filled in, and missing details simply price as zero.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Classification
    monthly_revenue_range: str | None = Field(default=None, alias="monthlyRevenueRange")
    monthly_transactions: str | None = Field(default=None, alias="monthlyTransactions")
    industry: str | None = None
    entity_type: str | None = Field(default=None, alias="entityType")

    # Service toggles, current names first then legacy ones
    service_monthly_bookkeeping: bool | None = Field(
        default=None, alias="serviceMonthlyBookkeeping"
    )
    service_bookkeeping: bool | None = Field(default=None, alias="serviceBookkeeping")
    includes_bookkeeping: bool | None = Field(default=None, alias="includesBookkeeping")
    service_cleanup_projects: bool | None = Field(
        default=None, alias="serviceCleanupProjects"
    )
    service_taas_monthly: bool | None = Field(default=None, alias="serviceTaasMonthly")
    service_taas: bool | None = Field(default=None, alias="serviceTaas")
    includes_taas: bool | None = Field(default=None, alias="includesTaas")
    service_prior_year_filings: bool | None = Field(
        default=None, alias="servicePriorYearFilings"
    )
    service_cfo_advisory: bool | None = Field(default=None, alias="serviceCfoAdvisory")
    service_payroll_service: bool | None = Field(
        default=None, alias="servicePayrollService"
    )
    service_payroll: bool | None = Field(default=None, alias="servicePayroll")
    service_ap_ar_service: bool | None = Field(default=None, alias="serviceApArService")
    service_ap_lite: bool | None = Field(default=None, alias="serviceApLite")
    service_ap_advanced: bool | None = Field(default=None, alias="serviceApAdvanced")
    service_ar_service: bool | None = Field(default=None, alias="serviceArService")
    service_ar_lite: bool | None = Field(default=None, alias="serviceArLite")
    service_ar_advanced: bool | None = Field(default=None, alias="serviceArAdvanced")
    service_agent_of_service: bool | None = Field(
        default=None, alias="serviceAgentOfService"
    )

    # TaaS
    num_entities: int | None = Field(default=None, alias="numEntities")
    custom_num_entities: int | None = Field(default=None, alias="customNumEntities")
    states_filed: int | None = Field(default=None, alias="statesFiled")
    custom_states_filed: int | None = Field(default=None, alias="customStatesFiled")
    num_business_owners: int | None = Field(default=None, alias="numBusinessOwners")
    custom_num_business_owners: int | None = Field(
        default=None, alias="customNumBusinessOwners"
    )
    international_filing: bool | None = Field(default=None, alias="internationalFiling")
    include_1040s: bool | None = Field(default=None, alias="include1040s")
    bookkeeping_quality: str | None = Field(default=None, alias="bookkeepingQuality")
    prior_years_unfiled: int | None = Field(default=None, alias="priorYearsUnfiled")

    # Projects
    cleanup_periods: list[str] | None = Field(default=None, alias="cleanupPeriods")
    cleanup_months: int | None = Field(default=None, alias="cleanupMonths")
    prior_year_filings: list[int | str] | None = Field(
        default=None, alias="priorYearFilings"
    )

    # CFO advisory
    cfo_advisory_type: str | None = Field(default=None, alias="cfoAdvisoryType")
    cfo_advisory_bundle_hours: int | None = Field(
        default=None, alias="cfoAdvisoryBundleHours"
    )

    # Payroll
    payroll_employee_count: int | None = Field(default=None, alias="payrollEmployeeCount")
    payroll_state_count: int | None = Field(default=None, alias="payrollStateCount")

    # Accounts payable
    ap_vendor_bills_band: str | None = Field(default=None, alias="apVendorBillsBand")
    ap_vendor_count: int | None = Field(default=None, alias="apVendorCount")
    custom_ap_vendor_count: int | None = Field(default=None, alias="customApVendorCount")
    ap_service_tier: str | None = Field(default=None, alias="apServiceTier")

    # Accounts receivable
    ar_customer_invoices_band: str | None = Field(
        default=None, alias="arCustomerInvoicesBand"
    )
    ar_customer_count: int | None = Field(default=None, alias="arCustomerCount")
    custom_ar_customer_count: int | None = Field(
        default=None, alias="customArCustomerCount"
    )
    ar_service_tier: str | None = Field(default=None, alias="arServiceTier")

    # Registered agent
    agent_of_service_additional_states: int | None = Field(
        default=None, alias="agentOfServiceAdditionalStates"
    )
    agent_of_service_complex_case: bool | None = Field(
        default=None, alias="agentOfServiceComplexCase"
    )

    # Modifiers
    qbo_subscription: bool | None = Field(default=None, alias="qboSubscription")
    service_tier: str | None = Field(default=None, alias="serviceTier")


class _ConfigSection(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class ServiceToggle(_ConfigSection):
    enabled: bool = True


class ServiceToggles(_ConfigSection):
    """Per-service enable flags; omitted services stay enabled."""

    bookkeeping: ServiceToggle | None = None
    cleanup: ServiceToggle | None = None
    taas: ServiceToggle | None = None
    prior_year_filings: ServiceToggle | None = None
    cfo_advisory: ServiceToggle | None = None
    payroll: ServiceToggle | None = None
    ap: ServiceToggle | None = None
    ar: ServiceToggle | None = None
    agent_of_service: ServiceToggle | None = None
    qbo: ServiceToggle | None = None
    service_tier: ServiceToggle | None = None


class FeeOverrides(_ConfigSection):
    base_monthly_fee: int | None = Field(default=None, ge=0)
    qbo_monthly_fee: int | None = Field(default=None, ge=0)
    prior_year_filing_per_year: int | None = Field(default=None, ge=0)
    cleanup_per_month: int | None = Field(default=None, ge=0)
    service_tier_fees: dict[str, Annotated[int, Field(ge=0)]] | None = None


class DiscountOverrides(_ConfigSection):
    bookkeeping_with_taas_pct: Decimal | None = Field(
        default=None, ge=Decimal("0"), le=Decimal("1")
    )


class RoundingOverrides(_ConfigSection):
    monthly_step: int | None = Field(default=None, gt=0)


class PricingConfig(_ConfigSection):
    """Administrative overrides layered on top of the built-in rates."""

    services: ServiceToggles | None = None
    fees: FeeOverrides | None = None
    discounts: DiscountOverrides | None = None
    rounding: RoundingOverrides | None = None


class _ReadModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class BookkeepingBreakdownRead(_ReadModel):
    base_monthly_fee: int
    transaction_surcharge: int
    before_multipliers: int
    revenue_multiplier: Decimal
    industry_multiplier: Decimal
    after_multipliers: int
    as_of_month: int
    setup_multiplier: Decimal
    setup_fee: int
    discount_applied: bool = False
    discount_pct: Decimal | None = None
    monthly_fee_before_discount: int | None = None
    monthly_fee_after_discount: int | None = None


class TaasBreakdownRead(_ReadModel):
    base: int
    entity_upcharge: int
    state_upcharge: int
    international_upcharge: int
    owner_upcharge: int
    bookkeeping_quality_upcharge: int
    personal_1040_upcharge: int
    before_multipliers: int
    industry_multiplier: Decimal
    average_monthly_revenue: int
    revenue_multiplier: Decimal
    after_multipliers: Decimal
    rounding_step: int
    monthly_fee: int
    prior_years_unfiled: int
    setup_fee: int


class FeeResultRead(_ReadModel):
    monthly_fee: int
    setup_fee: int


class BookkeepingFeeRead(FeeResultRead):
    breakdown: BookkeepingBreakdownRead | None = None


class TaasFeeRead(FeeResultRead):
    breakdown: TaasBreakdownRead | None = None


class CombinedFeeRead(_ReadModel):
    """Per-service and combined fees for a quote."""

    bookkeeping: BookkeepingFeeRead
    taas: TaasFeeRead
    combined: FeeResultRead
    includes_bookkeeping: bool
    includes_monthly_bookkeeping: bool
    includes_bookkeeping_cleanup_only: bool
    includes_taas: bool
    includes_cleanup: bool
    includes_prior_year_filings: bool
    includes_cfo_advisory: bool
    includes_payroll: bool
    includes_ap: bool
    includes_ar: bool
    includes_agent_of_service: bool
    cleanup_project_fee: int
    prior_year_filings_fee: int
    cfo_advisory_fee: int
    cfo_advisory_hubspot_product_id: str | None = None
    payroll_fee: int
    ap_fee: int
    ar_fee: int
    agent_of_service_fee: int
    service_tier_fee: int
    qbo_fee: int


class PricingDisplayRead(CombinedFeeRead):
    """Flat totals view for the quote form."""

    total_monthly_fee: int
    total_setup_fee: int
    package_discount_monthly: int | None = None


class QuoteLineItemRead(_ReadModel):
    service: str
    description: str
    amount: int
    billing: BillingFrequency
    product_id: str | None = None


class QuoteLineItemsRead(_ReadModel):
    items: list[QuoteLineItemRead]
    monthly_total: int
    setup_total: int
    snapshot: dict[str, str | None]


class PricingCalculateRequest(BaseModel):
    """Input payload for the pricing endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    input: QuotePricingInput
    pricing_config: PricingConfig | None = Field(default=None, alias="config")
    as_of_month: int | None = Field(default=None, ge=1, le=12, alias="asOfMonth")


class EffectivePricingConfigRead(_ReadModel):
    """Fully resolved pricing configuration."""

    bookkeeping_enabled: bool
    cleanup_enabled: bool
    taas_enabled: bool
    prior_year_filings_enabled: bool
    cfo_advisory_enabled: bool
    payroll_enabled: bool
    ap_enabled: bool
    ar_enabled: bool
    agent_of_service_enabled: bool
    qbo_enabled: bool
    service_tier_enabled: bool
    base_monthly_fee: int
    qbo_monthly_fee: int
    prior_year_filing_per_year: int
    cleanup_per_month: int
    service_tier_fees: dict[str, int]
    bookkeeping_with_taas_pct: Decimal
    monthly_step: int


__all__ = [
    "BookkeepingBreakdownRead",
    "BookkeepingFeeRead",
    "CombinedFeeRead",
    "DiscountOverrides",
    "EffectivePricingConfigRead",
    "FeeOverrides",
    "FeeResultRead",
    "PricingCalculateRequest",
    "PricingConfig",
    "PricingDisplayRead",
    "QuoteLineItemRead",
    "QuoteLineItemsRead",
    "QuotePricingInput",
    "RoundingOverrides",
    "ServiceToggle",
    "ServiceToggles",
    "TaasBreakdownRead",
    "TaasFeeRead",
]
