"""Pricing enumerations and calculation result types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

MONEY_PLACES = Decimal("0.01")


class RevenueBand(str, enum.Enum):
    """Average monthly revenue buckets, ordered low to high."""

    UNDER_10K = "<$10K"
    FROM_10K_TO_25K = "10K-25K"
    FROM_25K_TO_75K = "25K-75K"
    FROM_75K_TO_250K = "75K-250K"
    FROM_250K_TO_1M = "250K-1M"
    OVER_1M = "1M+"


class TransactionBand(str, enum.Enum):
    """Monthly transaction volume buckets, ordered low to high."""

    UNDER_100 = "<100"
    FROM_100_TO_300 = "100-300"
    FROM_300_TO_600 = "300-600"
    FROM_600_TO_1000 = "600-1000"
    FROM_1000_TO_2000 = "1000-2000"
    OVER_2000 = "2000+"


class Industry(str, enum.Enum):
    """Industries recognised by the multiplier table."""

    SOFTWARE_SAAS = "Software/SaaS"
    PROFESSIONAL_SERVICES = "Professional Services"
    CONSULTING = "Consulting"
    HEALTHCARE_MEDICAL = "Healthcare/Medical"
    REAL_ESTATE = "Real Estate"
    PROPERTY_MANAGEMENT = "Property Management"
    ECOMMERCE_RETAIL = "E-commerce/Retail"
    RESTAURANT_FOOD_SERVICE = "Restaurant/Food Service"
    HOSPITALITY = "Hospitality"
    CONSTRUCTION_TRADES = "Construction/Trades"
    MANUFACTURING = "Manufacturing"
    TRANSPORTATION_LOGISTICS = "Transportation/Logistics"
    NONPROFIT = "Nonprofit"
    LAW_FIRM = "Law Firm"
    ACCOUNTING_FINANCE = "Accounting/Finance"
    MARKETING_ADVERTISING = "Marketing/Advertising"
    INSURANCE = "Insurance"
    AUTOMOTIVE = "Automotive"
    EDUCATION = "Education"
    FITNESS_WELLNESS = "Fitness/Wellness"
    ENTERTAINMENT_EVENTS = "Entertainment/Events"
    AGRICULTURE = "Agriculture"
    TECHNOLOGY_IT_SERVICES = "Technology/IT Services"
    MULTI_ENTITY_HOLDING = "Multi-entity/Holding Companies"
    OTHER = "Other"


class AccountsVolumeBand(str, enum.Enum):
    """Monthly bill or invoice volume buckets for AP/AR."""

    UP_TO_25 = "0-25"
    FROM_26_TO_100 = "26-100"
    FROM_101_TO_250 = "101-250"
    OVER_250 = "251+"


class AccountsServiceTier(str, enum.Enum):
    """Service intensity for AP/AR."""

    LITE = "lite"
    ADVANCED = "advanced"


class CfoAdvisoryType(str, enum.Enum):
    """Billing structures offered for CFO advisory."""

    PAY_AS_YOU_GO = "pay_as_you_go"
    BUNDLED = "bundled"


class ServiceTier(str, enum.Enum):
    """Client service level designation."""

    AUTOMATED = "Automated"
    GUIDED = "Guided"
    CONCIERGE = "Concierge"


class BillingFrequency(str, enum.Enum):
    """Whether a quote line recurs monthly or is charged once."""

    MONTHLY = "monthly"
    ONE_TIME = "one_time"


@dataclass(slots=True, frozen=True)
class IndustryMultiplier:
    monthly: Decimal
    cleanup: Decimal


@dataclass(slots=True, frozen=True)
class BookkeepingBreakdown:
    """Intermediate values behind a bookkeeping fee."""

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


@dataclass(slots=True, frozen=True)
class TaasBreakdown:
    """Intermediate values behind a TaaS fee."""

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


@dataclass(slots=True, frozen=True)
class CleanupBreakdown:
    periods: int
    fee_per_month: int


@dataclass(slots=True, frozen=True)
class PriorYearFilingsBreakdown:
    years: int
    fee_per_year: int


@dataclass(slots=True, frozen=True)
class CfoAdvisoryBreakdown:
    advisory_type: str
    hours: int
    hourly_rate: int


@dataclass(slots=True, frozen=True)
class PayrollBreakdown:
    base: int
    employee_count: int
    employee_upcharge: int
    state_count: int
    state_upcharge: int


@dataclass(slots=True, frozen=True)
class AccountsServiceBreakdown:
    """Shared breakdown for accounts payable and receivable."""

    volume_band: str
    band_fee: int
    counterparty_count: int
    counterparty_upcharge: int
    subtotal: int
    tier: AccountsServiceTier
    tier_multiplier: Decimal


@dataclass(slots=True, frozen=True)
class AgentOfServiceBreakdown:
    base: int
    additional_states: int
    additional_state_fee: int
    complex_case_fee: int


FeeBreakdown = (
    BookkeepingBreakdown
    | TaasBreakdown
    | CleanupBreakdown
    | PriorYearFilingsBreakdown
    | CfoAdvisoryBreakdown
    | PayrollBreakdown
    | AccountsServiceBreakdown
    | AgentOfServiceBreakdown
)


@dataclass(slots=True, frozen=True)
class FeeResult:
    """Monthly and one-time fee for a single service."""

    monthly_fee: int = 0
    setup_fee: int = 0
    breakdown: FeeBreakdown | None = None


ZERO_FEE = FeeResult()


@dataclass(slots=True, frozen=True)
class CfoAdvisoryResult:
    fee: int = 0
    hubspot_product_id: str | None = None
    breakdown: CfoAdvisoryBreakdown | None = None


@dataclass(slots=True, frozen=True)
class CombinedFeeResult:
    """Aggregate pricing output for a quote."""

    bookkeeping: FeeResult
    taas: FeeResult
    combined: FeeResult
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
    cfo_advisory_hubspot_product_id: str | None
    payroll_fee: int
    ap_fee: int
    ar_fee: int
    agent_of_service_fee: int
    service_tier_fee: int
    qbo_fee: int

    def to_snapshot(self) -> dict[str, str | None]:
        """Serialize fee columns to strings for quote storage."""

        return {
            "monthly_fee": _to_str(self.combined.monthly_fee),
            "setup_fee": _to_str(self.combined.setup_fee),
            "bookkeeping_monthly_fee": _to_str(self.bookkeeping.monthly_fee),
            "bookkeeping_setup_fee": _to_str(self.bookkeeping.setup_fee),
            "taas_monthly_fee": _to_str(self.taas.monthly_fee),
            "taas_prior_years_fee": _to_str(self.taas.setup_fee),
            "cleanup_project_fee": _to_str(self.cleanup_project_fee),
            "prior_year_filings_fee": _to_str(self.prior_year_filings_fee),
            "cfo_advisory_fee": _to_str(self.cfo_advisory_fee),
            "cfo_advisory_hubspot_product_id": self.cfo_advisory_hubspot_product_id,
            "payroll_fee": _to_str(self.payroll_fee),
            "ap_fee": _to_str(self.ap_fee),
            "ar_fee": _to_str(self.ar_fee),
            "agent_of_service_fee": _to_str(self.agent_of_service_fee),
            "service_tier_fee": _to_str(self.service_tier_fee),
            "qbo_fee": _to_str(self.qbo_fee),
        }


@dataclass(slots=True, frozen=True)
class PricingDisplay(CombinedFeeResult):
    """Flat totals view consumed by the quote form."""

    total_monthly_fee: int = 0
    total_setup_fee: int = 0
    package_discount_monthly: int | None = None


@dataclass(slots=True, frozen=True)
class QuoteLineItem:
    """Individual component contributing to a quote."""

    service: str
    description: str
    amount: int
    billing: BillingFrequency
    product_id: str | None = None


def _to_str(value: int | Decimal) -> str:
    return f"{Decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP):.2f}"


__all__ = [
    "AccountsServiceBreakdown",
    "AccountsServiceTier",
    "AccountsVolumeBand",
    "AgentOfServiceBreakdown",
    "BillingFrequency",
    "BookkeepingBreakdown",
    "CfoAdvisoryBreakdown",
    "CfoAdvisoryResult",
    "CfoAdvisoryType",
    "CleanupBreakdown",
    "CombinedFeeResult",
    "FeeBreakdown",
    "FeeResult",
    "Industry",
    "IndustryMultiplier",
    "PayrollBreakdown",
    "PricingDisplay",
    "PriorYearFilingsBreakdown",
    "QuoteLineItem",
    "RevenueBand",
    "ServiceTier",
    "TaasBreakdown",
    "TransactionBand",
    "ZERO_FEE",
]
