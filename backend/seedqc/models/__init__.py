"""Domain model exports."""

from seedqc.models.pricing import (
    AccountsServiceBreakdown,
    AccountsServiceTier,
    AccountsVolumeBand,
    AgentOfServiceBreakdown,
    BillingFrequency,
    BookkeepingBreakdown,
    CfoAdvisoryBreakdown,
    CfoAdvisoryResult,
    CfoAdvisoryType,
    CleanupBreakdown,
    CombinedFeeResult,
    FeeResult,
    Industry,
    IndustryMultiplier,
    PayrollBreakdown,
    PricingDisplay,
    PriorYearFilingsBreakdown,
    QuoteLineItem,
    RevenueBand,
    ServiceTier,
    TaasBreakdown,
    TransactionBand,
    ZERO_FEE,
)

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
