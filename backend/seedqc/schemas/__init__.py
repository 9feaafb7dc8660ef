"""Schema exports."""

from seedqc.schemas.pricing import (
    BookkeepingBreakdownRead,
    BookkeepingFeeRead,
    CombinedFeeRead,
    DiscountOverrides,
    EffectivePricingConfigRead,
    FeeOverrides,
    FeeResultRead,
    PricingCalculateRequest,
    PricingConfig,
    PricingDisplayRead,
    QuoteLineItemRead,
    QuoteLineItemsRead,
    QuotePricingInput,
    RoundingOverrides,
    ServiceToggle,
    ServiceToggles,
    TaasBreakdownRead,
    TaasFeeRead,
)

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
