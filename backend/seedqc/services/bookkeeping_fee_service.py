"""Monthly bookkeeping fee calculation."""

from __future__ import annotations

import logging
from decimal import Decimal

from seedqc.models.pricing import BookkeepingBreakdown, FeeResult, ZERO_FEE
from seedqc.schemas.pricing import QuotePricingInput
from seedqc.services.pricing_config_service import EffectivePricingConfig
from seedqc.services.pricing_constants import (
    BOOKKEEPING_SETUP_MULTIPLIER,
    INDUSTRY_MULTIPLIERS,
    NEUTRAL_INDUSTRY,
    REVENUE_MULTIPLIERS,
    TRANSACTION_SURCHARGES,
    round_half_up,
)

logger = logging.getLogger(__name__)


def calculate_bookkeeping_fees(
    data: QuotePricingInput,
    config: EffectivePricingConfig,
    *,
    as_of_month: int,
) -> FeeResult:
    """Compute the monthly bookkeeping fee and its catch-up setup fee.

    The monthly fee is ``(base + transaction surcharge) x revenue multiplier
    x industry multiplier`` rounded to whole dollars. The setup fee scales
    that amount by the calendar month the quote is priced in, so a client
    joining in October pays for more catch-up work than one joining in
    February. Returns a zero fee until revenue, transactions and industry
    are all known.
    """

    if not (data.monthly_revenue_range and data.monthly_transactions and data.industry):
        return ZERO_FEE

    revenue_multiplier = REVENUE_MULTIPLIERS.get(data.monthly_revenue_range)
    if revenue_multiplier is None:
        logger.debug("Unknown revenue band %r; using 1.0", data.monthly_revenue_range)
        revenue_multiplier = Decimal("1.0")
    transaction_surcharge = TRANSACTION_SURCHARGES.get(data.monthly_transactions)
    if transaction_surcharge is None:
        logger.debug(
            "Unknown transaction band %r; no surcharge", data.monthly_transactions
        )
        transaction_surcharge = 0
    industry = INDUSTRY_MULTIPLIERS.get(data.industry, NEUTRAL_INDUSTRY)

    before_multipliers = config.base_monthly_fee + transaction_surcharge
    after_multipliers = round_half_up(
        before_multipliers * revenue_multiplier * industry.monthly
    )
    setup_fee = round_half_up(
        after_multipliers * as_of_month * BOOKKEEPING_SETUP_MULTIPLIER
    )

    breakdown = BookkeepingBreakdown(
        base_monthly_fee=config.base_monthly_fee,
        transaction_surcharge=transaction_surcharge,
        before_multipliers=before_multipliers,
        revenue_multiplier=revenue_multiplier,
        industry_multiplier=industry.monthly,
        after_multipliers=after_multipliers,
        as_of_month=as_of_month,
        setup_multiplier=BOOKKEEPING_SETUP_MULTIPLIER,
        setup_fee=setup_fee,
    )
    return FeeResult(
        monthly_fee=after_multipliers, setup_fee=setup_fee, breakdown=breakdown
    )
