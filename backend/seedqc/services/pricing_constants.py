"""Pricing rates, multiplier tables and rounding helpers.

Single source of truth for the numbers the fee calculators use. Values that
an administrator may override live in ``DEFAULT_*`` constants and are
resolved through :mod:`seedqc.services.pricing_config_service`.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

from seedqc.models.pricing import (
    AccountsVolumeBand,
    Industry,
    IndustryMultiplier,
    RevenueBand,
    ServiceTier,
    TransactionBand,
)

# Overridable defaults
DEFAULT_BASE_MONTHLY_FEE = 150
DEFAULT_QBO_MONTHLY_FEE = 60
DEFAULT_PRIOR_YEAR_FILING_FEE_PER_YEAR = 1500
DEFAULT_CLEANUP_FEE_PER_MONTH = 100
DEFAULT_BOOKKEEPING_WITH_TAAS_DISCOUNT_PCT = Decimal("0.5")
DEFAULT_MONTHLY_ROUNDING_STEP = 25
DEFAULT_SERVICE_TIER_FEES: dict[str, int] = {
    ServiceTier.AUTOMATED.value: 0,
    ServiceTier.GUIDED.value: 79,
    ServiceTier.CONCIERGE.value: 249,
}

REVENUE_MULTIPLIERS: dict[str, Decimal] = {
    RevenueBand.UNDER_10K: Decimal("1.0"),
    RevenueBand.FROM_10K_TO_25K: Decimal("1.0"),
    RevenueBand.FROM_25K_TO_75K: Decimal("2.2"),
    RevenueBand.FROM_75K_TO_250K: Decimal("3.5"),
    RevenueBand.FROM_250K_TO_1M: Decimal("5.0"),
    RevenueBand.OVER_1M: Decimal("7.0"),
}

TRANSACTION_SURCHARGES: dict[str, int] = {
    TransactionBand.UNDER_100: 0,
    TransactionBand.FROM_100_TO_300: 100,
    TransactionBand.FROM_300_TO_600: 500,
    TransactionBand.FROM_600_TO_1000: 800,
    TransactionBand.FROM_1000_TO_2000: 1200,
    TransactionBand.OVER_2000: 1600,
}


def _industry(monthly: str, cleanup: str) -> IndustryMultiplier:
    return IndustryMultiplier(monthly=Decimal(monthly), cleanup=Decimal(cleanup))


INDUSTRY_MULTIPLIERS: dict[str, IndustryMultiplier] = {
    Industry.SOFTWARE_SAAS: _industry("1.0", "1.0"),
    Industry.PROFESSIONAL_SERVICES: _industry("1.0", "1.1"),
    Industry.CONSULTING: _industry("1.0", "1.05"),
    Industry.HEALTHCARE_MEDICAL: _industry("1.4", "1.3"),
    Industry.REAL_ESTATE: _industry("1.25", "1.05"),
    Industry.PROPERTY_MANAGEMENT: _industry("1.3", "1.2"),
    Industry.ECOMMERCE_RETAIL: _industry("1.35", "1.15"),
    Industry.RESTAURANT_FOOD_SERVICE: _industry("1.6", "1.4"),
    Industry.HOSPITALITY: _industry("1.6", "1.4"),
    Industry.CONSTRUCTION_TRADES: _industry("1.5", "1.08"),
    Industry.MANUFACTURING: _industry("1.45", "1.25"),
    Industry.TRANSPORTATION_LOGISTICS: _industry("1.4", "1.2"),
    Industry.NONPROFIT: _industry("1.2", "1.15"),
    Industry.LAW_FIRM: _industry("1.3", "1.35"),
    Industry.ACCOUNTING_FINANCE: _industry("1.1", "1.1"),
    Industry.MARKETING_ADVERTISING: _industry("1.15", "1.1"),
    Industry.INSURANCE: _industry("1.35", "1.25"),
    Industry.AUTOMOTIVE: _industry("1.4", "1.2"),
    Industry.EDUCATION: _industry("1.25", "1.2"),
    Industry.FITNESS_WELLNESS: _industry("1.3", "1.15"),
    Industry.ENTERTAINMENT_EVENTS: _industry("1.5", "1.3"),
    Industry.AGRICULTURE: _industry("1.45", "1.2"),
    Industry.TECHNOLOGY_IT_SERVICES: _industry("1.1", "1.05"),
    Industry.MULTI_ENTITY_HOLDING: _industry("1.35", "1.25"),
    Industry.OTHER: _industry("1.2", "1.15"),
}

NEUTRAL_INDUSTRY = _industry("1.0", "1.0")

# Bookkeeping setup: monthly fee x calendar month x multiplier
BOOKKEEPING_SETUP_MULTIPLIER = Decimal("0.25")

# TaaS
TAAS_BASE_FEE = 150
TAAS_ENTITY_UPCHARGE_PER_ENTITY = 75
TAAS_ENTITY_THRESHOLD = 5
TAAS_STATE_UPCHARGE_PER_STATE = 50
TAAS_MAX_ADDITIONAL_STATES = 49
TAAS_INTERNATIONAL_UPCHARGE = 200
TAAS_OWNER_UPCHARGE_PER_OWNER = 25
TAAS_OWNER_THRESHOLD = 5
TAAS_MESSY_BOOKKEEPING_UPCHARGE = 25
TAAS_MESSY_BOOKKEEPING_QUALITY = "Messy"
TAAS_PERSONAL_1040_PER_OWNER = 25
TAAS_PRIOR_YEAR_SETUP_FEE = 2100

TAAS_AVERAGE_MONTHLY_REVENUE: dict[str, int] = {
    RevenueBand.UNDER_10K: 5_000,
    RevenueBand.FROM_10K_TO_25K: 17_500,
    RevenueBand.FROM_25K_TO_75K: 50_000,
    RevenueBand.FROM_75K_TO_250K: 162_500,
    RevenueBand.FROM_250K_TO_1M: 625_000,
    RevenueBand.OVER_1M: 1_000_000,
}
TAAS_DEFAULT_AVERAGE_MONTHLY_REVENUE = 5_000

# (inclusive upper bound, multiplier); anything above the last bound is 2.0x
TAAS_REVENUE_TIERS: tuple[tuple[int, Decimal], ...] = (
    (10_000, Decimal("1.0")),
    (25_000, Decimal("1.2")),
    (75_000, Decimal("1.4")),
    (250_000, Decimal("1.6")),
    (1_000_000, Decimal("1.8")),
)
TAAS_TOP_REVENUE_MULTIPLIER = Decimal("2.0")

# CFO advisory
CFO_PAY_AS_YOU_GO_HOURS = 8
CFO_PAY_AS_YOU_GO_RATE = 300
CFO_PAY_AS_YOU_GO_FEE = CFO_PAY_AS_YOU_GO_HOURS * CFO_PAY_AS_YOU_GO_RATE
CFO_PAY_AS_YOU_GO_PRODUCT_ID = "28945017957"
# hours -> (hourly rate, bundle total, product id)
CFO_BUNDLES: dict[int, tuple[int, int, str]] = {
    8: (295, 2360, "28928008785"),
    16: (290, 4640, "28945017959"),
    32: (285, 9120, "28960863883"),
    40: (280, 11200, "28960863884"),
}

# Payroll
PAYROLL_BASE_FEE = 100
PAYROLL_INCLUDED_EMPLOYEES = 3
PAYROLL_EMPLOYEE_UPCHARGE = 12
PAYROLL_INCLUDED_STATES = 1
PAYROLL_STATE_UPCHARGE = 25

# Accounts payable / receivable
ACCOUNTS_VOLUME_FEES: dict[str, int] = {
    AccountsVolumeBand.UP_TO_25: 150,
    AccountsVolumeBand.FROM_26_TO_100: 300,
    AccountsVolumeBand.FROM_101_TO_250: 600,
    AccountsVolumeBand.OVER_250: 1000,
}
ACCOUNTS_INCLUDED_COUNTERPARTIES = 5
ACCOUNTS_COUNTERPARTY_UPCHARGE = 12
ACCOUNTS_ADVANCED_MULTIPLIER = Decimal("2.5")

# Registered agent
AGENT_OF_SERVICE_BASE_FEE = 150
AGENT_OF_SERVICE_PER_STATE_FEE = 150
AGENT_OF_SERVICE_COMPLEX_CASE_FEE = 300

# HubSpot product ids used for quote line items
SERVICE_PRODUCTS: dict[str, str | None] = {
    "bookkeeping": "25687054003",
    "taas": "26203849099",
    "cleanup": "25683750263",
    "prior_year_filings": "26354718811",
    "payroll": None,
    "ap": "28960182651",
    "ar": "28960244571",
    "agent_of_service": "25683750275",
}


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: int | float | Decimal) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_up_to_step(value: int | float | Decimal, step: int) -> int:
    """Round up to the next multiple of ``step``."""
    if step <= 0:
        raise ValueError("Rounding step must be positive")
    return math.ceil(to_decimal(value) / step) * step


def _validate_constants() -> None:
    constants = {
        "DEFAULT_BASE_MONTHLY_FEE": DEFAULT_BASE_MONTHLY_FEE,
        "DEFAULT_QBO_MONTHLY_FEE": DEFAULT_QBO_MONTHLY_FEE,
        "DEFAULT_PRIOR_YEAR_FILING_FEE_PER_YEAR": DEFAULT_PRIOR_YEAR_FILING_FEE_PER_YEAR,
        "DEFAULT_CLEANUP_FEE_PER_MONTH": DEFAULT_CLEANUP_FEE_PER_MONTH,
        "DEFAULT_MONTHLY_ROUNDING_STEP": DEFAULT_MONTHLY_ROUNDING_STEP,
        "BOOKKEEPING_SETUP_MULTIPLIER": BOOKKEEPING_SETUP_MULTIPLIER,
        "TAAS_BASE_FEE": TAAS_BASE_FEE,
        "TAAS_ENTITY_UPCHARGE_PER_ENTITY": TAAS_ENTITY_UPCHARGE_PER_ENTITY,
        "TAAS_ENTITY_THRESHOLD": TAAS_ENTITY_THRESHOLD,
        "TAAS_STATE_UPCHARGE_PER_STATE": TAAS_STATE_UPCHARGE_PER_STATE,
        "TAAS_MAX_ADDITIONAL_STATES": TAAS_MAX_ADDITIONAL_STATES,
        "TAAS_INTERNATIONAL_UPCHARGE": TAAS_INTERNATIONAL_UPCHARGE,
        "TAAS_OWNER_UPCHARGE_PER_OWNER": TAAS_OWNER_UPCHARGE_PER_OWNER,
        "TAAS_OWNER_THRESHOLD": TAAS_OWNER_THRESHOLD,
        "TAAS_MESSY_BOOKKEEPING_UPCHARGE": TAAS_MESSY_BOOKKEEPING_UPCHARGE,
        "TAAS_PERSONAL_1040_PER_OWNER": TAAS_PERSONAL_1040_PER_OWNER,
        "TAAS_PRIOR_YEAR_SETUP_FEE": TAAS_PRIOR_YEAR_SETUP_FEE,
        "PAYROLL_BASE_FEE": PAYROLL_BASE_FEE,
        "ACCOUNTS_COUNTERPARTY_UPCHARGE": ACCOUNTS_COUNTERPARTY_UPCHARGE,
        "AGENT_OF_SERVICE_BASE_FEE": AGENT_OF_SERVICE_BASE_FEE,
    }
    for name, value in constants.items():
        if value < 0:
            raise ValueError(f"Invalid pricing constant: {name} = {value}")
    if DEFAULT_MONTHLY_ROUNDING_STEP == 0:
        raise ValueError("DEFAULT_MONTHLY_ROUNDING_STEP must be positive")


_validate_constants()
