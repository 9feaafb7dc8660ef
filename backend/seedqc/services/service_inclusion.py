"""Service inclusion predicates.

Quote records went through more than one schema generation, so several
boolean fields can signal the same service. Each tuple below lists every
recognised field for a service; this module is the only place that knows
about the aliases.
"""

from __future__ import annotations

from seedqc.schemas.pricing import QuotePricingInput

MONTHLY_BOOKKEEPING_KEYS = (
    "service_monthly_bookkeeping",
    "service_bookkeeping",
    "includes_bookkeeping",
)
CLEANUP_KEYS = ("service_cleanup_projects",)
TAAS_KEYS = ("service_taas_monthly", "service_taas", "includes_taas")
PRIOR_YEAR_FILINGS_KEYS = ("service_prior_year_filings",)
CFO_ADVISORY_KEYS = ("service_cfo_advisory",)
PAYROLL_KEYS = ("service_payroll_service", "service_payroll")
AP_KEYS = ("service_ap_ar_service", "service_ap_lite", "service_ap_advanced")
AR_KEYS = ("service_ar_service", "service_ar_lite", "service_ar_advanced")
AGENT_OF_SERVICE_KEYS = ("service_agent_of_service",)


def _any_flag(data: QuotePricingInput, keys: tuple[str, ...]) -> bool:
    return any(bool(getattr(data, key, None)) for key in keys)


def includes_monthly_bookkeeping(data: QuotePricingInput) -> bool:
    return _any_flag(data, MONTHLY_BOOKKEEPING_KEYS)


def includes_cleanup(data: QuotePricingInput) -> bool:
    return _any_flag(data, CLEANUP_KEYS)


def includes_taas(data: QuotePricingInput) -> bool:
    return _any_flag(data, TAAS_KEYS)


def includes_prior_year_filings(data: QuotePricingInput) -> bool:
    return _any_flag(data, PRIOR_YEAR_FILINGS_KEYS)


def includes_cfo_advisory(data: QuotePricingInput) -> bool:
    return _any_flag(data, CFO_ADVISORY_KEYS)


def includes_payroll(data: QuotePricingInput) -> bool:
    return _any_flag(data, PAYROLL_KEYS)


def includes_ap(data: QuotePricingInput) -> bool:
    return _any_flag(data, AP_KEYS)


def includes_ar(data: QuotePricingInput) -> bool:
    return _any_flag(data, AR_KEYS)


def includes_agent_of_service(data: QuotePricingInput) -> bool:
    return _any_flag(data, AGENT_OF_SERVICE_KEYS)
