"""Tests for the combined fee orchestrator."""

from __future__ import annotations

from dataclasses import fields
from datetime import date
from typing import Any

import pytest

from seedqc.models.pricing import BookkeepingBreakdown
from seedqc.schemas.pricing import PricingConfig, QuotePricingInput
from seedqc.services import pricing_service
from seedqc.services.pricing_config_service import (
    EffectivePricingConfig,
    resolve_pricing_config,
)

AS_OF_MONTH = 6

BOOKKEEPING = {
    "serviceMonthlyBookkeeping": True,
    "monthlyRevenueRange": "25K-75K",
    "monthlyTransactions": "100-300",
    "industry": "Professional Services",
}
TAAS = {
    "serviceTaasMonthly": True,
    "numEntities": 1,
    "statesFiled": 1,
    "numBusinessOwners": 1,
    "internationalFiling": False,
    "include1040s": False,
}


def _quote(*sections: dict[str, Any], **fields_: Any) -> QuotePricingInput:
    payload: dict[str, Any] = {}
    for section in sections:
        payload.update(section)
    payload.update(fields_)
    return QuotePricingInput.model_validate(payload)


def _price(data: QuotePricingInput, config: PricingConfig | None = None):
    return pricing_service.calculate_quote_pricing(data, config, as_of_month=AS_OF_MONTH)


def test_bookkeeping_only_quote() -> None:
    result = _price(_quote(BOOKKEEPING))

    assert result.bookkeeping.monthly_fee == 550
    assert result.taas.monthly_fee == 0
    assert result.combined.monthly_fee == 550
    assert result.combined.setup_fee == 825
    assert result.includes_bookkeeping is True
    assert result.includes_monthly_bookkeeping is True
    assert result.includes_bookkeeping_cleanup_only is False


def test_bundle_discount_halves_bookkeeping() -> None:
    result = _price(_quote(BOOKKEEPING, TAAS))

    assert result.bookkeeping.monthly_fee == 275
    # 150 x 1.0 x 1.4 = 210, rounded up to 225
    assert result.taas.monthly_fee == 225
    assert result.combined.monthly_fee == 500
    # setup is computed from the undiscounted fee
    assert result.bookkeeping.setup_fee == 825
    breakdown = result.bookkeeping.breakdown
    assert isinstance(breakdown, BookkeepingBreakdown)
    assert breakdown.discount_applied is True
    assert breakdown.monthly_fee_before_discount == 550
    assert breakdown.monthly_fee_after_discount == 275


def test_qbo_is_added_after_discount() -> None:
    result = _price(_quote(BOOKKEEPING, TAAS, qboSubscription=True))

    assert result.bookkeeping.monthly_fee == 275
    assert result.qbo_fee == 60
    assert result.combined.monthly_fee == 560


def test_qbo_requires_monthly_bookkeeping() -> None:
    result = _price(
        _quote(
            TAAS,
            monthlyRevenueRange="10K-25K",
            industry="Professional Services",
            qboSubscription=True,
        )
    )

    assert result.qbo_fee == 0
    assert result.combined.monthly_fee == 200


def test_taas_only_quote() -> None:
    result = _price(
        _quote(TAAS, monthlyRevenueRange="10K-25K", industry="Professional Services")
    )

    assert result.taas.monthly_fee == 200
    assert result.bookkeeping.monthly_fee == 0
    assert result.includes_bookkeeping is False


def test_cleanup_only_quote() -> None:
    result = _price(
        _quote(serviceCleanupProjects=True, cleanupPeriods=["2024-11", "2024-12"])
    )

    assert result.combined.monthly_fee == 0
    assert result.cleanup_project_fee == 200
    assert result.combined.setup_fee == 200
    assert result.includes_bookkeeping is True
    assert result.includes_bookkeeping_cleanup_only is True
    assert result.includes_monthly_bookkeeping is False


@pytest.mark.parametrize("tier", ["Guided", "Concierge"])
def test_service_tier_does_not_change_price(tier: str) -> None:
    automated = _price(_quote(BOOKKEEPING, serviceTier="Automated"))
    other = _price(_quote(BOOKKEEPING, serviceTier=tier))

    assert other.service_tier_fee == 0
    assert other.combined.monthly_fee == automated.combined.monthly_fee


def test_legacy_toggles_are_recognised() -> None:
    current = _price(_quote(BOOKKEEPING, TAAS))
    legacy_fields = {**BOOKKEEPING, **TAAS}
    legacy_fields.pop("serviceMonthlyBookkeeping")
    legacy_fields.pop("serviceTaasMonthly")
    legacy = _price(_quote(legacy_fields, serviceBookkeeping=True, serviceTaas=True))

    assert legacy == current


def test_prior_year_filings_do_not_include_taas() -> None:
    result = _price(
        _quote(BOOKKEEPING, servicePriorYearFilings=True, priorYearFilings=[2022])
    )

    assert result.includes_taas is False
    assert result.bookkeeping.monthly_fee == 550
    assert result.prior_year_filings_fee == 1500


def test_full_quote_totals() -> None:
    data = _quote(
        BOOKKEEPING,
        TAAS,
        qboSubscription=True,
        priorYearsUnfiled=1,
        serviceCleanupProjects=True,
        cleanupPeriods=["2024-01"],
        servicePriorYearFilings=True,
        priorYearFilings=[2022, 2023],
        serviceCfoAdvisory=True,
        cfoAdvisoryType="bundled",
        cfoAdvisoryBundleHours=16,
        servicePayrollService=True,
        payrollEmployeeCount=4,
        serviceApArService=True,
        apVendorBillsBand="0-25",
        serviceArService=True,
        arCustomerInvoicesBand="0-25",
        serviceAgentOfService=True,
    )

    result = _price(data)

    assert result.payroll_fee == 112
    assert result.ap_fee == 150
    assert result.ar_fee == 150
    assert result.combined.monthly_fee == 275 + 225 + 112 + 150 + 150 + 60
    assert result.cfo_advisory_fee == 4640
    assert result.cfo_advisory_hubspot_product_id == "28945017959"
    assert result.agent_of_service_fee == 150
    assert result.combined.setup_fee == 825 + 2100 + 100 + 3000 + 4640 + 150


def test_empty_input_is_zero_everywhere() -> None:
    result = _price(QuotePricingInput())

    assert result.combined.monthly_fee == 0
    assert result.combined.setup_fee == 0
    assert result.cfo_advisory_hubspot_product_id is None
    for flag in (f.name for f in fields(result) if f.name.startswith("includes_")):
        assert getattr(result, flag) is False


def test_unselected_service_is_not_evaluated() -> None:
    # AP details without the AP toggle have no effect
    result = _price(_quote(BOOKKEEPING, apVendorBillsBand="251+", apVendorCount=50))

    assert result.ap_fee == 0
    assert result.includes_ap is False


def test_same_input_prices_identically() -> None:
    data = _quote(BOOKKEEPING, TAAS, qboSubscription=True)

    assert _price(data) == _price(data)


_ISOLATION_TOGGLES = {
    "payroll_fee": {"servicePayrollService": True},
    "ap_fee": {"serviceApArService": True, "apVendorBillsBand": "26-100"},
    "ar_fee": {"serviceArService": True, "arCustomerInvoicesBand": "26-100"},
    "cleanup_project_fee": {"serviceCleanupProjects": True, "cleanupMonths": 3},
    "prior_year_filings_fee": {
        "servicePriorYearFilings": True,
        "priorYearFilings": [2023],
    },
    "cfo_advisory_fee": {"serviceCfoAdvisory": True, "cfoAdvisoryType": "pay_as_you_go"},
    "agent_of_service_fee": {"serviceAgentOfService": True},
}


@pytest.mark.parametrize("fee_field", sorted(_ISOLATION_TOGGLES))
def test_toggling_one_service_changes_only_its_fee(fee_field: str) -> None:
    base = _price(_quote(BOOKKEEPING, TAAS))
    toggled = _price(_quote(BOOKKEEPING, TAAS, **_ISOLATION_TOGGLES[fee_field]))

    assert getattr(toggled, fee_field) > 0
    assert toggled.bookkeeping == base.bookkeeping
    assert toggled.taas == base.taas
    unrelated = {
        "payroll_fee",
        "ap_fee",
        "ar_fee",
        "cleanup_project_fee",
        "prior_year_filings_fee",
        "cfo_advisory_fee",
        "agent_of_service_fee",
        "qbo_fee",
        "service_tier_fee",
    } - {fee_field}
    for name in unrelated:
        assert getattr(toggled, name) == getattr(base, name)


def test_disabling_taas_removes_discount() -> None:
    config = PricingConfig.model_validate({"services": {"taas": {"enabled": False}}})

    result = _price(_quote(BOOKKEEPING, TAAS), config)

    assert result.includes_taas is False
    assert result.taas.monthly_fee == 0
    assert result.bookkeeping.monthly_fee == 550


def test_rounding_step_override() -> None:
    config = PricingConfig.model_validate({"rounding": {"monthlyStep": 10}})

    result = _price(_quote(BOOKKEEPING, TAAS), config)

    assert result.taas.monthly_fee % 10 == 0
    assert result.bookkeeping.monthly_fee % 10 == 0
    assert result.taas.monthly_fee == 210
    assert result.bookkeeping.monthly_fee == 280


def test_disabling_qbo() -> None:
    config = PricingConfig.model_validate({"services": {"qbo": {"enabled": False}}})

    result = _price(_quote(BOOKKEEPING, qboSubscription=True), config)

    assert result.qbo_fee == 0
    assert result.combined.monthly_fee == 550


def test_discount_percentage_override() -> None:
    config = PricingConfig.model_validate(
        {"discounts": {"bookkeepingWithTaasPct": "0.4"}}
    )

    result = _price(_quote(BOOKKEEPING, TAAS), config)

    # 550 x 0.4 = 220, rounded up to 225
    assert result.bookkeeping.monthly_fee == 225


def test_disabled_service_with_toggle_on_is_zero() -> None:
    config = PricingConfig.model_validate({"services": {"payroll": {"enabled": False}}})

    result = _price(_quote(BOOKKEEPING, servicePayrollService=True), config)

    assert result.includes_payroll is False
    assert result.payroll_fee == 0


def test_effective_config_is_accepted_directly() -> None:
    config = resolve_pricing_config(
        PricingConfig.model_validate({"fees": {"baseMonthlyFee": 200}})
    )

    result = pricing_service.calculate_combined_fees(
        _quote(BOOKKEEPING), config, as_of_month=AS_OF_MONTH
    )

    assert isinstance(config, EffectivePricingConfig)
    assert result.bookkeeping.monthly_fee == 660


def test_month_defaults_to_today(monkeypatch: pytest.MonkeyPatch) -> None:
    class _FixedDate:
        @staticmethod
        def today() -> date:
            return date(2025, 3, 15)

    monkeypatch.setattr(pricing_service, "date", _FixedDate)

    result = pricing_service.calculate_quote_pricing(_quote(BOOKKEEPING))

    assert result.bookkeeping.setup_fee == 413


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_outside_calendar_is_rejected(month: int) -> None:
    with pytest.raises(ValueError):
        pricing_service.calculate_quote_pricing(_quote(BOOKKEEPING), as_of_month=month)
