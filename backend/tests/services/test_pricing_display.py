"""Tests for the display adapter, line items and snapshot."""

from __future__ import annotations

from typing import Any

from seedqc.models.pricing import BillingFrequency, PricingDisplay
from seedqc.schemas.pricing import QuotePricingInput
from seedqc.services import pricing_service

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


def _quote(*sections: dict[str, Any], **fields: Any) -> QuotePricingInput:
    payload: dict[str, Any] = {}
    for section in sections:
        payload.update(section)
    payload.update(fields)
    return QuotePricingInput.model_validate(payload)


def test_display_reports_package_discount() -> None:
    display = pricing_service.calculate_pricing_display(
        _quote(BOOKKEEPING, TAAS, qboSubscription=True), as_of_month=6
    )

    assert isinstance(display, PricingDisplay)
    assert display.total_monthly_fee == 560
    assert display.total_setup_fee == 825
    assert display.package_discount_monthly == 275
    assert display.bookkeeping.monthly_fee == 275


def test_display_without_discount() -> None:
    display = pricing_service.calculate_pricing_display(
        _quote(BOOKKEEPING), as_of_month=6
    )

    assert display.package_discount_monthly is None
    assert display.total_monthly_fee == 550


def test_display_copies_orchestrator_fields() -> None:
    result = pricing_service.calculate_quote_pricing(
        _quote(BOOKKEEPING, TAAS, servicePayrollService=True), as_of_month=6
    )

    display = pricing_service.to_ui_pricing(result)

    assert display.payroll_fee == result.payroll_fee
    assert display.combined == result.combined
    assert display.includes_taas is True


def test_line_items_add_up_to_combined_totals() -> None:
    result = pricing_service.calculate_quote_pricing(
        _quote(
            BOOKKEEPING,
            TAAS,
            qboSubscription=True,
            serviceCfoAdvisory=True,
            cfoAdvisoryType="pay_as_you_go",
        ),
        as_of_month=6,
    )

    items = pricing_service.build_line_items(result)

    monthly = [item for item in items if item.billing is BillingFrequency.MONTHLY]
    one_time = [item for item in items if item.billing is BillingFrequency.ONE_TIME]
    assert [item.amount for item in monthly] == [550, -275, 225, 60]
    assert sum(item.amount for item in monthly) == result.combined.monthly_fee
    assert sum(item.amount for item in one_time) == result.combined.setup_fee
    cfo = next(item for item in items if item.service == "cfo_advisory")
    assert cfo.product_id == "28945017957"
    assert monthly[0].product_id == "25687054003"


def test_line_items_skip_zero_components() -> None:
    result = pricing_service.calculate_quote_pricing(
        _quote(serviceCleanupProjects=True, cleanupMonths=2), as_of_month=6
    )

    items = pricing_service.build_line_items(result)

    assert len(items) == 1
    assert items[0].service == "cleanup"
    assert items[0].amount == 200
    assert items[0].billing is BillingFrequency.ONE_TIME


def test_snapshot_uses_money_strings() -> None:
    result = pricing_service.calculate_quote_pricing(
        _quote(
            BOOKKEEPING,
            TAAS,
            qboSubscription=True,
            serviceCfoAdvisory=True,
            cfoAdvisoryType="bundled",
            cfoAdvisoryBundleHours=8,
        ),
        as_of_month=6,
    )

    snapshot = result.to_snapshot()

    assert snapshot["monthly_fee"] == "560.00"
    assert snapshot["bookkeeping_monthly_fee"] == "275.00"
    assert snapshot["taas_monthly_fee"] == "225.00"
    assert snapshot["qbo_fee"] == "60.00"
    assert snapshot["payroll_fee"] == "0.00"
    assert snapshot["cfo_advisory_fee"] == "2360.00"
    assert snapshot["cfo_advisory_hubspot_product_id"] == "28928008785"
    assert snapshot["setup_fee"] == "3185.00"
