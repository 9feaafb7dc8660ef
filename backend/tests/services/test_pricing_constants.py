"""Tests for rounding helpers and service inclusion aliases."""

from __future__ import annotations

from decimal import Decimal

import pytest

from seedqc.models.pricing import Industry, RevenueBand, TransactionBand
from seedqc.schemas.pricing import QuotePricingInput
from seedqc.services import pricing_constants, service_inclusion


@pytest.mark.parametrize(
    ("value", "expected"),
    [(Decimal("187.5"), 188), (Decimal("187.49"), 187), (0.5, 1), (2.675, 3), (10, 10)],
)
def test_round_half_up(value: Decimal | float | int, expected: int) -> None:
    assert pricing_constants.round_half_up(value) == expected


@pytest.mark.parametrize(
    ("value", "step", "expected"),
    [(180, 25, 200), (200, 25, 200), (Decimal("275.0"), 10, 280), (0, 25, 0), (1, 25, 25)],
)
def test_round_up_to_step(value: Decimal | int, step: int, expected: int) -> None:
    assert pricing_constants.round_up_to_step(value, step) == expected


def test_round_up_to_step_rejects_non_positive_step() -> None:
    with pytest.raises(ValueError):
        pricing_constants.round_up_to_step(100, 0)


def test_tables_cover_every_band_and_industry() -> None:
    assert set(pricing_constants.REVENUE_MULTIPLIERS) == set(RevenueBand)
    assert set(pricing_constants.TRANSACTION_SURCHARGES) == set(TransactionBand)
    assert set(pricing_constants.INDUSTRY_MULTIPLIERS) == set(Industry)
    assert len(pricing_constants.INDUSTRY_MULTIPLIERS) == 25
    for multiplier in pricing_constants.INDUSTRY_MULTIPLIERS.values():
        assert Decimal("1.0") <= multiplier.monthly <= Decimal("1.6")


def test_surcharges_and_multipliers_ascend() -> None:
    surcharges = [pricing_constants.TRANSACTION_SURCHARGES[band] for band in TransactionBand]
    multipliers = [pricing_constants.REVENUE_MULTIPLIERS[band] for band in RevenueBand]

    assert surcharges == sorted(surcharges)
    assert multipliers == sorted(multipliers)


@pytest.mark.parametrize("key", service_inclusion.MONTHLY_BOOKKEEPING_KEYS)
def test_any_bookkeeping_alias_includes_bookkeeping(key: str) -> None:
    data = QuotePricingInput(**{key: True})

    assert service_inclusion.includes_monthly_bookkeeping(data) is True
    assert service_inclusion.includes_taas(data) is False


@pytest.mark.parametrize("key", service_inclusion.AP_KEYS + service_inclusion.AR_KEYS)
def test_accounts_aliases(key: str) -> None:
    data = QuotePricingInput(**{key: True})

    is_ap = key.startswith("service_ap")
    assert service_inclusion.includes_ap(data) is is_ap
    assert service_inclusion.includes_ar(data) is not is_ap


def test_false_toggles_do_not_include() -> None:
    data = QuotePricingInput(serviceTaasMonthly=False, serviceTaas=False)

    assert service_inclusion.includes_taas(data) is False
