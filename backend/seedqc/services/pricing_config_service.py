"""Resolve pricing overrides against the built-in defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from seedqc.core.config import get_settings
from seedqc.schemas.pricing import PricingConfig, ServiceToggle
from seedqc.services import pricing_constants as constants

logger = logging.getLogger(__name__)


class PricingConfigError(ValueError):
    """Raised when the administrative pricing configuration cannot be used."""


@dataclass(slots=True, frozen=True)
class EffectivePricingConfig:
    """Fully populated configuration consumed by the fee calculators."""

    bookkeeping_enabled: bool = True
    cleanup_enabled: bool = True
    taas_enabled: bool = True
    prior_year_filings_enabled: bool = True
    cfo_advisory_enabled: bool = True
    payroll_enabled: bool = True
    ap_enabled: bool = True
    ar_enabled: bool = True
    agent_of_service_enabled: bool = True
    qbo_enabled: bool = True
    service_tier_enabled: bool = True
    base_monthly_fee: int = constants.DEFAULT_BASE_MONTHLY_FEE
    qbo_monthly_fee: int = constants.DEFAULT_QBO_MONTHLY_FEE
    prior_year_filing_per_year: int = constants.DEFAULT_PRIOR_YEAR_FILING_FEE_PER_YEAR
    cleanup_per_month: int = constants.DEFAULT_CLEANUP_FEE_PER_MONTH
    service_tier_fees: dict[str, int] = field(
        default_factory=lambda: dict(constants.DEFAULT_SERVICE_TIER_FEES)
    )
    bookkeeping_with_taas_pct: Decimal = (
        constants.DEFAULT_BOOKKEEPING_WITH_TAAS_DISCOUNT_PCT
    )
    monthly_step: int = constants.DEFAULT_MONTHLY_ROUNDING_STEP


def _enabled(toggle: ServiceToggle | None) -> bool:
    return True if toggle is None else toggle.enabled


def resolve_pricing_config(config: PricingConfig | None = None) -> EffectivePricingConfig:
    """Overlay the provided overrides onto the default configuration."""

    if config is None:
        return EffectivePricingConfig()

    services = config.services
    fees = config.fees
    defaults = EffectivePricingConfig()

    tier_fees = dict(defaults.service_tier_fees)
    if fees is not None and fees.service_tier_fees:
        tier_fees.update(fees.service_tier_fees)

    def _fee(name: str) -> int:
        value = getattr(fees, name, None) if fees is not None else None
        return getattr(defaults, name) if value is None else value

    discount_pct = (
        config.discounts.bookkeeping_with_taas_pct
        if config.discounts is not None
        else None
    )
    monthly_step = (
        config.rounding.monthly_step if config.rounding is not None else None
    )

    return EffectivePricingConfig(
        bookkeeping_enabled=_enabled(services.bookkeeping) if services else True,
        cleanup_enabled=_enabled(services.cleanup) if services else True,
        taas_enabled=_enabled(services.taas) if services else True,
        prior_year_filings_enabled=(
            _enabled(services.prior_year_filings) if services else True
        ),
        cfo_advisory_enabled=_enabled(services.cfo_advisory) if services else True,
        payroll_enabled=_enabled(services.payroll) if services else True,
        ap_enabled=_enabled(services.ap) if services else True,
        ar_enabled=_enabled(services.ar) if services else True,
        agent_of_service_enabled=(
            _enabled(services.agent_of_service) if services else True
        ),
        qbo_enabled=_enabled(services.qbo) if services else True,
        service_tier_enabled=_enabled(services.service_tier) if services else True,
        base_monthly_fee=_fee("base_monthly_fee"),
        qbo_monthly_fee=_fee("qbo_monthly_fee"),
        prior_year_filing_per_year=_fee("prior_year_filing_per_year"),
        cleanup_per_month=_fee("cleanup_per_month"),
        service_tier_fees=tier_fees,
        bookkeeping_with_taas_pct=(
            defaults.bookkeeping_with_taas_pct if discount_pct is None else discount_pct
        ),
        monthly_step=defaults.monthly_step if monthly_step is None else monthly_step,
    )


def load_pricing_config(path: str | Path | None) -> PricingConfig | None:
    """Read administrative overrides from a YAML or JSON document."""

    if not path:
        return None
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise PricingConfigError(
            f"Unable to read pricing configuration {config_path}: {exc}"
        ) from exc

    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise PricingConfigError(
            f"Pricing configuration {config_path} must be a mapping"
        )
    try:
        config = PricingConfig.model_validate(raw)
    except ValidationError as exc:
        raise PricingConfigError(
            f"Invalid pricing configuration {config_path}: {exc}"
        ) from exc
    logger.info("Loaded pricing configuration from %s", config_path)
    return config


@lru_cache
def _cached_pricing_config(path: str | None) -> PricingConfig | None:
    return load_pricing_config(path)


def get_admin_pricing_config() -> PricingConfig | None:
    """Return the administrator's pricing overrides, if any are configured."""

    return _cached_pricing_config(get_settings().pricing_config_path)


def clear_pricing_config_cache() -> None:
    _cached_pricing_config.cache_clear()


__all__ = [
    "EffectivePricingConfig",
    "PricingConfigError",
    "clear_pricing_config_cache",
    "get_admin_pricing_config",
    "load_pricing_config",
    "resolve_pricing_config",
]
