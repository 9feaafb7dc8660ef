"""Common API dependencies."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import HTTPException, status

from seedqc.core.config import get_settings
from seedqc.schemas.pricing import PricingConfig
from seedqc.services.pricing_config_service import (
    PricingConfigError,
    get_admin_pricing_config,
)

logger = logging.getLogger(__name__)


def get_pricing_config() -> PricingConfig | None:
    """Provide the administrator's pricing overrides for the request."""
    try:
        return get_admin_pricing_config()
    except PricingConfigError as exc:
        logger.error("Pricing configuration unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Pricing configuration unavailable",
        ) from exc


def resolve_as_of_month(requested: int | None) -> int:
    """Pick the month used for setup fees: request, then settings, then today."""
    if requested is not None:
        return requested
    configured = get_settings().pricing_as_of_month
    if configured is not None:
        return configured
    return date.today().month
