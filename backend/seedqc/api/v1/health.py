"""Health check endpoints."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter

from seedqc.core.config import get_settings
from seedqc.services.pricing_config_service import (
    PricingConfigError,
    get_admin_pricing_config,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _pricing_config_source() -> str:
    try:
        config = get_admin_pricing_config()
    except PricingConfigError as exc:
        logger.warning("Pricing configuration failed health check: %s", exc)
        return "unavailable"
    return "defaults" if config is None else "file"


@router.get("", summary="Service health status")
async def healthcheck() -> dict[str, str]:
    """Return application health metadata and where pricing rates come from."""
    settings = get_settings()
    pricing_config = _pricing_config_source()
    return {
        "status": "degraded" if pricing_config == "unavailable" else "ok",
        "service": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.app_env,
        "pricingConfig": pricing_config,
    }
