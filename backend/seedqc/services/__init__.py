"""Service layer exports."""
from seedqc.services import (
    ancillary_fee_service,
    bookkeeping_fee_service,
    pricing_config_service,
    pricing_constants,
    pricing_service,
    service_inclusion,
    taas_fee_service,
)

__all__ = [
    "ancillary_fee_service",
    "bookkeeping_fee_service",
    "pricing_config_service",
    "pricing_constants",
    "pricing_service",
    "service_inclusion",
    "taas_fee_service",
]
