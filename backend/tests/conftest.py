"""Test fixtures for the quote calculator backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.pop("PRICING_CONFIG_PATH", None)
os.environ.pop("PRICING_AS_OF_MONTH", None)

from seedqc.core.config import get_settings
from seedqc.main import app
from seedqc.services.pricing_config_service import (
    EffectivePricingConfig,
    clear_pricing_config_cache,
)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from environment-driven settings."""
    monkeypatch.delenv("PRICING_CONFIG_PATH", raising=False)
    monkeypatch.delenv("PRICING_AS_OF_MONTH", raising=False)
    get_settings.cache_clear()
    clear_pricing_config_cache()
    yield
    get_settings.cache_clear()
    clear_pricing_config_cache()


@pytest_asyncio.fixture()
async def client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest.fixture()
def default_config() -> EffectivePricingConfig:
    return EffectivePricingConfig()
