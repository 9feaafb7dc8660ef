"""Health endpoint smoke tests."""

from pathlib import Path

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_healthcheck_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "Seed Quote Calculator API"
    assert payload["pricingConfig"] == "defaults"
    assert response.headers["X-Request-ID"]


async def test_healthcheck_reports_config_file(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    config_path = tmp_path / "pricing.yaml"
    config_path.write_text("fees:\n  qboMonthlyFee: 70\n", encoding="utf-8")
    monkeypatch.setenv("PRICING_CONFIG_PATH", str(config_path))

    response = await client.get("/api/v1/health")

    assert response.json()["pricingConfig"] == "file"


async def test_healthcheck_degrades_on_broken_config(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PRICING_CONFIG_PATH", str(tmp_path / "missing.yaml"))

    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "degraded"
    assert payload["pricingConfig"] == "unavailable"
