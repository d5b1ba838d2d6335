"""Tests for InventorySettings and the composition root."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as SettingsError

from ims.domain.model.value_objects import Money
from ims.infrastructure.bootstrap import build_context
from ims.infrastructure.settings import InventorySettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("IMS_COST_PER_KM", "IMS_HEAVY_WEIGHT_KG", "IMS_DOWNLOAD_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


class TestInventorySettings:

    def test_defaults(self):
        settings = InventorySettings()
        assert settings.cost_per_km == Decimal("0.50")
        assert settings.medium_weight_kg == 5.0
        assert settings.heavy_weight_kg == 10.0
        assert "PDF" in settings.allowed_digital_formats

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("IMS_COST_PER_KM", "0.75")
        monkeypatch.setenv("IMS_DOWNLOAD_BASE_URL", "https://cdn.example.com")
        settings = InventorySettings()
        assert settings.cost_per_km == Decimal("0.75")
        assert settings.download_base_url == "https://cdn.example.com"

    def test_negative_rate_rejected(self):
        with pytest.raises(SettingsError):
            InventorySettings(cost_per_km=Decimal("-1"))

    def test_inverted_weight_thresholds_rejected(self, monkeypatch):
        monkeypatch.setenv("IMS_HEAVY_WEIGHT_KG", "4")
        with pytest.raises(SettingsError, match="heavy_weight_kg"):
            InventorySettings()


class TestBuildContext:

    def test_empty_inventory_without_catalog(self):
        ctx = build_context(settings=InventorySettings())
        assert ctx.product_repo.count() == 0

    def test_factory_receives_configured_values(self):
        ctx = build_context(settings=InventorySettings(cost_per_km=Decimal("2")))
        product = ctx.factory.physical(
            id="F01", name="Crate", price="10", stock=1, weight_kg=1.0, dimensions="1x1x1",
        )
        assert product.cost_per_km == Money.of("2")
