"""Runtime configuration for the inventory system.

Values are read from ``IMS_*`` environment variables (or a local
``.env``) and validated here, at the edge, so the domain only ever
receives well-formed rates, URLs and thresholds.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DIGITAL_FORMATS = ["PDF", "MP4", "MP3", "ZIP", "EXE", "APK"]


class InventorySettings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="IMS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    download_base_url: str = Field(
        default="https://mitienda.com/api/v1",
        min_length=1,
        description="Base URL that download links are built on.",
    )
    cost_per_km: Decimal = Field(
        default=Decimal("0.50"),
        ge=0,
        description="Shipping cost per kilometre before weight surcharges.",
    )
    medium_weight_kg: float = Field(
        default=5.0,
        gt=0,
        description="Items heavier than this pay the medium weight factor.",
    )
    heavy_weight_kg: float = Field(
        default=10.0,
        gt=0,
        description="Items heavier than this pay the heavy weight factor.",
    )
    medium_weight_factor: Decimal = Field(default=Decimal("1.2"), ge=1)
    heavy_weight_factor: Decimal = Field(default=Decimal("1.5"), ge=1)
    allowed_digital_formats: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DIGITAL_FORMATS),
        description="Accepted digital formats; an empty list accepts any format.",
    )
    default_shipping_address: str = Field(
        default="Customer address on file",
        min_length=1,
        description="Used when a sale of a physical item names no destination.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @model_validator(mode="after")
    def _check_weight_tiers(self) -> InventorySettings:
        if self.heavy_weight_kg <= self.medium_weight_kg:
            raise ValueError("heavy_weight_kg must be greater than medium_weight_kg")
        if self.heavy_weight_factor < self.medium_weight_factor:
            raise ValueError("heavy_weight_factor must be >= medium_weight_factor")
        return self
