"""Digital product variant: a licensed file delivered by download link."""

from __future__ import annotations

import math
import uuid
from collections.abc import Callable, Iterable
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.capabilities import Downloadable
from ims.domain.model.product import Product, ProductKind
from ims.domain.model.value_objects import Money


def _random_token() -> str:
    return uuid.uuid4().hex


class DigitalProduct(Product, Downloadable):
    """A downloadable item gated by per-user licenses.

    Invariants:
    - ``active_licenses`` only changes via activate/revoke
    - ``format`` is stored upper-cased and, when ``allowed_formats`` is
      given, must be one of them
    """

    kind = ProductKind.DIGITAL

    def __init__(
        self,
        id: str,
        name: str,
        price: Money,
        stock: int,
        file_size_mb: float,
        format: str,
        download_base_url: str,
        allowed_formats: Iterable[str] | None = None,
        token_factory: Callable[[], str] = _random_token,
    ) -> None:
        super().__init__(id, name, price, stock)

        if isinstance(file_size_mb, bool) or not isinstance(file_size_mb, (int, float)):
            raise ValidationError(
                f"File size must be a number, got {type(file_size_mb).__name__}"
            )
        if not math.isfinite(file_size_mb) or file_size_mb <= 0:
            raise ValidationError(
                f"File size must be greater than zero, got {file_size_mb}"
            )

        if not isinstance(format, str) or not format.strip():
            raise ValidationError("Format is required")
        normalized_format = format.strip().upper()
        if allowed_formats:
            allowed = {f.strip().upper() for f in allowed_formats}
            if normalized_format not in allowed:
                raise ValidationError(
                    f"Format '{normalized_format}' is not allowed "
                    f"(allowed: {', '.join(sorted(allowed))})"
                )

        if not isinstance(download_base_url, str) or not download_base_url.strip():
            raise ValidationError("Download base URL is required")

        self._file_size_mb = float(file_size_mb)
        self._format = normalized_format
        self._download_base_url = download_base_url.strip().rstrip("/")
        self._token_factory = token_factory
        self._active_licenses: set[str] = set()

    @property
    def file_size_mb(self) -> float:
        return self._file_size_mb

    @property
    def format(self) -> str:
        return self._format

    @property
    def download_base_url(self) -> str:
        return self._download_base_url

    @property
    def active_licenses(self) -> frozenset[str]:
        return frozenset(self._active_licenses)

    # --- Downloadable ---------------------------------------------------------

    def verify_license(self, user_id: str) -> bool:
        if not isinstance(user_id, str) or not user_id.strip():
            return False
        return user_id.strip() in self._active_licenses

    def activate_license(self, user_id: str) -> None:
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("User ID is required to activate a license")
        self._active_licenses.add(user_id.strip())

    def revoke_license(self, user_id: str) -> None:
        if isinstance(user_id, str):
            self._active_licenses.discard(user_id.strip())

    def generate_download_link(self) -> str:
        return f"{self._download_base_url}/{self.id}?token={self._token_factory()}"

    def as_downloadable(self) -> Downloadable:
        return self

    # --- Display --------------------------------------------------------------

    def _details(self) -> dict[str, Any]:
        return {
            "file_size_mb": self._file_size_mb,
            "format": self._format,
            "active_licenses": len(self._active_licenses),
        }
