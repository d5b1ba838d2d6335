"""Reads a JSON catalog file into product aggregates.

The file is a seed, not a store: products are loaded into an
in-memory repository and nothing is ever written back.

Format: a JSON array of records::

    [
      {"kind": "physical", "id": "F01", "name": "Laptop", "price": "1500.00",
       "stock": 10, "weight_kg": 2.5, "dimensions": "35x25x2 cm"},
      {"kind": "digital", "id": "D01", "name": "E-book", "price": "30.00",
       "stock": 100, "file_size_mb": 5.0, "format": "PDF", "licenses": ["U1"]}
    ]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ims.application.product_factory import ProductFactory
from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product, ProductKind


def build_products(records: list[dict[str, Any]], factory: ProductFactory) -> list[Product]:
    """Turn raw catalog records into validated products."""
    products: list[Product] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValidationError(f"Catalog entry #{index + 1} must be a JSON object")
        try:
            products.append(_build_one(record, factory))
        except KeyError as exc:
            raise ValidationError(
                f"Catalog entry #{index + 1} is missing field {exc.args[0]!r}"
            ) from exc
    return products


def _build_one(record: dict[str, Any], factory: ProductFactory) -> Product:
    kind = ProductKind.parse(record["kind"])
    if kind is ProductKind.PHYSICAL:
        return factory.physical(
            id=record["id"],
            name=record["name"],
            price=record["price"],
            stock=record["stock"],
            weight_kg=record["weight_kg"],
            dimensions=record["dimensions"],
        )

    product = factory.digital(
        id=record["id"],
        name=record["name"],
        price=record["price"],
        stock=record["stock"],
        file_size_mb=record["file_size_mb"],
        format=record["format"],
    )
    licenses = record.get("licenses", [])
    if not isinstance(licenses, list):
        raise ValidationError(
            f"Licenses for {record['id']!r} must be a JSON array of user IDs"
        )
    for user_id in licenses:
        product.activate_license(user_id)
    return product


class JsonCatalogLoader:

    def __init__(self, file_path: Path, factory: ProductFactory) -> None:
        self._file_path = file_path
        self._factory = factory

    def load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Catalog {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise ValidationError(
                f"Catalog {self._file_path} is not valid UTF-8 text"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(f"Catalog {self._file_path} must hold a JSON array")
        return build_products(raw, self._factory)
