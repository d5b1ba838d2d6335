"""Application service: List Products use case (query).

Filters combine: ``kind`` narrows by variant, ``name_contains`` by a
case-insensitive name fragment.
"""

from __future__ import annotations

from ims.domain.model.product import ProductDescription, ProductKind
from ims.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        kind: ProductKind | None = None,
        name_contains: str | None = None,
    ) -> list[ProductDescription]:
        if name_contains:
            products = self._product_repo.find_by_name_contains(name_contains)
            if kind is not None:
                products = [p for p in products if p.kind is kind]
        elif kind is not None:
            products = self._product_repo.list_by_kind(kind)
        else:
            products = self._product_repo.list_all()
        return [p.describe() for p in products]
