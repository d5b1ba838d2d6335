"""Dict-backed implementation of ProductRepository.

Insertion order of the underlying dict gives every query a stable
ordering for as long as the store is not modified.
"""

from __future__ import annotations

from ims.domain.exceptions import DuplicateKeyError, NotFoundError
from ims.domain.model.product import Product, ProductKind
from ims.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.add(p)

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        if product.id in self._store:
            raise DuplicateKeyError(
                f"A product with ID '{product.id}' already exists"
            )
        self._store[product.id] = product

    def remove(self, product_id: str) -> None:
        if product_id not in self._store:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        del self._store[product_id]

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def find_by_name_contains(self, fragment: str) -> list[Product]:
        if not fragment or not fragment.strip():
            return []
        needle = fragment.strip().lower()
        return [p for p in self._store.values() if needle in p.name.lower()]

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def list_by_kind(self, kind: ProductKind) -> list[Product]:
        return [p for p in self._store.values() if p.kind is kind]

    def count(self) -> int:
        return len(self._store)

    def exists(self, product_id: str) -> bool:
        return product_id in self._store
