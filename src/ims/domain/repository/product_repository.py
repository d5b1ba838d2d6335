"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.

Contract: at most one product per ID.  Query methods return fresh
lists, so callers can never reshape the store behind its back; the
only write paths are ``add``, ``remove`` and the product's own
``adjust_stock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product, ProductKind


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Store a new product. Raises DuplicateKeyError if the ID is taken."""

    @abstractmethod
    def remove(self, product_id: str) -> None:
        """Delete a product. Raises NotFoundError if the ID is unknown."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_name_contains(self, fragment: str) -> list[Product]:
        """Return products whose name contains ``fragment`` (case-insensitive)."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the store."""

    @abstractmethod
    def list_by_kind(self, kind: ProductKind) -> list[Product]:
        """Return every product of the given variant."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""

    def exists(self, product_id: str) -> bool:
        return self.get_by_id(product_id) is not None
