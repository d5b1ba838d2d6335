"""Integration tests for restocking and inventory statistics."""

import pytest

from ims.application.restock import RestockHandler
from ims.application.show_statistics import ShowStatisticsHandler
from ims.domain.exceptions import NotFoundError, ValidationError
from ims.domain.model.product import ProductKind
from ims.domain.model.value_objects import Money
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import make_digital, make_physical


class TestRestock:

    def test_adds_to_stock(self):
        repo = InMemoryProductRepository([make_physical(stock=10)])
        assert RestockHandler(repo).handle("F01", 25) == 35
        assert repo.get_by_id("F01").stock == 35

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_non_positive_quantity_rejected(self, quantity):
        repo = InMemoryProductRepository([make_physical(stock=10)])
        with pytest.raises(ValidationError, match="must be positive"):
            RestockHandler(repo).handle("F01", quantity)
        assert repo.get_by_id("F01").stock == 10

    def test_unknown_product(self):
        with pytest.raises(NotFoundError):
            RestockHandler(InMemoryProductRepository()).handle("F01", 1)


class TestStatistics:

    def test_empty_inventory(self):
        stats = ShowStatisticsHandler(InMemoryProductRepository()).handle()
        assert stats.total_products == 0
        assert stats.physical_count == 0
        assert stats.digital_count == 0
        assert stats.total_value == Money.zero()

    def test_counts_and_value(self):
        repo = InMemoryProductRepository([
            make_physical(id="F01", price="1500.0", stock=10),
            make_physical(id="F02", price="99.99", stock=3),
            make_digital(id="D01", price="30.0", stock=100),
        ])
        stats = ShowStatisticsHandler(repo).handle()
        assert stats.total_products == 3
        assert stats.by_kind == {ProductKind.PHYSICAL: 2, ProductKind.DIGITAL: 1}
        # 15000 + 299.97 + 3000
        assert stats.total_value == Money.of("18299.97")

    def test_statistics_do_not_mutate(self):
        repo = InMemoryProductRepository([make_physical(stock=10)])
        ShowStatisticsHandler(repo).handle()
        assert repo.get_by_id("F01").stock == 10
