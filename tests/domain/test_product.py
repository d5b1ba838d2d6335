"""Unit tests for the shared Product behaviour (construction and stock)."""

import pytest

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.product import ProductKind
from ims.domain.model.value_objects import Money
from tests.fakes import make_digital, make_physical


class TestProductConstruction:

    def test_valid_physical_product(self):
        p = make_physical()
        assert p.id == "F01"
        assert p.price == Money.of("1500")
        assert p.stock == 10
        assert p.kind is ProductKind.PHYSICAL

    def test_valid_digital_product(self):
        d = make_digital()
        assert d.kind is ProductKind.DIGITAL
        assert d.stock == 100

    def test_free_product_allowed(self):
        assert make_physical(price="0").price == Money.zero()

    def test_zero_stock_allowed(self):
        assert make_digital(stock=0).stock == 0

    @pytest.mark.parametrize("bad_id", ["", "   "])
    def test_empty_id_rejected(self, bad_id):
        with pytest.raises(ValidationError, match="Product ID is required"):
            make_physical(id=bad_id)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            make_digital(name="")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_physical(price="-1")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            make_physical(stock=-1)

    def test_identity_is_read_only(self):
        p = make_physical()
        with pytest.raises(AttributeError):
            p.id = "F02"
        with pytest.raises(AttributeError):
            p.stock = 99


class TestAdjustStock:

    def test_restock(self):
        p = make_physical(stock=10)
        assert p.adjust_stock(5) == 15
        assert p.stock == 15

    def test_consume(self):
        p = make_physical(stock=10)
        assert p.adjust_stock(-10) == 0

    def test_over_consumption_rejected_without_mutation(self):
        p = make_physical(stock=3)
        with pytest.raises(InsufficientStockError, match="need 4, have 3"):
            p.adjust_stock(-4)
        assert p.stock == 3

    def test_non_integer_delta_rejected(self):
        p = make_physical()
        with pytest.raises(ValidationError, match="must be an integer"):
            p.adjust_stock(1.5)

    @pytest.mark.parametrize("initial, delta", [(0, 7), (10, -10), (10, -3), (5, 0)])
    def test_round_trip_restores_stock(self, initial, delta):
        p = make_digital(stock=initial)
        p.adjust_stock(delta)
        p.adjust_stock(-delta)
        assert p.stock == initial

    def test_stock_never_negative_after_adjustments(self):
        p = make_physical(stock=2)
        for delta in (-1, -1, -1, 3, -4):
            try:
                p.adjust_stock(delta)
            except InsufficientStockError:
                pass
            assert p.stock >= 0


class TestCapabilityQueries:

    def test_physical_is_only_shippable(self):
        p = make_physical()
        assert p.as_shippable() is p
        assert p.as_downloadable() is None

    def test_digital_is_only_downloadable(self):
        d = make_digital()
        assert d.as_downloadable() is d
        assert d.as_shippable() is None


class TestDescribe:

    def test_physical_snapshot(self):
        desc = make_physical().describe()
        assert desc.id == "F01"
        assert desc.kind is ProductKind.PHYSICAL
        assert desc.details == {"weight_kg": 2.5, "dimensions": "35x25x2 cm"}
        assert desc.inventory_value == Money.of("15000")

    def test_digital_snapshot_counts_licenses(self):
        d = make_digital()
        d.activate_license("U1")
        desc = d.describe()
        assert desc.details == {"file_size_mb": 5.0, "format": "PDF", "active_licenses": 1}

    def test_snapshot_does_not_track_later_changes(self):
        p = make_physical(stock=10)
        desc = p.describe()
        p.adjust_stock(-4)
        assert desc.stock == 10
