"""Unit tests for the FulfillmentService domain service."""

import pytest

from ims.domain.exceptions import CapabilityError, LicenseError, ValidationError
from ims.domain.model.value_objects import Money
from ims.domain.service.fulfillment_service import FulfillmentService
from tests.fakes import BASE_URL, make_digital, make_physical

DEFAULT_ADDRESS = "Warehouse pickup"


@pytest.fixture
def service() -> FulfillmentService:
    return FulfillmentService(default_address=DEFAULT_ADDRESS)


class TestDispatch:

    def test_physical_is_shipped_to_destination(self, service):
        result = service.dispatch(make_physical(), destination="Calle 123")
        assert result.download is None
        assert result.shipment.address == "Calle 123"
        assert result.shipment.cost == Money.of("50.00")

    def test_physical_falls_back_to_default_address(self, service):
        result = service.dispatch(make_physical())
        assert result.shipment.address == DEFAULT_ADDRESS

    @pytest.mark.parametrize("destination", ["", "   "])
    def test_blank_destination_falls_back_to_default_address(self, service, destination):
        result = service.dispatch(make_physical(), destination=destination)
        assert result.shipment.address == DEFAULT_ADDRESS

    def test_digital_with_license_gets_link(self, service):
        product = make_digital()
        product.activate_license("U1")
        result = service.dispatch(product, user_id="U1")
        assert result.shipment is None
        assert result.download.link == f"{BASE_URL}/D01?token=tok1"
        assert result.download.format == "PDF"
        assert result.download.user_id == "U1"

    def test_digital_without_license_raises(self, service):
        with pytest.raises(LicenseError, match="no active license"):
            service.dispatch(make_digital(), user_id="U1")

    def test_digital_without_user_raises(self, service):
        with pytest.raises(LicenseError, match="licensed user is required"):
            service.dispatch(make_digital())

    def test_dispatch_never_touches_stock(self, service):
        product = make_physical(stock=4)
        service.dispatch(product, destination="x")
        assert product.stock == 4


class TestWrongCapability:

    def test_shipping_a_digital_product(self, service):
        with pytest.raises(CapabilityError, match="cannot be shipped"):
            service.prepare_shipment(make_digital(), "Calle 123")

    def test_downloading_a_physical_product(self, service):
        with pytest.raises(CapabilityError, match="cannot be downloaded"):
            service.issue_download(make_physical(), "U1")

    def test_capability_error_is_not_a_business_rule_error(self):
        assert not issubclass(CapabilityError, (ValidationError, LicenseError))

    def test_blank_shipping_address_is_a_validation_error(self, service):
        with pytest.raises(ValidationError):
            service.prepare_shipment(make_physical(), " ")
