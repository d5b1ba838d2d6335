"""Integration tests for the capability-specific use cases.

Shipping a digital product or downloading a physical one is a caller
error and surfaces as CapabilityError.
"""

import pytest

from ims.application.issue_download import IssueDownloadHandler
from ims.application.manage_license import ManageLicenseHandler
from ims.application.prepare_shipment import PrepareShipmentHandler
from ims.domain.exceptions import CapabilityError, LicenseError, NotFoundError
from ims.domain.model.value_objects import Money
from ims.domain.service.fulfillment_service import FulfillmentService
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import make_digital, make_physical


@pytest.fixture
def repo() -> InMemoryProductRepository:
    return InMemoryProductRepository([
        make_physical(id="F01", weight_kg=12),
        make_digital(id="D01"),
    ])


@pytest.fixture
def fulfillment() -> FulfillmentService:
    return FulfillmentService(default_address="On file")


class TestPrepareShipment:

    def test_quote_for_physical_product(self, repo, fulfillment):
        summary = PrepareShipmentHandler(repo, fulfillment).handle("F01", "Cali")
        # heavy item: 100 km x 0.50 x 1.5
        assert summary.cost == Money.of("75.00")

    def test_digital_product_cannot_be_shipped(self, repo, fulfillment):
        with pytest.raises(CapabilityError):
            PrepareShipmentHandler(repo, fulfillment).handle("D01", "Cali")

    def test_unknown_product(self, repo, fulfillment):
        with pytest.raises(NotFoundError):
            PrepareShipmentHandler(repo, fulfillment).handle("X", "Cali")


class TestLicensesAndDownloads:

    def test_activate_then_download(self, repo, fulfillment):
        ManageLicenseHandler(repo).activate("D01", "U1")
        grant = IssueDownloadHandler(repo, fulfillment).handle("D01", "U1")
        assert grant.link.endswith("/D01?token=tok1")
        assert grant.product_name == "Python E-book"

    def test_download_without_license_propagates(self, repo, fulfillment):
        with pytest.raises(LicenseError):
            IssueDownloadHandler(repo, fulfillment).handle("D01", "U1")

    def test_revoked_license_blocks_download(self, repo, fulfillment):
        licenses = ManageLicenseHandler(repo)
        licenses.activate("D01", "U1")
        licenses.revoke("D01", "U1")
        with pytest.raises(LicenseError):
            IssueDownloadHandler(repo, fulfillment).handle("D01", "U1")

    def test_physical_product_has_no_licenses(self, repo):
        with pytest.raises(CapabilityError, match="has no licenses"):
            ManageLicenseHandler(repo).activate("F01", "U1")

    def test_physical_product_cannot_be_downloaded(self, repo, fulfillment):
        with pytest.raises(CapabilityError):
            IssueDownloadHandler(repo, fulfillment).handle("F01", "U1")

    def test_download_does_not_consume_stock(self, repo, fulfillment):
        ManageLicenseHandler(repo).activate("D01", "U1")
        IssueDownloadHandler(repo, fulfillment).handle("D01", "U1")
        assert repo.get_by_id("D01").stock == 100
