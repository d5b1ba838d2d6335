"""Domain service: post-sale fulfillment dispatch.

Routes a product to its single capability by matching on the
``kind`` discriminant: physical products are shipped, digital
products get a download link.  The service never guesses by calling a
capability and catching the failure.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import CapabilityError, LicenseError
from ims.domain.model.capabilities import ShipmentSummary
from ims.domain.model.product import Product, ProductKind


@dataclass(frozen=True)
class DownloadGrant:
    product_id: str
    product_name: str
    user_id: str
    format: str
    file_size_mb: float
    link: str


@dataclass(frozen=True)
class FulfillmentResult:
    """Exactly one of ``shipment`` / ``download`` is set."""

    shipment: ShipmentSummary | None = None
    download: DownloadGrant | None = None


class FulfillmentService:

    def __init__(self, default_address: str) -> None:
        self._default_address = default_address

    def dispatch(
        self,
        product: Product,
        destination: str | None = None,
        user_id: str | None = None,
    ) -> FulfillmentResult:
        """Fulfill one sale of ``product``.

        Raises LicenseError when a digital product's buyer holds no
        license, and ValidationError when a shipment has no address.
        """
        if product.kind is ProductKind.PHYSICAL:
            if not destination or not destination.strip():
                destination = self._default_address
            return FulfillmentResult(shipment=self.prepare_shipment(product, destination))
        if product.kind is ProductKind.DIGITAL:
            return FulfillmentResult(download=self.issue_download(product, user_id or ""))
        raise CapabilityError(f"No fulfillment route for product kind {product.kind!r}")

    def prepare_shipment(self, product: Product, address: str) -> ShipmentSummary:
        shippable = product.as_shippable()
        if shippable is None:
            raise CapabilityError(
                f"Product '{product.id}' is {product.kind.value.lower()} and cannot be shipped"
            )
        return shippable.prepare_shipment(address)

    def issue_download(self, product: Product, user_id: str) -> DownloadGrant:
        downloadable = product.as_downloadable()
        if downloadable is None:
            raise CapabilityError(
                f"Product '{product.id}' is {product.kind.value.lower()} and cannot be downloaded"
            )
        if not downloadable.verify_license(user_id):
            raise LicenseError(
                f"User '{user_id}' has no active license for {product.name}"
                if user_id
                else f"A licensed user is required to download {product.name}"
            )
        details = product.describe().details
        return DownloadGrant(
            product_id=product.id,
            product_name=product.name,
            user_id=user_id.strip(),
            format=details["format"],
            file_size_mb=details["file_size_mb"],
            link=downloadable.generate_download_link(),
        )
