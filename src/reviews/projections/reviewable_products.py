"""ReviewableProducts — catalogue products that can receive reviews.

Populated by the ProductCreated/ProductDiscontinued cross-domain event
handler. Discontinued products stay listed but no longer accept new reviews.
"""

from enum import Enum

from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews


class ProductStatus(Enum):
    ACTIVE = "Active"
    DISCONTINUED = "Discontinued"


@reviews.projection
class ReviewableProduct:
    product_id = Identifier(identifier=True, required=True)
    sku = String()
    title = String()
    status = String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    updated_at = DateTime()
