"""Cross-domain event contracts for Catalogue domain events.

These classes define the event shape for consumption by other domains
(e.g., the Reviews domain to accept reviews only for listed products).
They are registered as external events via domain.register_external_event()
with matching __type__ strings so Protean's stream deserialization works
correctly.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String


class ProductCreated(BaseEvent):
    """A new product was added to the catalogue."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    sku = String(required=True)
    title = String(required=True)
    created_at = DateTime(required=True)


class ProductDiscontinued(BaseEvent):
    """An active product was discontinued and removed from sale."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    sku = String(required=True)
    discontinued_at = DateTime(required=True)
