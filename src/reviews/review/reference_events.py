"""Inbound cross-domain event handlers — Reviews reacts to Identity and Catalogue.

Keeps the ReviewAuthor and ReviewableProduct projections current so the
CreateReview handler can validate references without calling other domains.

Cross-domain events are imported from shared.events and registered as
external events via reviews.register_external_event().
When the domains share a process, subscribe_to_relay() wires the same
handlers to shared.event_relay instead of a broker.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared import event_relay
from shared.events.catalogue import ProductCreated, ProductDiscontinued
from shared.events.identity import UserRegistered

from reviews.domain import reviews
from reviews.projections.review_authors import ReviewAuthor
from reviews.projections.reviewable_products import ProductStatus, ReviewableProduct
from reviews.review.review import Review

logger = structlog.get_logger(__name__)

USER_REGISTERED = "Identity.UserRegistered.v1"
PRODUCT_CREATED = "Catalogue.ProductCreated.v1"
PRODUCT_DISCONTINUED = "Catalogue.ProductDiscontinued.v1"

# Register external events so Protean can deserialize them
reviews.register_external_event(UserRegistered, USER_REGISTERED)
reviews.register_external_event(ProductCreated, PRODUCT_CREATED)
reviews.register_external_event(ProductDiscontinued, PRODUCT_DISCONTINUED)


@reviews.event_handler(part_of=Review, stream_category="identity::user")
class IdentityEventsHandler:
    """Records registered users as potential review authors."""

    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        repo = current_domain.repository_for(ReviewAuthor)
        try:
            repo.get(str(event.user_id))
            # Already known
        except ObjectNotFoundError:
            repo.add(
                ReviewAuthor(
                    user_id=str(event.user_id),
                    first_name=event.first_name,
                    last_name=event.last_name,
                    registered_at=event.registered_at,
                )
            )
            logger.info("Review author registered", user_id=str(event.user_id))


@reviews.event_handler(part_of=Review, stream_category="catalogue::product")
class CatalogueEventsHandler:
    """Tracks which catalogue products can be reviewed."""

    @handle(ProductCreated)
    def on_product_created(self, event: ProductCreated) -> None:
        repo = current_domain.repository_for(ReviewableProduct)
        try:
            repo.get(str(event.product_id))
            # Already known
        except ObjectNotFoundError:
            repo.add(
                ReviewableProduct(
                    product_id=str(event.product_id),
                    sku=event.sku,
                    title=event.title,
                    status=ProductStatus.ACTIVE.value,
                    updated_at=event.created_at,
                )
            )
            logger.info("Reviewable product listed", product_id=str(event.product_id))

    @handle(ProductDiscontinued)
    def on_product_discontinued(self, event: ProductDiscontinued) -> None:
        repo = current_domain.repository_for(ReviewableProduct)
        try:
            product = repo.get(str(event.product_id))
        except ObjectNotFoundError:
            logger.info(
                "Discontinued product was never listed for reviews",
                product_id=str(event.product_id),
            )
            product = ReviewableProduct(product_id=str(event.product_id), sku=event.sku)

        product.status = ProductStatus.DISCONTINUED.value
        product.updated_at = event.discontinued_at
        repo.add(product)


# ---------------------------------------------------------------------------
# In-process delivery
# ---------------------------------------------------------------------------
def _deliver_user_registered(payload: dict) -> None:
    with reviews.domain_context():
        IdentityEventsHandler().on_user_registered(UserRegistered(**payload))


def _deliver_product_created(payload: dict) -> None:
    with reviews.domain_context():
        CatalogueEventsHandler().on_product_created(ProductCreated(**payload))


def _deliver_product_discontinued(payload: dict) -> None:
    with reviews.domain_context():
        CatalogueEventsHandler().on_product_discontinued(ProductDiscontinued(**payload))


def subscribe_to_relay() -> None:
    """Feed relayed Identity and Catalogue events into the handlers above."""
    event_relay.subscribe(USER_REGISTERED, _deliver_user_registered)
    event_relay.subscribe(PRODUCT_CREATED, _deliver_product_created)
    event_relay.subscribe(PRODUCT_DISCONTINUED, _deliver_product_discontinued)
