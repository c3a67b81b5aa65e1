from datetime import UTC, datetime

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def reviews_bed():
    from reviews.domain import reviews

    bed = DomainFixture(reviews)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(reviews_bed):
    with reviews_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _default_services():
    """Every test starts with the Protean-backed review services."""
    from reviews.services import reset_review_services

    reset_review_services()
    yield
    reset_review_services()


@pytest.fixture()
def known_references():
    """Return a callable that registers a user and a product with the Reviews domain."""
    from reviews.review.reference_events import CatalogueEventsHandler, IdentityEventsHandler
    from shared.events.catalogue import ProductCreated
    from shared.events.identity import UserRegistered

    def _register(user_id, product_id):
        now = datetime.now(UTC)
        IdentityEventsHandler().on_user_registered(
            UserRegistered(
                user_id=user_id,
                email=f"{user_id}@example.com",
                first_name="Test",
                last_name="User",
                registered_at=now,
            )
        )
        CatalogueEventsHandler().on_product_created(
            ProductCreated(
                product_id=product_id,
                sku=f"SKU-{product_id}",
                title="Test product",
                created_at=now,
            )
        )

    return _register
