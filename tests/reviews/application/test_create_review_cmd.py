"""Application tests for the CreateReview command handler."""

from datetime import UTC, datetime

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from reviews.review.creation import CreateReview
from reviews.review.reference_events import CatalogueEventsHandler
from reviews.review.review import Review
from shared.events.catalogue import ProductDiscontinued


def _create(**overrides):
    defaults = {
        "product_id": "prod-create-1",
        "user_id": "user-create-1",
        "rating": 5,
        "content": "Great headphones with deep bass.",
    }
    defaults.update(overrides)
    return current_domain.process(CreateReview(**defaults), asynchronous=False)


class TestCreateReviewCommand:
    def test_review_is_persisted_without_likes(self, known_references):
        known_references("user-create-1", "prod-create-1")
        review_id = _create(title="Love them")

        review = current_domain.repository_for(Review).get(review_id)
        assert str(review.product_id) == "prod-create-1"
        assert str(review.user_id) == "user-create-1"
        assert review.rating.score == 5
        assert review.title == "Love them"
        assert review.like_count == 0
        assert len(review.likes) == 0

    def test_unknown_user_is_rejected(self, known_references):
        known_references("user-create-2", "prod-create-2")
        with pytest.raises(ValidationError) as exc:
            _create(user_id="ghost-user", product_id="prod-create-2")
        assert "ghost-user does not exist" in str(exc.value)

    def test_unknown_product_is_rejected(self, known_references):
        known_references("user-create-3", "prod-create-3")
        with pytest.raises(ValidationError) as exc:
            _create(user_id="user-create-3", product_id="ghost-product")
        assert "ghost-product does not exist" in str(exc.value)

    def test_discontinued_product_is_rejected(self, known_references):
        known_references("user-create-4", "prod-create-4")
        CatalogueEventsHandler().on_product_discontinued(
            ProductDiscontinued(
                product_id="prod-create-4",
                sku="SKU-prod-create-4",
                discontinued_at=datetime.now(UTC),
            )
        )
        with pytest.raises(ValidationError) as exc:
            _create(user_id="user-create-4", product_id="prod-create-4")
        assert "discontinued" in str(exc.value)

    def test_missing_required_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            CreateReview(product_id="prod-create-5", rating=4)

    def test_invalid_rating_is_rejected(self, known_references):
        known_references("user-create-6", "prod-create-6")
        with pytest.raises(ValidationError):
            _create(user_id="user-create-6", product_id="prod-create-6", rating=9)
