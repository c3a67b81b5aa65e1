"""In-memory review service for development and testing.

Holds Review aggregates in a dict instead of a store, so route and contract
tests run without any persistence. Known users and products are registered
explicitly, standing in for the Identity and Catalogue projections.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

from reviews.review.creation import CreateReview
from reviews.review.review import Review
from reviews.services.locks import KeyedLocks
from reviews.services.port import ReviewCommandService, ReviewQueryService


class FakeReviewService(ReviewQueryService, ReviewCommandService):
    """Implements both review ports over a process-local dict."""

    def __init__(self) -> None:
        self.reviews: dict[str, Review] = {}
        self.known_users: set[str] = set()
        self.known_products: set[str] = set()
        self.locks = KeyedLocks()

    def register_user(self, user_id: str) -> None:
        self.known_users.add(str(user_id))

    def register_product(self, product_id: str) -> None:
        self.known_products.add(str(product_id))

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_by_id(self, review_id: str) -> Review | None:
        return self.reviews.get(str(review_id))

    def _matching(self, **criteria) -> list[Review]:
        found = [
            review
            for review in self.reviews.values()
            if all(str(getattr(review, field)) == str(value) for field, value in criteria.items())
        ]
        return sorted(found, key=lambda review: review.created_at, reverse=True)

    def get_by_product_id(self, product_id: str) -> list[Review]:
        return self._matching(product_id=product_id)

    def get_by_user_id(self, user_id: str) -> list[Review]:
        return self._matching(user_id=user_id)

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def create_review(self, command: CreateReview) -> Review:
        if str(command.user_id) not in self.known_users:
            raise ValidationError({"user_id": [f"User {command.user_id} does not exist"]})
        if str(command.product_id) not in self.known_products:
            raise ValidationError({"product_id": [f"Product {command.product_id} does not exist"]})

        review = Review.create(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            content=command.content,
            title=command.title,
        )
        self.reviews[str(review.id)] = review
        return review

    def _review_or_raise(self, review_id: str) -> Review:
        review = self.reviews.get(str(review_id))
        if review is None:
            raise ObjectNotFoundError({"_entity": f"Review {review_id} not found"})
        return review

    def add_like(self, review_id: str, user_id: str) -> int:
        with self.locks.hold(review_id):
            return self._review_or_raise(review_id).add_like(user_id)

    def remove_like(self, review_id: str, user_id: str) -> int:
        with self.locks.hold(review_id):
            return self._review_or_raise(review_id).remove_like(user_id)
