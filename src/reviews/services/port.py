"""Review service ports (abstract interfaces).

Defines the read and write contracts the API layer depends on. This enables
swapping between the Protean-backed services (real store) and the in-memory
FakeReviewService (dev/test) without changing any route code.
"""

from abc import ABC, abstractmethod

from reviews.review.creation import CreateReview
from reviews.review.review import Review


class ReviewQueryService(ABC):
    """Read-only access to reviews. No method has side effects."""

    @abstractmethod
    def get_by_id(self, review_id: str) -> Review | None:
        """Return the review, or None when it does not exist."""
        ...

    @abstractmethod
    def get_by_product_id(self, product_id: str) -> list[Review]:
        """Return every review of the product, newest first. Empty if none."""
        ...

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> list[Review]:
        """Return every review written by the user, newest first. Empty if none."""
        ...


class ReviewCommandService(ABC):
    """State-changing review operations."""

    @abstractmethod
    def create_review(self, command: CreateReview) -> Review:
        """Persist a new review with no likes.

        Raises ValidationError when the author or product is unknown.
        """
        ...

    @abstractmethod
    def add_like(self, review_id: str, user_id: str) -> int:
        """Add ``user_id`` to the review's likers and return the like count.

        Idempotent. Raises ObjectNotFoundError when the review does not exist.
        """
        ...

    @abstractmethod
    def remove_like(self, review_id: str, user_id: str) -> int:
        """Remove ``user_id`` from the review's likers and return the like count.

        Idempotent. Raises ObjectNotFoundError when the review does not exist.
        """
        ...
