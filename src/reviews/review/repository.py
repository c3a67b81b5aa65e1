"""Repository for the Review aggregate with by-product and by-author lookups."""

from reviews.domain import reviews
from reviews.review.review import Review


def _newest_first(items: list[Review]) -> list[Review]:
    return sorted(items, key=lambda review: review.created_at, reverse=True)


@reviews.repository(part_of=Review)
class ReviewRepository:
    """Exact-match lookups over persisted reviews, newest first."""

    def find_by_product(self, product_id) -> list[Review]:
        return _newest_first(self._dao.query.filter(product_id=str(product_id)).all().items)

    def find_by_user(self, user_id) -> list[Review]:
        return _newest_first(self._dao.query.filter(user_id=str(user_id)).all().items)
