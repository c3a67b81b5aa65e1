"""Review services backed by the Protean domain (repository and command handlers)."""

from protean.exceptions import ExpectedVersionError, ObjectNotFoundError
from protean.utils.globals import current_domain

from reviews.domain import logger
from reviews.review.creation import CreateReview
from reviews.review.likes import AddLikeToReview, RemoveLikeFromReview
from reviews.review.review import Review
from reviews.services.locks import KeyedLocks
from reviews.services.port import ReviewCommandService, ReviewQueryService

MAX_LIKE_ATTEMPTS = 5


class RepositoryReviewQueryService(ReviewQueryService):
    def get_by_id(self, review_id: str) -> Review | None:
        try:
            return current_domain.repository_for(Review).get(review_id)
        except ObjectNotFoundError:
            return None

    def get_by_product_id(self, product_id: str) -> list[Review]:
        return current_domain.repository_for(Review).find_by_product(product_id)

    def get_by_user_id(self, user_id: str) -> list[Review]:
        return current_domain.repository_for(Review).find_by_user(user_id)


class DomainReviewCommandService(ReviewCommandService):
    """Processes review commands synchronously through the active domain.

    Like and unlike hold a per-review lock around the whole command,
    including the unit-of-work commit, so concurrent likes on the same
    review in this process cannot overwrite each other. Writers in other
    processes are detected by the aggregate's version check; the command is
    then replayed against a fresh copy of the review, up to
    ``max_attempts`` times.
    """

    def __init__(self, locks: KeyedLocks | None = None, max_attempts: int = MAX_LIKE_ATTEMPTS) -> None:
        self.locks = locks if locks is not None else KeyedLocks()
        self.max_attempts = max_attempts

    def create_review(self, command: CreateReview) -> Review:
        review_id = current_domain.process(command, asynchronous=False)
        return current_domain.repository_for(Review).get(review_id)

    def add_like(self, review_id: str, user_id: str) -> int:
        return self._process_like(review_id, AddLikeToReview(review_id=review_id, user_id=user_id))

    def remove_like(self, review_id: str, user_id: str) -> int:
        return self._process_like(review_id, RemoveLikeFromReview(review_id=review_id, user_id=user_id))

    def _process_like(self, review_id: str, command) -> int:
        attempt = 1
        while True:
            try:
                with self.locks.hold(review_id):
                    return current_domain.process(command, asynchronous=False)
            except ExpectedVersionError:
                if attempt >= self.max_attempts:
                    logger.error(
                        "Like update kept conflicting, giving up",
                        review_id=str(review_id),
                        attempts=attempt,
                    )
                    raise
                logger.warning(
                    "Like update conflicted with a concurrent write, retrying",
                    review_id=str(review_id),
                    attempt=attempt,
                )
                attempt += 1
