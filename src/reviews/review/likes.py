"""AddLikeToReview / RemoveLikeFromReview — toggle one user's like on a review.

Both are idempotent and return the resulting like count. A missing review
raises ObjectNotFoundError from the repository; nothing is created.
Callers that may run concurrently on the same review must serialize the
whole command (see reviews.services.locks).
"""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import logger, reviews
from reviews.review.review import Review


@reviews.command(part_of="Review")
class AddLikeToReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)


@reviews.command(part_of="Review")
class RemoveLikeFromReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)


@reviews.command_handler(part_of=Review)
class ReviewLikesHandler:
    @handle(AddLikeToReview)
    def add_like(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        like_count = review.add_like(command.user_id)
        repo.add(review)

        logger.info(
            "Review liked",
            review_id=str(command.review_id),
            user_id=str(command.user_id),
            like_count=like_count,
        )
        return like_count

    @handle(RemoveLikeFromReview)
    def remove_like(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        like_count = review.remove_like(command.user_id)
        repo.add(review)

        logger.info(
            "Review unliked",
            review_id=str(command.review_id),
            user_id=str(command.user_id),
            like_count=like_count,
        )
        return like_count
