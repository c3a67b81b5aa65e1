"""CreateReview — write a new product review.

The author and the product live in other domains. Their existence is checked
against the ReviewAuthor and ReviewableProduct projections, which are fed by
Identity and Catalogue events.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import logger, reviews
from reviews.projections.review_authors import ReviewAuthor
from reviews.projections.reviewable_products import ProductStatus, ReviewableProduct
from reviews.review.review import Review


@reviews.command(part_of="Review")
class CreateReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    content = Text(required=True)
    title = String(max_length=200)


def ensure_author_exists(user_id):
    try:
        current_domain.repository_for(ReviewAuthor).get(str(user_id))
    except ObjectNotFoundError:
        raise ValidationError({"user_id": [f"User {user_id} does not exist"]}) from None


def ensure_product_reviewable(product_id):
    try:
        product = current_domain.repository_for(ReviewableProduct).get(str(product_id))
    except ObjectNotFoundError:
        raise ValidationError({"product_id": [f"Product {product_id} does not exist"]}) from None

    if product.status != ProductStatus.ACTIVE.value:
        raise ValidationError({"product_id": [f"Product {product_id} is discontinued"]})


@reviews.command_handler(part_of=Review)
class CreateReviewHandler:
    @handle(CreateReview)
    def create_review(self, command):
        ensure_author_exists(command.user_id)
        ensure_product_reviewable(command.product_id)

        review = Review.create(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            content=command.content,
            title=command.title,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "Review created",
            review_id=str(review.id),
            product_id=str(command.product_id),
            user_id=str(command.user_id),
        )
        return str(review.id)
