"""FastAPI routes for the Reviews bounded context.

Each route translates between Pydantic schemas (external contract) and the
review services (internal domain concepts). Absent reviews become an
empty-body 404.
"""

from fastapi import APIRouter, Response
from protean.exceptions import ObjectNotFoundError

from reviews.api.schemas import CreateReviewRequest, LikesResource, ModifyLikeRequest, ReviewResource
from reviews.review.creation import CreateReview
from reviews.services import get_command_service, get_query_service

review_router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@review_router.get("/{review_id}", response_model=ReviewResource)
async def get_review_by_id(review_id: str):
    """Get a review by id."""
    review = get_query_service().get_by_id(review_id)
    if review is None:
        return Response(status_code=404)
    return ReviewResource.from_review(review)


@review_router.get("/product/{product_id}", response_model=list[ReviewResource])
async def get_reviews_by_product_id(product_id: str) -> list[ReviewResource]:
    """Get every review of a product."""
    return [ReviewResource.from_review(review) for review in get_query_service().get_by_product_id(product_id)]


@review_router.get("/user/{user_id}", response_model=list[ReviewResource])
async def get_reviews_by_user_id(user_id: str) -> list[ReviewResource]:
    """Get every review written by a user."""
    return [ReviewResource.from_review(review) for review in get_query_service().get_by_user_id(user_id)]


@review_router.post("", status_code=201, response_model=ReviewResource)
@review_router.post("/", status_code=201, response_model=ReviewResource, include_in_schema=False)
async def create_review(body: CreateReviewRequest) -> ReviewResource:
    """Create a new review for a product."""
    command = CreateReview(
        product_id=body.product_id,
        user_id=body.user_id,
        rating=body.rating,
        content=body.content,
        title=body.title,
    )
    review = get_command_service().create_review(command)
    return ReviewResource.from_review(review)


@review_router.put("/{review_id}/like", response_model=LikesResource)
async def add_like_to_review(review_id: str, body: ModifyLikeRequest):
    """Add a like to a review."""
    try:
        like_count = get_command_service().add_like(review_id, body.user_id)
    except ObjectNotFoundError:
        return Response(status_code=404)
    return LikesResource(review_id=review_id, like_count=like_count)


@review_router.put("/{review_id}/unlike", response_model=LikesResource)
async def remove_like_from_review(review_id: str, body: ModifyLikeRequest):
    """Remove a like from a review."""
    try:
        like_count = get_command_service().remove_like(review_id, body.user_id)
    except ObjectNotFoundError:
        return Response(status_code=404)
    return LikesResource(review_id=review_id, like_count=like_count)
