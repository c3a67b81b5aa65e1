"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
Bodies are camelCase on the wire (see shared.schemas).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field
from shared.schemas import CamelModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateReviewRequest(CamelModel):
    product_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    content: str = Field(min_length=1)
    title: str | None = Field(default=None, max_length=200)


class ModifyLikeRequest(CamelModel):
    user_id: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewResource(CamelModel):
    review_id: str
    product_id: str
    user_id: str
    rating: int
    title: str | None = None
    content: str
    likes: list[str] = []
    like_count: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_review(cls, review) -> ReviewResource:
        return cls(
            review_id=str(review.id),
            product_id=str(review.product_id),
            user_id=str(review.user_id),
            rating=review.rating.score,
            title=review.title,
            content=review.content,
            likes=sorted(review.likers()),
            like_count=review.like_count,
            created_at=review.created_at,
        )


class LikesResource(CamelModel):
    review_id: str
    like_count: int
