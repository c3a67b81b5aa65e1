"""Review aggregate — the core of the Reviews domain.

A review belongs to one product and one author. Its likes are a set of user
ids, stored as ReviewLike entities: liking twice or unliking without a prior
like changes nothing, so client retries never inflate the count.
``like_count`` is denormalized from the set and always equals its size.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text, ValueObject

from reviews.domain import reviews
from reviews.review.events import ReviewCreated, ReviewLiked, ReviewUnliked


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@reviews.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@reviews.entity(part_of="Review")
class ReviewLike:
    """One user's like on a review."""

    user_id = Identifier(required=True)
    liked_at = DateTime(required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A user's review of a product, together with the users who liked it."""

    product_id = Identifier(required=True)
    user_id = Identifier(required=True)

    rating = ValueObject(Rating, required=True)
    title = String(max_length=200)
    content = Text(required=True)

    likes = HasMany(ReviewLike)
    like_count = Integer(default=0)

    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def content_must_not_be_blank(self):
        if self.content is not None and len(self.content.strip()) == 0:
            raise ValidationError({"content": ["Review content cannot be empty"]})

    @invariant.post
    def each_user_likes_at_most_once(self):
        likers = [str(like.user_id) for like in self.likes]
        if len(likers) != len(set(likers)):
            raise ValidationError({"likes": ["A user can like a review only once"]})

    @invariant.post
    def like_count_matches_likes(self):
        if self.like_count != len(self.likes):
            raise ValidationError({"like_count": ["Like count must equal the number of likes"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, product_id, user_id, rating, content, title=None):
        """Write a new review with no likes."""
        now = datetime.now(UTC)

        review = cls(
            product_id=product_id,
            user_id=user_id,
            rating=Rating(score=rating),
            title=title,
            content=content,
            like_count=0,
            created_at=now,
            updated_at=now,
        )

        review.raise_(
            ReviewCreated(
                review_id=str(review.id),
                product_id=str(product_id),
                user_id=str(user_id),
                rating=rating,
                title=title,
                content=content,
                created_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Likes
    # -------------------------------------------------------------------
    def likers(self) -> set[str]:
        return {str(like.user_id) for like in self.likes}

    def add_like(self, user_id) -> int:
        """Like the review on behalf of ``user_id``. Returns the like count."""
        if str(user_id) in self.likers():
            return self.like_count

        now = datetime.now(UTC)
        with atomic_change(self):
            self.add_likes(ReviewLike(user_id=user_id, liked_at=now))
            self.like_count = len(self.likes)
            self.updated_at = now

        self.raise_(
            ReviewLiked(
                review_id=str(self.id),
                user_id=str(user_id),
                like_count=self.like_count,
                liked_at=now,
            )
        )
        return self.like_count

    def remove_like(self, user_id) -> int:
        """Withdraw ``user_id``'s like, if any. Returns the like count."""
        like = next((lk for lk in self.likes if str(lk.user_id) == str(user_id)), None)
        if like is None:
            return self.like_count

        now = datetime.now(UTC)
        with atomic_change(self):
            self.remove_likes(like)
            self.like_count = len(self.likes)
            self.updated_at = now

        self.raise_(
            ReviewUnliked(
                review_id=str(self.id),
                user_id=str(user_id),
                like_count=self.like_count,
                unliked_at=now,
            )
        )
        return self.like_count
