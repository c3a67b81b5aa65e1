"""Domain events for the Review aggregate.

All events are versioned, immutable facts representing state changes.
Like events are raised only when the set of likers actually changes.
"""

from protean.fields import DateTime, Identifier, Integer, String, Text

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewCreated:
    """A user wrote a new product review."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    title = String()
    content = Text(required=True)
    created_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewLiked:
    """A user liked a review."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    like_count = Integer(required=True)
    liked_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewUnliked:
    """A user withdrew their like from a review."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    like_count = Integer(required=True)
    unliked_at = DateTime(required=True)
