"""Cross-domain event contracts for Reviews domain events.

These classes define the event shape for consumption by other domains
(e.g., the Catalogue domain to show review counts, or a recommendations
service to learn which reviews users found useful). They are registered as
external events via domain.register_external_event() with matching __type__
strings so Protean's stream deserialization works correctly.

The source-of-truth events are in src/reviews/review/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, Integer


class ReviewCreated(BaseEvent):
    """A user wrote a new review for a product."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    created_at = DateTime(required=True)


class ReviewLiked(BaseEvent):
    """A user liked a review."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    like_count = Integer(required=True)
    liked_at = DateTime(required=True)


class ReviewUnliked(BaseEvent):
    """A user withdrew their like from a review."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    like_count = Integer(required=True)
    unliked_at = DateTime(required=True)
