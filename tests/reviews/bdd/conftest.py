"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from reviews.review.events import ReviewCreated, ReviewLiked, ReviewUnliked
from reviews.review.review import Review

_REVIEW_EVENT_CLASSES = {
    "ReviewCreated": ReviewCreated,
    "ReviewLiked": ReviewLiked,
    "ReviewUnliked": ReviewUnliked,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a review by user "{user_id}"'), target_fixture="review")
def review_by_user(user_id):
    review = Review.create(
        product_id="prod-bdd",
        user_id=user_id,
        rating=4,
        title="BDD Test Review",
        content="Sturdy, quiet and easy to set up.",
    )
    review._events.clear()
    return review


@given(parsers.cfparse('user "{user_id}" has liked the review'))
def user_has_liked(review, user_id):
    review.add_like(user_id)
    review._events.clear()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the review like count is {count:d}"))
def review_like_count(review, count):
    assert review.like_count == count
    assert len(review.likes) == count


@then(parsers.cfparse('the review is liked by "{user_id}"'))
def review_is_liked_by(review, user_id):
    assert user_id in review.likers()


@then(parsers.cfparse('the review is not liked by "{user_id}"'))
def review_is_not_liked_by(review, user_id):
    assert user_id not in review.likers()


@then("the review action fails with a validation error")
def review_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} event is raised"))
def review_event_raised(review, event_type):
    event_cls = _REVIEW_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in review._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in review._events]}"


@then("no events are raised")
def no_events_raised(review):
    assert review._events == []
