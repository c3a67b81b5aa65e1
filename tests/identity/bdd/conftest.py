"""Shared BDD fixtures and step definitions for the Identity domain."""

import pytest
from identity.user.events import FavoriteProductAdded, FavoriteProductRemoved, UserRegistered
from identity.user.user import User
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "UserRegistered": UserRegistered,
    "FavoriteProductAdded": FavoriteProductAdded,
    "FavoriteProductRemoved": FavoriteProductRemoved,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("a registered user", target_fixture="user")
def registered_user():
    user = User.register(
        first_name="Test",
        last_name="User",
        email="test@example.com",
        password="s3cret-pass",
        country="Slovakia",
        city="Bratislava",
        street="Hlavna 1",
        zip="81101",
    )
    user._events.clear()
    return user


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(user, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in user._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in user._events]}"


@then("no events are raised")
def no_events_raised(user):
    assert user._events == []
