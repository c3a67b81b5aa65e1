"""In-process delivery of cross-domain events.

In production every domain publishes to the Redis broker and the Engine
(``src/server.py``) feeds the other domains' handlers. When the domains run
together in the web app on the inline broker, nothing crosses a domain
boundary on its own; publishers hand their payloads to this relay and the
app subscribes the receiving handlers to it.

Events are identified by their type string (``Identity.UserRegistered.v1``)
and travel as plain dicts, so no domain has to import another's classes.
Subscriber errors propagate to the publisher.
"""

from collections import defaultdict
from collections.abc import Callable

import structlog

logger = structlog.get_logger(__name__)

Subscriber = Callable[[dict], None]

_subscribers: dict[str, list[Subscriber]] = defaultdict(list)


def subscribe(event_type: str, subscriber: Subscriber) -> None:
    if subscriber not in _subscribers[event_type]:
        _subscribers[event_type].append(subscriber)


def clear_subscribers() -> None:
    _subscribers.clear()


def publish(event_type: str, payload: dict) -> int:
    """Deliver ``payload`` to every subscriber of ``event_type``. Returns the delivery count."""
    subscribers = list(_subscribers.get(event_type, ()))
    for subscriber in subscribers:
        subscriber(payload)
    if subscribers:
        logger.debug("Relayed event", event_type=event_type, subscribers=len(subscribers))
    return len(subscribers)
