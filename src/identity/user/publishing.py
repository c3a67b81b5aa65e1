"""Hands User events to the other domains running in this process.

Payloads match the contracts in shared.events.identity.
"""

from protean import handle
from shared import event_relay

from identity.domain import identity
from identity.user.events import UserRegistered
from identity.user.user import User

USER_REGISTERED = "Identity.UserRegistered.v1"


@identity.event_handler(part_of=User)
class UserEventsPublisher:
    @handle(UserRegistered)
    def publish_user_registered(self, event: UserRegistered) -> None:
        event_relay.publish(
            USER_REGISTERED,
            {
                "user_id": str(event.user_id),
                "email": event.email,
                "first_name": event.first_name,
                "last_name": event.last_name,
                "registered_at": event.registered_at,
            },
        )
