"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="User")
class UserRegistered:
    """A new user account was created on the platform."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    email: String(required=True)
    first_name: String(required=True)
    last_name: String(required=True)
    registered_at: DateTime(required=True)


@identity.event(part_of="User")
class FavoriteProductAdded:
    """A user marked a product as a favorite."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@identity.event(part_of="User")
class FavoriteProductRemoved:
    """A user removed a product from their favorites."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
