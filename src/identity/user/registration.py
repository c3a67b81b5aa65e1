"""User creation — command and handler.

Email addresses are unique across users. The UserLookup projection answers
the common case; when events are processed asynchronously it can lag behind
the write side, so the User repository is consulted as well. Two
registrations committed at the same instant in different workers can still
both pass: there is no unique index on the flattened email column.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.domain import identity, logger
from identity.projections.user_lookup import UserLookup
from identity.user.user import User


@identity.command(part_of="User")
class CreateUser:
    """Create a new user account with credentials and a postal address."""

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=72)
    country: String(required=True, max_length=100)
    city: String(required=True, max_length=100)
    street: String(required=True, max_length=255)
    zip: String(required=True, max_length=20)


def email_is_taken(email: str) -> bool:
    try:
        current_domain.repository_for(UserLookup).get(email)
        return True
    except ObjectNotFoundError:
        return bool(current_domain.repository_for(User).find_by_email(email))


@identity.command_handler(part_of=User)
class CreateUserHandler:
    @handle(CreateUser)
    def create_user(self, command):
        email = command.email.strip().lower()
        if email_is_taken(email):
            raise ValidationError({"email": ["A user with this email already exists"]})

        user = User.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=email,
            password=command.password,
            country=command.country,
            city=command.city,
            street=command.street,
            zip=command.zip,
        )
        current_domain.repository_for(User).add(user)
        logger.info("User created", user_id=str(user.id))
        return str(user.id)
