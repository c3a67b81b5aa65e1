"""Repository for the User aggregate with lookup by email."""

from identity.domain import identity
from identity.user.user import User


@identity.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> list[User]:
        # EmailAddress is stored flattened as `email_address`
        return self._dao.query.filter(email_address=email).all().items
