"""User aggregate root with the UserAddress value object."""

import json
from datetime import datetime

import bcrypt
from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text, ValueObject

from identity.domain import identity
from identity.shared.email import EmailAddress

_MIN_PASSWORD_LENGTH = 8
_MAX_PASSWORD_BYTES = 72  # bcrypt only reads the first 72 bytes


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def _require(**values):
    """Collect every missing or blank field into a single ValidationError."""
    errors = {
        name: [f"{name} is required"]
        for name, value in values.items()
        if value is None or (isinstance(value, str) and not value.strip())
    }
    if errors:
        raise ValidationError(errors)


@identity.value_object(part_of="User")
class UserAddress:
    """Postal address of a user. Replaced wholesale on change."""

    country: String(required=True, max_length=100)
    city: String(required=True, max_length=100)
    street: String(required=True, max_length=255)
    zip: String(required=True, max_length=20)


@identity.aggregate
class User:
    """A registered person who can shop, write reviews and like them.

    The raw credential never leaves the factory: only its bcrypt hash is
    stored. Favorite products are kept as a JSON array of product ids with
    set semantics.
    """

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: ValueObject(EmailAddress, required=True)
    password_hash: String(required=True, max_length=255)
    address: ValueObject(UserAddress, required=True)
    favorite_products: Text()  # JSON array of product ids
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def favorite_products_must_be_unique(self):
        favorites = self.favorites()
        if len(favorites) != len(set(favorites)):
            raise ValidationError({"favorite_products": ["A product can only be a favorite once"]})

    @classmethod
    def register(cls, first_name, last_name, email, password, country, city, street, zip):
        from identity.user.events import UserRegistered

        _require(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            country=country,
            city=city,
            street=street,
            zip=zip,
        )
        if len(password) < _MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {_MIN_PASSWORD_LENGTH} characters"]})
        if len(password.encode("utf-8")) > _MAX_PASSWORD_BYTES:
            raise ValidationError({"password": [f"Password must be at most {_MAX_PASSWORD_BYTES} bytes"]})

        normalized_email = email.strip().lower()
        now = datetime.now()

        user = cls(
            first_name=first_name,
            last_name=last_name,
            email=EmailAddress(address=normalized_email),
            password_hash=hash_password(password),
            address=UserAddress(country=country, city=city, street=street, zip=zip),
            favorite_products=json.dumps([]),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=normalized_email,
                first_name=first_name,
                last_name=last_name,
                registered_at=now,
            )
        )
        return user

    def verify_password(self, password: str) -> bool:
        return bcrypt.checkpw(password.encode(), self.password_hash.encode())

    def favorites(self) -> list[str]:
        return json.loads(self.favorite_products) if self.favorite_products else []

    def add_favorite_product(self, product_id):
        """Mark a product as favorite. Adding an existing favorite is a no-op."""
        from identity.user.events import FavoriteProductAdded

        favorites = self.favorites()
        if str(product_id) in favorites:
            return

        favorites.append(str(product_id))
        self.favorite_products = json.dumps(favorites)
        self.raise_(FavoriteProductAdded(user_id=self.id, product_id=str(product_id)))

    def remove_favorite_product(self, product_id):
        """Unmark a favorite product. Removing an absent favorite is a no-op."""
        from identity.user.events import FavoriteProductRemoved

        favorites = self.favorites()
        if str(product_id) not in favorites:
            return

        favorites.remove(str(product_id))
        self.favorite_products = json.dumps(favorites)
        self.raise_(FavoriteProductRemoved(user_id=self.id, product_id=str(product_id)))
