"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import Field
from shared.schemas import CamelModel

# --- Request Schemas ---


class CreateUserRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "firstName": "Jane",
                    "lastName": "Doe",
                    "email": "jane.doe@example.com",
                    "password": "correct-horse-battery",
                    "country": "Peru",
                    "city": "Lima",
                    "street": "Av. Primavera 2390",
                    "zip": "15023",
                }
            ]
        }
    }

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=72)
    country: str = Field(..., max_length=100)
    city: str = Field(..., max_length=100)
    street: str = Field(..., max_length=255)
    zip: str = Field(..., max_length=20)


# --- Response Schemas ---


class UserAddressResource(CamelModel):
    country: str
    city: str
    street: str
    zip: str


class UserResource(CamelModel):
    """Wire representation of a user. The credential is never exposed."""

    user_id: str
    first_name: str
    last_name: str
    email: str
    address: UserAddressResource
    favorite_products: list[str] = []

    @classmethod
    def from_user(cls, user) -> UserResource:
        return cls(
            user_id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.address,
            address=UserAddressResource(
                country=user.address.country,
                city=user.address.city,
                street=user.address.street,
                zip=user.address.zip,
            ),
            favorite_products=user.favorites(),
        )
