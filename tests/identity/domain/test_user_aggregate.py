"""Tests for the User aggregate: registration, credentials and favorites."""

import pytest
from identity.user.user import User, UserAddress
from protean.exceptions import ValidationError
from protean.utils import DomainObjects
from protean.utils.reflection import declared_fields


def _register(**overrides):
    defaults = {
        "first_name": "Ana",
        "last_name": "Quispe",
        "email": "ana@example.com",
        "password": "s3cret-passw0rd",
        "country": "Peru",
        "city": "Lima",
        "street": "Av. Arequipa 123",
        "zip": "15001",
    }
    defaults.update(overrides)
    return User.register(**defaults)


def test_user_aggregate_element_type():
    assert User.element_type == DomainObjects.AGGREGATE


def test_user_aggregate_has_defined_fields():
    assert all(
        field_name in declared_fields(User)
        for field_name in ["first_name", "last_name", "email", "password_hash", "address", "favorite_products"]
    )


class TestRegistration:
    def test_register_sets_profile_and_address(self):
        user = _register()
        assert user.first_name == "Ana"
        assert user.last_name == "Quispe"
        assert user.address == UserAddress(country="Peru", city="Lima", street="Av. Arequipa 123", zip="15001")
        assert user.favorites() == []

    def test_email_is_normalized(self):
        user = _register(email="  Ana.Q@Example.COM ")
        assert user.email.address == "ana.q@example.com"

    def test_password_is_hashed(self):
        user = _register(password="s3cret-passw0rd")
        assert user.password_hash != "s3cret-passw0rd"
        assert user.verify_password("s3cret-passw0rd")
        assert not user.verify_password("wrong-password")

    def test_register_raises_user_registered(self):
        user = _register()
        assert len(user._events) == 1
        event = user._events[0]
        assert event.__class__.__name__ == "UserRegistered"
        assert str(event.user_id) == str(user.id)
        assert event.email == "ana@example.com"

    @pytest.mark.parametrize(
        "field", ["first_name", "last_name", "email", "password", "country", "city", "street", "zip"]
    )
    def test_missing_field_is_rejected(self, field):
        with pytest.raises(ValidationError) as exc:
            _register(**{field: None})
        assert field in str(exc.value)

    def test_blank_field_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _register(city="   ")
        assert "city" in str(exc.value)

    def test_short_password_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _register(password="short")
        assert "password" in str(exc.value)

    def test_password_over_72_bytes_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _register(password="x" * 73)
        assert "at most 72 bytes" in str(exc.value)

    def test_password_limit_counts_bytes_not_characters(self):
        with pytest.raises(ValidationError):
            _register(password="ü" * 37)

    def test_password_of_exactly_72_bytes_is_accepted(self):
        user = _register(password="x" * 72)
        assert user.verify_password("x" * 72)

    def test_invalid_email_is_rejected(self):
        with pytest.raises(ValidationError):
            _register(email="not-an-email")


class TestFavorites:
    def test_add_favorite_product(self):
        user = _register()
        user._events.clear()
        user.add_favorite_product("prod-001")
        assert user.favorites() == ["prod-001"]
        assert user._events[0].__class__.__name__ == "FavoriteProductAdded"

    def test_adding_same_favorite_twice_is_noop(self):
        user = _register()
        user.add_favorite_product("prod-001")
        user._events.clear()
        user.add_favorite_product("prod-001")
        assert user.favorites() == ["prod-001"]
        assert len(user._events) == 0

    def test_remove_favorite_product(self):
        user = _register()
        user.add_favorite_product("prod-001")
        user.add_favorite_product("prod-002")
        user._events.clear()
        user.remove_favorite_product("prod-001")
        assert user.favorites() == ["prod-002"]
        assert user._events[0].__class__.__name__ == "FavoriteProductRemoved"

    def test_removing_absent_favorite_is_noop(self):
        user = _register()
        user._events.clear()
        user.remove_favorite_product("prod-404")
        assert user.favorites() == []
        assert len(user._events) == 0
