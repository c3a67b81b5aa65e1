"""Favorite products: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User


@identity.command(part_of="User")
class AddFavoriteProduct:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@identity.command(part_of="User")
class RemoveFavoriteProduct:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@identity.command_handler(part_of=User)
class ManageFavoritesHandler:
    @handle(AddFavoriteProduct)
    def add_favorite_product(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.add_favorite_product(command.product_id)
        repo.add(user)

    @handle(RemoveFavoriteProduct)
    def remove_favorite_product(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_favorite_product(command.product_id)
        repo.add(user)
