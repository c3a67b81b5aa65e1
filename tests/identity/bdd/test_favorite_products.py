"""BDD tests for favorite products."""

from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/user_favorites.feature")


@given(parsers.cfparse('product "{product_id}" is a favorite'))
def product_is_favorite(user, product_id):
    user.add_favorite_product(product_id)
    user._events.clear()


@when(parsers.cfparse('the user adds product "{product_id}" to favorites'))
def add_favorite(user, product_id):
    user.add_favorite_product(product_id)


@when(parsers.cfparse('the user removes product "{product_id}" from favorites'))
def remove_favorite(user, product_id):
    user.remove_favorite_product(product_id)


@then(parsers.cfparse("the user has {count:d} favorite products"))
def user_has_favorites(user, count):
    assert len(user.favorites()) == count
