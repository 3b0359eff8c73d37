"""Shared BDD fixtures and step definitions for carts and checkout."""

import pytest
from cartwise.cart import operations
from cartwise.errors import CartwiseError
from pytest_bdd import given, parsers, then, when

DEFAULT_OWNER = "user-001"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def products():
    """Products created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def owner():
    """Holds the id of the user the scenario acts for."""
    return {"id": DEFAULT_OWNER}


@pytest.fixture()
def error():
    """Container for the rejection captured by a When step."""
    return {"exc": None}


@pytest.fixture()
def attempt(error):
    """Run an operation, capturing a typed rejection instead of raising it."""

    def _attempt(operation, *args):
        try:
            return operation(*args)
        except CartwiseError as exc:
            error["exc"] = exc
            return None

    return _attempt


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" costing {cost:g}'))
def a_product(make_product, products, name, cost):
    products[name] = make_product(name=name, cost=float(cost))


@given(parsers.cfparse("a user with {balance:g} in their wallet"))
def a_user(make_user, owner, balance):
    owner["id"] = str(make_user(wallet_balance=float(balance)).id)


@given("the user has set their shipping address")
def user_has_address(owner):
    from cartwise.account.operations import change_shipping_address

    change_shipping_address(owner["id"], "221B Baker Street, London NW1 6XE")


@given(parsers.cfparse('the user\'s cart holds {quantity:d} of "{name}"'))
def cart_holds(owner, products, quantity, name):
    operations.add_item(owner["id"], products[name].id, quantity)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the user removes "{name}" from the cart'))
@when(parsers.cfparse('the user removes "{name}" from the cart'))
def remove_from_cart(owner, products, attempt, name):
    attempt(operations.delete_item, owner["id"], products[name].id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the request is rejected as "{kind}" with "{message}"'))
def request_rejected(error, kind, message):
    assert error["exc"] is not None
    assert error["exc"].kind.value == kind
    assert error["exc"].message == message


@then(parsers.cfparse("the cart has {count:d} line items"))
def cart_has_items(owner, count):
    assert len(operations.get_cart(owner["id"]).items) == count


@then(parsers.cfparse('the cart holds {quantity:d} of "{name}"'))
def cart_holds_quantity(owner, products, quantity, name):
    cart = operations.get_cart(owner["id"])
    item = cart.find_item(products[name].id)
    assert item is not None
    assert item.quantity == quantity
