"""Application tests for checkout: ordering of checks and all-or-nothing settlement."""

from unittest.mock import patch

import pytest
from cartwise.account.user import User, UserRepository
from cartwise.cart import operations
from cartwise.cart.cart import Cart, CartRepository
from cartwise.errors import (
    ADDRESS_NOT_SET,
    CART_EMPTY,
    CART_NOT_FOUND,
    CHECKOUT_FAILED,
    INSUFFICIENT_BALANCE,
    USER_NOT_FOUND,
    ErrorKind,
    Internal,
    InvalidInput,
    NotFound,
)
from protean import current_domain
from protean.exceptions import ExpectedVersionError

ADDRESS = "221B Baker Street, London NW1 6XE"


@pytest.fixture()
def stocked_cart(make_product):
    """Return a callable that fills ``owner_id``'s cart with 2 x 100 and 1 x 50."""

    def _fill(owner_id):
        operations.add_item(owner_id, make_product(name="Tea", cost=100.0).id, 2)
        operations.add_item(owner_id, make_product(name="Mug", cost=50.0).id, 1)

    return _fill


def _reload(user):
    return current_domain.repository_for(User).get(user.id)


def _stored_cart(user):
    return current_domain.repository_for(Cart).find_by_owner(user.id)


class TestSuccessfulCheckout:
    def test_debits_wallet_and_empties_cart(self, make_user, stocked_cart):
        user = make_user(wallet_balance=300.0, address=ADDRESS)
        stocked_cart(user.id)

        result = operations.checkout(user.id)

        assert result.wallet_balance == 50.0
        assert _reload(user).wallet_balance == 50.0
        cart = _stored_cart(user)
        assert cart is not None
        assert len(cart.items) == 0

    def test_exact_balance_is_enough(self, make_user, stocked_cart):
        user = make_user(wallet_balance=250.0, address=ADDRESS)
        stocked_cart(user.id)

        assert operations.checkout(user.id).wallet_balance == 0.0

    def test_fractional_prices_settle_to_the_cent(self, make_user, make_product):
        user = make_user(wallet_balance=0.3, address=ADDRESS)
        operations.add_item(user.id, make_product(name="Sweet", cost=0.1).id, 3)

        assert operations.checkout(user.id).wallet_balance == 0.0

    def test_prices_from_the_captured_cost(self, make_user, make_product):
        from cartwise.catalogue.product import Product

        user = make_user(wallet_balance=300.0, address=ADDRESS)
        product = make_product(cost=100.0)
        operations.add_item(user.id, product.id, 2)

        repo = current_domain.repository_for(Product)
        product = repo.get(product.id)
        product.cost = 1000.0
        repo.add(product)

        assert operations.checkout(user.id).wallet_balance == 100.0

    def test_cart_can_be_refilled_after_checkout(self, make_user, make_product, stocked_cart):
        user = make_user(wallet_balance=1000.0, address=ADDRESS)
        stocked_cart(user.id)
        operations.checkout(user.id)

        operations.add_item(user.id, make_product(name="Pot", cost=10.0).id, 1)

        assert len(operations.get_cart(user.id).items) == 1


class TestRejectedCheckout:
    def test_without_cart(self, make_user):
        user = make_user(wallet_balance=300.0, address=ADDRESS)
        with pytest.raises(NotFound) as exc:
            operations.checkout(user.id)
        assert exc.value.message == CART_NOT_FOUND

    def test_empty_cart_is_checked_before_address_and_balance(self, make_user, make_product):
        # Default address and an empty wallet: only the empty cart may be reported
        user = make_user(wallet_balance=0.0)
        product = make_product()
        operations.add_item(user.id, product.id, 1)
        operations.delete_item(user.id, product.id)

        with pytest.raises(InvalidInput) as exc:
            operations.checkout(user.id)
        assert exc.value.message == CART_EMPTY

    def test_address_not_set(self, make_user, stocked_cart):
        user = make_user(wallet_balance=10_000.0)
        stocked_cart(user.id)

        with pytest.raises(InvalidInput) as exc:
            operations.checkout(user.id)

        assert exc.value.kind == ErrorKind.INVALID_INPUT
        assert exc.value.message == ADDRESS_NOT_SET
        assert _reload(user).wallet_balance == 10_000.0
        assert len(_stored_cart(user).items) == 2

    def test_address_check_stops_before_pricing(self, make_user, stocked_cart):
        user = make_user(wallet_balance=0.0)
        stocked_cart(user.id)

        with patch.object(Cart, "total") as total:
            with pytest.raises(InvalidInput) as exc:
                operations.checkout(user.id)

        assert exc.value.message == ADDRESS_NOT_SET
        total.assert_not_called()

    def test_insufficient_balance_changes_nothing(self, make_user, stocked_cart):
        user = make_user(wallet_balance=200.0, address=ADDRESS)
        stocked_cart(user.id)

        with pytest.raises(InvalidInput) as exc:
            operations.checkout(user.id)

        assert exc.value.message == INSUFFICIENT_BALANCE
        assert _reload(user).wallet_balance == 200.0
        cart = _stored_cart(user)
        assert len(cart.items) == 2
        assert cart.total() == 250.0

    def test_cart_without_registered_user(self, make_product):
        operations.add_item("ghost-user", make_product().id, 1)

        with pytest.raises(NotFound) as exc:
            operations.checkout("ghost-user")
        assert exc.value.message == USER_NOT_FOUND


class TestSettlementAtomicity:
    def test_failed_cart_write_rolls_back_the_debit(self, make_user, stocked_cart):
        user = make_user(wallet_balance=300.0, address=ADDRESS)
        stocked_cart(user.id)

        with patch.object(CartRepository, "add", side_effect=ExpectedVersionError("stale cart")):
            with pytest.raises(Internal) as exc:
                operations.checkout(user.id)

        assert exc.value.kind == ErrorKind.INTERNAL
        assert exc.value.message == CHECKOUT_FAILED
        assert _reload(user).wallet_balance == 300.0
        assert len(_stored_cart(user).items) == 2

    def test_failed_wallet_write_leaves_the_cart_alone(self, make_user, stocked_cart):
        user = make_user(wallet_balance=300.0, address=ADDRESS)
        stocked_cart(user.id)

        with patch.object(UserRepository, "add", side_effect=ExpectedVersionError("stale user")):
            with pytest.raises(Internal):
                operations.checkout(user.id)

        assert _reload(user).wallet_balance == 300.0
        assert len(_stored_cart(user).items) == 2
