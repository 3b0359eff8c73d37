import os

import pytest


@pytest.fixture(scope="session")
def _cartwise_domain(request):
    """Initialize the cartwise domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from cartwise.domain import cartwise

    cartwise.init()
    return cartwise


@pytest.fixture(scope="session", autouse=True)
def setup_db(_cartwise_domain):
    from cartwise.utils.db import drop_db, setup_db

    setup_db(_cartwise_domain)

    yield

    drop_db(_cartwise_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_cartwise_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _cartwise_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    from cartwise.catalogue.product import Product
    from protean import current_domain

    def _make(name="Tea", cost=100.0, **kwargs):
        product = Product.create(name=name, cost=cost, **kwargs)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def make_user():
    from cartwise.account.user import User
    from protean import current_domain

    counter = {"n": 0}

    def _make(wallet_balance=500.0, address=None, email=None):
        counter["n"] += 1
        user = User.register(
            name=f"Shopper {counter['n']}",
            email=email or f"shopper{counter['n']}@example.com",
            wallet_balance=wallet_balance,
        )
        if address is not None:
            user.change_shipping_address(address)
        current_domain.repository_for(User).add(user)
        return user

    return _make
