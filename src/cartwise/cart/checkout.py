"""Checkout — pay for a cart out of the owner's wallet and empty it.

The checks run in a fixed order and the first failure wins:

1. the cart exists and has at least one line item,
2. the owner has replaced the default shipping address,
3. the wallet covers the cart total (priced from the cost captured in each
   line item, not from the live catalogue).

Only then is the wallet debited and the cart emptied. Both aggregates are
written in the handler's unit of work, so either both changes commit or
neither does.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from cartwise.account.user import User
from cartwise.cart.cart import Cart
from cartwise.domain import cartwise
from cartwise.errors import (
    ADDRESS_NOT_SET,
    CART_EMPTY,
    CART_NOT_FOUND,
    USER_NOT_FOUND,
    InvalidInput,
    NotFound,
)

logger = structlog.get_logger(__name__)


@cartwise.command(part_of="Cart")
class CheckOutCart:
    owner_id = Identifier(required=True)


@cartwise.command_handler(part_of=Cart)
class CheckOutCartHandler:
    @handle(CheckOutCart)
    def check_out_cart(self, command):
        carts = current_domain.repository_for(Cart)
        users = current_domain.repository_for(User)

        cart = carts.find_by_owner(command.owner_id)
        if cart is None:
            raise NotFound(CART_NOT_FOUND)
        if not cart.items:
            raise InvalidInput(CART_EMPTY)

        try:
            user = users.get(command.owner_id)
        except ObjectNotFoundError:
            raise NotFound(USER_NOT_FOUND) from None

        if not user.has_set_non_default_address():
            raise InvalidInput(ADDRESS_NOT_SET)

        total = cart.total()
        user.debit(total)
        cart.check_out(total)

        users.add(user)
        carts.add(cart)

        logger.info(
            "Cart checked out",
            owner_id=str(command.owner_id),
            total=total,
            wallet_balance=user.wallet_balance,
        )
        return user
