"""Cart operations — the entry points callers use to read and change carts.

Each mutating operation builds its command, then dispatches it while holding
the owner's lock, so the handler's load-modify-commit cycle never interleaves
with another request for the same owner. Typed ``CartwiseError`` rejections
pass through unchanged; persistence failures from the repository become
``Internal``.
"""

import structlog
from protean.exceptions import ExpectedVersionError, ValidationError
from protean.utils.globals import current_domain

from cartwise.cart.cart import Cart
from cartwise.cart.checkout import CheckOutCart
from cartwise.cart.items import AddItemToCart, DeleteCartItem, UpdateCartItem
from cartwise.errors import (
    CART_CREATION_FAILED,
    CART_NOT_FOUND,
    CART_SAVE_FAILED,
    CHECKOUT_FAILED,
    CartwiseError,
    Internal,
    NotFound,
)
from cartwise.utils.locking import owner_locks

logger = structlog.get_logger(__name__)


def get_cart(owner_id) -> Cart:
    cart = _find_cart(owner_id)
    if cart is None:
        raise NotFound(CART_NOT_FOUND)
    return cart


def add_item(owner_id, product_id, quantity) -> Cart:
    command = AddItemToCart(owner_id=owner_id, product_id=product_id, quantity=quantity)
    return _dispatch(command, owner_id, CART_SAVE_FAILED, creation_failure_message=CART_CREATION_FAILED)


def update_item(owner_id, product_id, quantity) -> Cart:
    command = UpdateCartItem(owner_id=owner_id, product_id=product_id, quantity=quantity)
    return _dispatch(command, owner_id, CART_SAVE_FAILED)


def delete_item(owner_id, product_id) -> None:
    command = DeleteCartItem(owner_id=owner_id, product_id=product_id)
    _dispatch(command, owner_id, CART_SAVE_FAILED)


def checkout(owner_id):
    """Settle the owner's cart against their wallet and return the updated user."""
    return _dispatch(CheckOutCart(owner_id=owner_id), owner_id, CHECKOUT_FAILED)


def _find_cart(owner_id):
    return current_domain.repository_for(Cart).find_by_owner(owner_id)


def _dispatch(command, owner_id, failure_message, creation_failure_message=None):
    operation = type(command).__name__
    with owner_locks.hold(owner_id):
        # Persistence failures surface when the unit of work commits, so
        # whether this command creates the cart is decided up front
        if creation_failure_message is not None and _find_cart(owner_id) is None:
            failure_message = creation_failure_message
        try:
            return current_domain.process(command, asynchronous=False)
        except CartwiseError as exc:
            logger.warning(
                "Cart operation rejected",
                operation=operation,
                owner_id=str(owner_id),
                kind=exc.kind.value,
                error=exc.message,
            )
            raise
        except (ExpectedVersionError, ValidationError) as exc:
            logger.error("Cart operation failed", operation=operation, owner_id=str(owner_id), error=str(exc))
            raise Internal(failure_message) from exc
