"""Cart item management — commands and handler.

The handler is the only place a cart is created: the first successful add
for an owner starts their cart with that single line item.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from cartwise.cart.cart import Cart
from cartwise.catalogue.product import Product
from cartwise.domain import cartwise
from cartwise.errors import (
    CART_MISSING_USE_CREATE,
    CART_NOT_FOUND,
    PRODUCT_DOES_NOT_EXIST,
    InvalidInput,
)

logger = structlog.get_logger(__name__)


@cartwise.command(part_of="Cart")
class AddItemToCart:
    owner_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@cartwise.command(part_of="Cart")
class UpdateCartItem:
    owner_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@cartwise.command(part_of="Cart")
class DeleteCartItem:
    owner_id = Identifier(required=True)
    product_id = Identifier(required=True)


@cartwise.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddItemToCart)
    def add_item_to_cart(self, command):
        carts = current_domain.repository_for(Cart)
        cart = carts.find_by_owner(command.owner_id)
        product = current_domain.repository_for(Product).find_by_id(command.product_id)
        if product is None:
            raise InvalidInput(PRODUCT_DOES_NOT_EXIST)

        if cart is None:
            cart = Cart.start(command.owner_id, product, command.quantity)
            carts.add(cart)
            logger.info("Cart created", owner_id=str(command.owner_id), product_id=str(product.id))
            return cart

        cart.add_item(product, command.quantity)
        carts.add(cart)
        logger.info(
            "Item added to cart",
            owner_id=str(command.owner_id),
            product_id=str(product.id),
            quantity=command.quantity,
        )
        return cart

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        carts = current_domain.repository_for(Cart)
        cart = carts.find_by_owner(command.owner_id)
        if cart is None:
            raise InvalidInput(CART_MISSING_USE_CREATE)

        if current_domain.repository_for(Product).find_by_id(command.product_id) is None:
            raise InvalidInput(PRODUCT_DOES_NOT_EXIST)

        cart.update_item_quantity(command.product_id, command.quantity)
        carts.add(cart)
        logger.info(
            "Cart item quantity updated",
            owner_id=str(command.owner_id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return cart

    @handle(DeleteCartItem)
    def delete_cart_item(self, command):
        carts = current_domain.repository_for(Cart)
        cart = carts.find_by_owner(command.owner_id)
        if cart is None:
            raise InvalidInput(CART_NOT_FOUND)

        cart.remove_item(command.product_id)
        carts.add(cart)
        logger.info(
            "Item removed from cart",
            owner_id=str(command.owner_id),
            product_id=str(command.product_id),
        )
