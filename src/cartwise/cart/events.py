"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer

from cartwise.domain import cartwise


@cartwise.event(part_of="Cart")
class CartCreated:
    """A user's first successful add created their cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    owner_id = Identifier(required=True)


@cartwise.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart as a new line item."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    cost = Float(required=True)


@cartwise.event(part_of="Cart")
class CartItemQuantityUpdated:
    """The quantity of a line item was replaced."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@cartwise.event(part_of="Cart")
class CartItemRemoved:
    """A line item was removed from the cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@cartwise.event(part_of="Cart")
class CartCheckedOut:
    """The cart was paid for and emptied."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    total = Float(required=True)
    item_count = Integer(required=True)
