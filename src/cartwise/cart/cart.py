"""Cart aggregate — one per user, holding at most one line item per product.

A cart does not exist until its owner's first successful add. From then on
it is never deleted by the cart operations: checkout only empties it. The
cart's identity is its owner's user id, so a user can never end up with two.

Each line item keeps a snapshot of the product's name and cost taken when it
was added; checkout prices the cart from that snapshot.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from cartwise.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from cartwise.domain import cartwise
from cartwise.errors import PRODUCT_ALREADY_IN_CART, PRODUCT_NOT_IN_CART, Conflict, InvalidInput


@cartwise.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    cost = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def subtotal(self):
        return self.quantity * self.cost


@cartwise.aggregate
class Cart:
    owner_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def product_can_appear_only_once(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def start(cls, owner_id, product, quantity):
        """Create a user's cart holding a single line item."""
        now = datetime.now(UTC)
        cart = cls(
            id=str(owner_id),
            owner_id=str(owner_id),
            created_at=now,
            updated_at=now,
        )
        cart.raise_(CartCreated(cart_id=str(cart.id), owner_id=str(owner_id)))
        cart.add_item(product, quantity)
        return cart

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        """Return the line item for ``product_id``, or ``None``."""
        return next(
            (item for item in self.items if str(item.product_id) == str(product_id)),
            None,
        )

    def total(self):
        """Sum of quantity times captured cost, rounded to cents."""
        return round(sum(item.quantity * item.cost for item in self.items), 2)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product, quantity):
        """Append ``product`` as a new line item; a product can only be added once."""
        if self.find_item(product.id) is not None:
            raise Conflict(PRODUCT_ALREADY_IN_CART)

        now = datetime.now(UTC)
        self.add_items(
            CartItem(
                product_id=str(product.id),
                product_name=product.name,
                cost=product.cost,
                quantity=quantity,
                added_at=now,
            )
        )
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product.id),
                quantity=quantity,
                cost=product.cost,
            )
        )

    def update_item_quantity(self, product_id, new_quantity):
        """Replace the quantity of an existing line item."""
        item = self.find_item(product_id)
        if item is None:
            raise InvalidInput(PRODUCT_NOT_IN_CART)

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        """Remove the single line item matching ``product_id``."""
        item = self.find_item(product_id)
        if item is None:
            raise InvalidInput(PRODUCT_NOT_IN_CART)

        # Entities are removed by identity, so another item with the same
        # quantity is never touched.
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def check_out(self, total):
        """Empty the cart after its owner has paid ``total``."""
        item_count = len(self.items)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                owner_id=str(self.owner_id),
                total=total,
                item_count=item_count,
            )
        )


@cartwise.repository(part_of=Cart)
class CartRepository:
    def find_by_owner(self, owner_id) -> Cart | None:
        """Return the owner's cart, or ``None`` if they have never added anything."""
        try:
            return self.get(str(owner_id))
        except ObjectNotFoundError:
            return None
