"""Domain events for the User aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from cartwise.domain import cartwise


@cartwise.event(part_of="User")
class UserRegistered:
    """A new user account was created."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String(required=True)
    wallet_balance: Float(required=True)
    registered_at: DateTime(required=True)


@cartwise.event(part_of="User")
class ShippingAddressChanged:
    """A user replaced their shipping address."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    shipping_address: String(required=True)


@cartwise.event(part_of="User")
class WalletDebited:
    """Money was taken out of a user's wallet to pay for a checkout."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    amount: Float(required=True)
    previous_balance: Float(required=True)
    new_balance: Float(required=True)
