"""User aggregate — the wallet and shipping address consulted at checkout.

The cart never owns a user. Checkout reads ``shipping_address`` to decide
whether the user can receive goods and debits ``wallet_balance`` to pay for
them; everything else about a user is managed here.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String

from cartwise import config
from cartwise.domain import cartwise
from cartwise.errors import INSUFFICIENT_BALANCE, InvalidInput


@cartwise.aggregate
class User:
    """A registered shopper with a wallet and a shipping address."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    wallet_balance: Float(min_value=0.0, default=config.DEFAULT_WALLET_MONEY)
    shipping_address: String(max_length=500, default=config.DEFAULT_ADDRESS)
    registered_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if not local_part or "." not in domain_part or " " in email or "@" in domain_part:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, name, email, wallet_balance=None):
        from cartwise.account.events import UserRegistered

        now = datetime.now(UTC)
        balance = config.DEFAULT_WALLET_MONEY if wallet_balance is None else wallet_balance
        user = cls(
            name=name.strip(),
            email=email.strip().lower(),
            wallet_balance=balance,
            shipping_address=config.DEFAULT_ADDRESS,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                name=user.name,
                wallet_balance=balance,
                registered_at=now,
            )
        )
        return user

    def has_set_non_default_address(self) -> bool:
        return bool(self.shipping_address) and self.shipping_address != config.DEFAULT_ADDRESS

    def change_shipping_address(self, address):
        from cartwise.account.events import ShippingAddressChanged

        self.shipping_address = address.strip()
        self.raise_(
            ShippingAddressChanged(
                user_id=str(self.id),
                shipping_address=self.shipping_address,
            )
        )

    def debit(self, amount):
        """Take ``amount`` out of the wallet; the balance never goes negative."""
        from cartwise.account.events import WalletDebited

        # Money is compared and stored in whole cents
        amount = round(amount, 2)
        if round(self.wallet_balance, 2) < amount:
            raise InvalidInput(INSUFFICIENT_BALANCE)

        previous_balance = self.wallet_balance
        self.wallet_balance = round(previous_balance - amount, 2)
        self.raise_(
            WalletDebited(
                user_id=str(self.id),
                amount=amount,
                previous_balance=previous_balance,
                new_balance=self.wallet_balance,
            )
        )


@cartwise.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email) -> User | None:
        return self._dao.query.filter(email=email.strip().lower()).all().first
