"""User registration — command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from cartwise.account.user import User
from cartwise.domain import cartwise
from cartwise.errors import EMAIL_TAKEN, Conflict


@cartwise.command(part_of="User")
class RegisterUser:
    """Open an account with the default wallet money and no shipping address."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    wallet_balance: Float(min_value=0.0)


@cartwise.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise Conflict(EMAIL_TAKEN)

        user = User.register(
            name=command.name,
            email=command.email,
            wallet_balance=command.wallet_balance,
        )
        repo.add(user)
        return str(user.id)
