"""Shipping address management — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from cartwise.account.user import User
from cartwise.domain import cartwise
from cartwise.errors import USER_NOT_FOUND, NotFound


@cartwise.command(part_of="User")
class ChangeShippingAddress:
    user_id: Identifier(required=True)
    address: String(required=True, min_length=1, max_length=500)


@cartwise.command_handler(part_of=User)
class ChangeShippingAddressHandler:
    @handle(ChangeShippingAddress)
    def change_shipping_address(self, command):
        repo = current_domain.repository_for(User)
        try:
            user = repo.get(command.user_id)
        except ObjectNotFoundError:
            raise NotFound(USER_NOT_FOUND) from None

        user.change_shipping_address(command.address)
        repo.add(user)
        return user
