"""User operations used by the HTTP surface."""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from cartwise.account.address import ChangeShippingAddress
from cartwise.account.registration import RegisterUser
from cartwise.account.user import User
from cartwise.errors import EMAIL_TAKEN, USER_NOT_FOUND, Conflict, NotFound
from cartwise.utils.locking import owner_locks


def register_user(name, email, wallet_balance=None) -> str:
    command = RegisterUser(name=name, email=email, wallet_balance=wallet_balance)
    try:
        return current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        # A concurrent registration committed the same email between the
        # handler's lookup and this commit
        if "email" in exc.messages and current_domain.repository_for(User).find_by_email(email) is not None:
            raise Conflict(EMAIL_TAKEN) from exc
        raise


def get_user(user_id) -> User:
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise NotFound(USER_NOT_FOUND) from None


def change_shipping_address(user_id, address) -> User:
    # Checkout writes the same user record under this lock
    command = ChangeShippingAddress(user_id=user_id, address=address)
    with owner_locks.hold(user_id):
        return current_domain.process(command, asynchronous=False)
